"""
Case-insensitive, read-only view over HTTP request headers.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional, Union

HeaderSource = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


class Headers(Mapping):
    """
    Read-only header map with case-insensitive keys.

    Built from a mapping or from an iterable of (name, value) pairs. When
    a header name appears more than once the last value wins. The source
    is copied, never mutated.

    Example:
        headers = Headers({"User-Agent": "curl/8.0"})
        headers.get("user-agent")  # 'curl/8.0'
    """

    def __init__(self, source: Optional[HeaderSource] = None):
        self._items: dict[str, tuple[str, Any]] = {}
        if source is None:
            return
        pairs = source.items() if isinstance(source, Mapping) else source
        for name, value in pairs:
            self._items[str(name).lower()] = (str(name), value)

    def __getitem__(self, name: str) -> Any:
        return self._items[name.lower()][1]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._items

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def get(self, name: str, default: Any = None) -> Any:
        if not isinstance(name, str):
            return default
        item = self._items.get(name.lower())
        return default if item is None else item[1]

    def __repr__(self) -> str:
        return f"Headers({dict(self.items())!r})"


def _is_pair(item: Any) -> bool:
    return isinstance(item, (tuple, list)) and len(item) == 2


def as_headers(source: Any) -> Optional[Headers]:
    """
    Wrap a header source into a Headers view.

    Anything that is neither a mapping nor an iterable of (name, value)
    pairs counts as no headers at all.

    Args:
        source: Headers instance, mapping, iterable of pairs, or None

    Returns:
        Headers view, or None when no usable headers were supplied
    """
    if source is None:
        return None
    if isinstance(source, Headers):
        return source
    if isinstance(source, Mapping):
        return Headers(source)
    if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
        return None
    pairs = list(source)
    if not all(_is_pair(item) for item in pairs):
        return None
    return Headers(pairs)
