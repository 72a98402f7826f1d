"""
Bot signature tables.

Loads the bot and spider signature tables from YAML and compiles their
regular expressions once, at configuration time, so request-time matching
is a plain scan over pre-compiled patterns.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..exceptions import SignatureTableError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class BotSignature:
    """A single bot signature: display name and its user-agent pattern."""

    user_agent: str
    regex: str
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Pattern is derived, so bypass the frozen guard once
        object.__setattr__(self, "pattern", re.compile(self.regex, re.IGNORECASE))

    def matches(self, user_agent: str) -> bool:
        """Check whether the signature matches a user-agent string."""
        return self.pattern.search(user_agent) is not None


class BotSignatureTable:
    """
    Ordered mapping from bot category to its signatures.

    Category order is significant: the first category holding a matching
    signature names the bot type. The table is immutable after construction.

    Example:
        table = BotSignatureTable.from_dict({"AI": [{"regex": "gptbot"}]})
        table.category_for("mozilla/5.0 (compatible; gptbot/1.0)")  # 'ai'
    """

    def __init__(self, categories: dict[str, list[BotSignature]]):
        self._categories: tuple[tuple[str, tuple[BotSignature, ...]], ...] = tuple(
            (name, tuple(signatures)) for name, signatures in categories.items()
        )

    @classmethod
    def from_dict(cls, categories: dict[str, Any]) -> "BotSignatureTable":
        """
        Build a table from a category -> signature list mapping.

        Each signature is a mapping with a ``regex`` key and an optional
        ``user_agent`` display name.

        Raises:
            SignatureTableError: If the structure or a regex is invalid
        """
        if not isinstance(categories, dict):
            raise SignatureTableError(
                "Bot signature categories must be a mapping",
                reason=f"got {type(categories).__name__}",
            )

        compiled: dict[str, list[BotSignature]] = {}
        for category, entries in categories.items():
            if not isinstance(entries, list):
                raise SignatureTableError(
                    f"Signatures for category '{category}' must be a list"
                )
            signatures = []
            for entry in entries:
                if not isinstance(entry, dict) or "regex" not in entry:
                    raise SignatureTableError(
                        f"Invalid signature in category '{category}'",
                        reason=f"entry {entry!r} has no regex",
                    )
                regex = str(entry["regex"])
                try:
                    signatures.append(
                        BotSignature(
                            user_agent=str(entry.get("user_agent", regex)),
                            regex=regex,
                        )
                    )
                except re.error as e:
                    raise SignatureTableError(
                        f"Invalid regex in category '{category}'",
                        reason=f"{regex!r}: {e}",
                    ) from e
            compiled[str(category)] = signatures

        return cls(compiled)

    @property
    def categories(self) -> list[str]:
        """Category names in evaluation order."""
        return [name for name, _ in self._categories]

    def signatures(self, category: str) -> list[BotSignature]:
        """Signatures of a category (empty list for unknown categories)."""
        for name, signatures in self._categories:
            if name == category:
                return list(signatures)
        return []

    def category_for(self, user_agent: str) -> Optional[str]:
        """
        Find the first category with a signature matching the user-agent.

        Args:
            user_agent: Lowercased user-agent string

        Returns:
            Lowercased category name, or None if nothing matches
        """
        for name, signatures in self._categories:
            if any(signature.matches(user_agent) for signature in signatures):
                return name.lower()
        return None

    def matches(self, user_agent: str) -> bool:
        """Check whether any signature in the table matches."""
        return self.category_for(user_agent) is not None

    def __len__(self) -> int:
        return sum(len(signatures) for _, signatures in self._categories)


class SpiderSignatureList:
    """Spider patterns compiled into a single case-insensitive alternation."""

    def __init__(self, patterns: list[str]):
        self.patterns = tuple(patterns)
        if self.patterns:
            joined = "|".join(f"(?:{p})" for p in self.patterns)
            self._regex: Optional[re.Pattern] = re.compile(joined, re.IGNORECASE)
        else:
            self._regex = None

    def is_spider(self, user_agent: str) -> bool:
        """Check whether a user-agent matches any spider pattern."""
        return self._regex is not None and self._regex.search(user_agent) is not None


# =============================================================================
# Loading
# =============================================================================


def _read_yaml(path: Optional[PathLike], default_name: str) -> tuple[Any, str]:
    """Read a YAML table, falling back to the file bundled with the package."""
    try:
        if path is None:
            source = resources.files("rum_collector.config") / "data" / default_name
            text = source.read_text(encoding="utf-8")
            origin = f"<bundled {default_name}>"
        else:
            text = Path(path).read_text(encoding="utf-8")
            origin = str(path)
        return yaml.safe_load(text), origin
    except OSError as e:
        raise SignatureTableError(
            "Cannot read signature table", path=path, reason=str(e)
        ) from e
    except yaml.YAMLError as e:
        raise SignatureTableError(
            "Signature table is not valid YAML", path=path, reason=str(e)
        ) from e


@lru_cache
def load_bot_signatures(path: Optional[PathLike] = None) -> BotSignatureTable:
    """
    Load and compile the bot signature table.

    The table file is a YAML mapping with a ``categories`` key. Results are
    cached per path, so the file is read and compiled once per process.

    Args:
        path: Optional path to a YAML table (bundled table if omitted)

    Returns:
        Compiled BotSignatureTable

    Raises:
        SignatureTableError: If the file is missing or malformed
    """
    data, origin = _read_yaml(path, "bots.yaml")
    if not isinstance(data, dict) or "categories" not in data:
        raise SignatureTableError(
            "Bot signature table must define 'categories'", path=path
        )
    try:
        table = BotSignatureTable.from_dict(data["categories"])
    except SignatureTableError as e:
        raise SignatureTableError(e.message, path=path, reason=e.reason) from e

    logger.info(
        f"Loaded {len(table)} bot signatures in "
        f"{len(table.categories)} categories from {origin}"
    )
    return table


@lru_cache
def load_spider_signatures(path: Optional[PathLike] = None) -> SpiderSignatureList:
    """
    Load and compile the spider signature list.

    The list file is a YAML mapping with a ``patterns`` key.

    Args:
        path: Optional path to a YAML list (bundled list if omitted)

    Returns:
        Compiled SpiderSignatureList

    Raises:
        SignatureTableError: If the file is missing or malformed
    """
    data, origin = _read_yaml(path, "spiders.yaml")
    if not isinstance(data, dict) or not isinstance(data.get("patterns"), list):
        raise SignatureTableError(
            "Spider signature list must define a 'patterns' list", path=path
        )
    patterns = [str(p) for p in data["patterns"]]
    try:
        spiders = SpiderSignatureList(patterns)
    except re.error as e:
        raise SignatureTableError(
            "Invalid spider pattern", path=path, reason=str(e)
        ) from e

    logger.info(f"Loaded {len(patterns)} spider signatures from {origin}")
    return spiders


def clear_signature_cache() -> None:
    """Clear cached signature tables (useful for testing)."""
    load_bot_signatures.cache_clear()
    load_spider_signatures.cache_clear()
