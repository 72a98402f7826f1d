"""
Timestamp masking.

Reduces event timestamps to the enclosing hour plus a small, low-information
offset so stored events cannot be correlated by their precise time.
"""

import math
import time
from typing import Callable, Optional, Union

from ..config.constants import MAX_PADDING_MS, MS_PER_HOUR

Number = Union[int, float]
Padding = Union[None, int, float, str]

_PREFIXED_BASES = {"0x": 16, "0o": 8, "0b": 2}
_DIGITS = "0123456789abcdef"


def _parse_numeric_string(value: str) -> Optional[Number]:
    """Parse a string the way a JavaScript Number() coercion would."""
    text = value.strip()
    if not text:
        return 0

    prefix = text[:2].lower()
    if prefix in _PREFIXED_BASES:
        base = _PREFIXED_BASES[prefix]
        digits = text[2:].lower()
        if not digits or any(c not in _DIGITS[:base] for c in digits):
            return None
        return int(digits, base)

    # float() also takes digit separators and non-ASCII digits
    if "_" in text or not text.isascii():
        return None

    try:
        number = float(text)
    except ValueError:
        return None
    return int(number) if number.is_integer() else number


def coerce_padding(value: Padding) -> Optional[Number]:
    """
    Resolve a padding hint into a finite number of milliseconds.

    Accepts an absent value, a number, or a numeric string. Anything that
    does not resolve to a finite number (non-numeric strings, NaN,
    infinities, booleans, other types) is treated as absent.

    Args:
        value: Raw padding value as supplied by the client

    Returns:
        Padding in milliseconds, or None if absent
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        number = _parse_numeric_string(value)
    elif isinstance(value, (int, float)):
        number = value
    else:
        return None

    if number is None or not math.isfinite(number):
        return None
    return number


def mask_time(time_ms: Number, padding: Padding = None) -> Number:
    """
    Truncate a timestamp to its hour and add a bounded padding.

    With an explicit padding the result is the start of the hour plus the
    padding, clamped to [0, 24h]. Without one, the seconds-within-minute of
    the original timestamp are used as offset, which spreads events over a
    minute without keeping any sub-hour precision beyond that.

    Args:
        time_ms: Milliseconds since the epoch
        padding: Optional padding in milliseconds (number or numeric string)

    Returns:
        Masked timestamp in milliseconds since the epoch

    Examples:
        >>> mask_time(1_700_000_123_456, 0)
        1699999200000
        >>> mask_time(1_700_000_123_456)
        1699999223000
    """
    base_hour = (time_ms // MS_PER_HOUR) * MS_PER_HOUR

    resolved = coerce_padding(padding)
    if resolved is not None:
        return base_hour + min(max(resolved, 0), MAX_PADDING_MS)

    num_seconds = (time_ms - base_hour) // 1000
    return base_hour + (num_seconds % 60) * 1000


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


def get_masked_time(
    padding: Padding = None,
    now: Optional[Callable[[], Number]] = None,
) -> Number:
    """
    Mask the current time.

    Args:
        padding: Optional padding in milliseconds
        now: Clock returning milliseconds since the epoch (defaults to
             the wall clock); inject one for deterministic results

    Returns:
        Masked current timestamp in milliseconds
    """
    clock = now or _wall_clock_ms
    return mask_time(clock(), padding)
