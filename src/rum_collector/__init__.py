"""
Request metadata classification and anonymization for a RUM collector.

Usage:
    from rum_collector import (
        cleanurl,
        get_masked_user_agent,
        get_subsystem,
        is_valid_checkpoint,
        mask_time,
    )

    is_valid_checkpoint("click")                      # True
    mask_time(1_700_000_123_456, 0)                   # 1699999200000
    cleanurl("https://u:p@example.com/a?b=1#c")       # 'https://example.com/a'
    get_masked_user_agent({"user-agent": "curl/8.0"}) # 'bot'
"""

from .exceptions import ClassificationError, ConfigurationError, SignatureTableError
from .pipeline import ClassifiedEvent, classify_event, classify_events
from .utils import (
    Headers,
    cleanurl,
    get_masked_time,
    get_masked_user_agent,
    get_subsystem,
    is_valid_checkpoint,
    load_bot_signatures,
    load_spider_signatures,
    mask_time,
)

__version__ = "1.0.0"

__all__ = [
    # Core operations
    "is_valid_checkpoint",
    "mask_time",
    "get_masked_time",
    "cleanurl",
    "get_masked_user_agent",
    "get_subsystem",
    "Headers",
    # Configuration data
    "load_bot_signatures",
    "load_spider_signatures",
    # Pipeline
    "ClassifiedEvent",
    "classify_event",
    "classify_events",
    # Exceptions
    "ClassificationError",
    "ConfigurationError",
    "SignatureTableError",
]
