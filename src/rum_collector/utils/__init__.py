"""Classification and anonymization utilities for RUM request metadata."""

from .bot_classifier import (
    BotSignature,
    BotSignatureTable,
    SpiderSignatureList,
    clear_signature_cache,
    load_bot_signatures,
    load_spider_signatures,
)
from .checkpoints import is_valid_checkpoint
from .headers import Headers, as_headers
from .subsystem import extract_adobe_routing_info, get_forwarded_host, get_subsystem
from .time_utils import coerce_padding, get_masked_time, mask_time
from .url_utils import cleanurl
from .user_agent import (
    get_bot_type,
    get_desktop_os,
    get_masked_user_agent,
    get_mobile_os,
)

__all__ = [
    # Checkpoint vocabulary
    "is_valid_checkpoint",
    # Time masking
    "coerce_padding",
    "mask_time",
    "get_masked_time",
    # URL utilities
    "cleanurl",
    # Headers
    "Headers",
    "as_headers",
    # Client classification
    "get_masked_user_agent",
    "get_mobile_os",
    "get_desktop_os",
    "get_bot_type",
    # Bot signatures
    "BotSignature",
    "BotSignatureTable",
    "SpiderSignatureList",
    "load_bot_signatures",
    "load_spider_signatures",
    "clear_signature_cache",
    # Subsystem resolution
    "get_subsystem",
    "get_forwarded_host",
    "extract_adobe_routing_info",
]
