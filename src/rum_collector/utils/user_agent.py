"""
Client classification from request headers.

Maps request headers to one tag of a closed taxonomy:

    undefined
    desktop, desktop:windows, desktop:mac, desktop:linux, desktop:chromeos
    mobile, mobile:android, mobile:ipados, mobile:ios
    bot, bot:<category>, bot:monitoring

This is not a user-agent parser. Browser names and versions are dropped on
purpose; only the coarse client class survives.
"""

from typing import Any, Callable, Optional

from ..config.constants import (
    BOT_MARKERS,
    CLOUDFRONT_DESKTOP_VIEWER,
    CLOUDFRONT_MOBILE_VIEWER,
    CLOUDFRONT_SMARTTV_VIEWER,
    CLOUDFRONT_TABLET_VIEWER,
    MOBILE_MARKERS,
    MONITORING_HEADER,
    UNDEFINED,
    USER_AGENT_HEADER,
)
from .bot_classifier import (
    BotSignatureTable,
    SpiderSignatureList,
    load_bot_signatures,
    load_spider_signatures,
)
from .headers import as_headers

# CDN viewer hints, first match wins
_VIEWER_HINTS = (
    (CLOUDFRONT_DESKTOP_VIEWER, "desktop"),
    (CLOUDFRONT_MOBILE_VIEWER, "mobile"),
    (CLOUDFRONT_SMARTTV_VIEWER, "desktop"),
    (CLOUDFRONT_TABLET_VIEWER, "mobile"),
)


def get_mobile_os(user_agent: str) -> str:
    """
    Extract the mobile OS qualifier from a lowercased user-agent.

    Returns:
        One of ':android', ':ipados', ':ios' or ''
    """
    if "android" in user_agent:
        return ":android"
    elif "ipad" in user_agent:
        return ":ipados"
    elif "like mac os" in user_agent:
        return ":ios"
    return ""


def get_desktop_os(user_agent: str) -> str:
    """
    Extract the desktop OS qualifier from a lowercased user-agent.

    Returns:
        One of ':windows', ':mac', ':linux', ':chromeos' or ''
    """
    if "windows" in user_agent:
        return ":windows"
    elif "mac os" in user_agent:
        return ":mac"
    elif "linux" in user_agent:
        return ":linux"
    elif "x11; cros" in user_agent:
        return ":chromeos"
    return ""


def get_bot_type(user_agent: str, bot_table: Optional[BotSignatureTable] = None) -> str:
    """
    Determine the bot category of a lowercased user-agent.

    Args:
        user_agent: Lowercased user-agent string
        bot_table: Signature table (bundled table if omitted)

    Returns:
        ':<category>' for the first matching category, or '' if none matches
    """
    table = bot_table if bot_table is not None else load_bot_signatures()
    category = table.category_for(user_agent)
    return f":{category}" if category else ""


# =============================================================================
# User-agent rules
# =============================================================================

Rule = Callable[[str, BotSignatureTable, SpiderSignatureList], Optional[str]]


def _mobile_rule(
    user_agent: str, bots: BotSignatureTable, spiders: SpiderSignatureList
) -> Optional[str]:
    if any(marker in user_agent for marker in MOBILE_MARKERS):
        return f"mobile{get_mobile_os(user_agent)}"
    return None


def _bot_rule(
    user_agent: str, bots: BotSignatureTable, spiders: SpiderSignatureList
) -> Optional[str]:
    if (
        any(marker in user_agent for marker in BOT_MARKERS)
        or spiders.is_spider(user_agent)
        or bots.matches(user_agent)
    ):
        return f"bot{get_bot_type(user_agent, bots)}"
    return None


def _desktop_rule(
    user_agent: str, bots: BotSignatureTable, spiders: SpiderSignatureList
) -> Optional[str]:
    return f"desktop{get_desktop_os(user_agent)}"


# Order is precedence: a mobile crawler is reported as mobile
USER_AGENT_RULES: tuple[Rule, ...] = (_mobile_rule, _bot_rule, _desktop_rule)


def get_masked_user_agent(
    headers: Any,
    bot_table: Optional[BotSignatureTable] = None,
    spider_list: Optional[SpiderSignatureList] = None,
) -> str:
    """
    Classify a request into a coarse, privacy-safe client class.

    Decision order (first match wins):
    1. No headers -> 'undefined'
    2. CloudFront viewer hints (desktop, mobile, smart TV, tablet)
    3. Monitoring vendor header -> 'bot:monitoring'
    4. No user-agent -> 'undefined'
    5. Mobile markers -> 'mobile[:os]'
    6. Bot markers or signature match -> 'bot[:category]'
    7. Otherwise -> 'desktop[:os]'

    Args:
        headers: Request headers (mapping, Headers, or None)
        bot_table: Bot signature table (bundled table if omitted)
        spider_list: Spider signatures (bundled list if omitted)

    Returns:
        Client classification tag

    Examples:
        >>> get_masked_user_agent(None)
        'undefined'
        >>> get_masked_user_agent({"user-agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"})
        'desktop:windows'
    """
    headers = as_headers(headers)
    if headers is None:
        return UNDEFINED

    for header, tag in _VIEWER_HINTS:
        if headers.get(header) == "true":
            return tag

    if headers.get(MONITORING_HEADER):
        return "bot:monitoring"

    user_agent = headers.get(USER_AGENT_HEADER)
    if not user_agent:
        return UNDEFINED

    bots = bot_table if bot_table is not None else load_bot_signatures()
    spiders = spider_list if spider_list is not None else load_spider_signatures()
    lc_user_agent = str(user_agent).lower()

    for rule in USER_AGENT_RULES:
        tag = rule(lc_user_agent, bots, spiders)
        if tag is not None:
            return tag

    return UNDEFINED
