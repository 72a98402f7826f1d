"""
Subsystem resolution from routing headers.

Derives the backend routing target (program, environment, tier) a RUM
request was sent for, using proprietary routing headers when present and
falling back to the forwarded or plain host.
"""

import re
from typing import Any

from ..config.constants import (
    FORWARDED_HOST_HEADER,
    HOST_HEADER,
    PLATFORM_HOST_PATTERN,
    ROUTING_DOMAIN,
    ROUTING_HEADER,
    UNDEFINED,
)
from .headers import Headers, as_headers

_PLATFORM_HOST_RE = re.compile(PLATFORM_HOST_PATTERN)


def extract_adobe_routing_info(value: str) -> str:
    """
    Build the routing hostname from an x-adobe-routing header value.

    The value is a comma-separated list of key=value pairs. Pairs without
    '=' are ignored and later keys overwrite earlier ones. Missing keys are
    rendered as 'undefined', so the result is informational only.

    Args:
        value: Raw header value, e.g. "program=123, environment=prod, tier=live"

    Returns:
        Hostname like "live-p123-eprod.adobeaemcloud.net"

    Examples:
        >>> extract_adobe_routing_info("program=123,environment=prod,tier=publish")
        'publish-p123-eprod.adobeaemcloud.net'
        >>> extract_adobe_routing_info("program=123")
        'undefined-p123-eundefined.adobeaemcloud.net'
    """
    routing_info: dict[str, str] = {}
    for pair in value.split(","):
        pair = pair.strip()
        if "=" not in pair:
            continue
        key, val = pair.split("=")[:2]
        routing_info[key] = val

    tier = routing_info.get("tier", UNDEFINED)
    program = routing_info.get("program", UNDEFINED)
    environment = routing_info.get("environment", UNDEFINED)
    return f"{tier}-p{program}-e{environment}.{ROUTING_DOMAIN}"


def get_forwarded_host(value: str) -> str:
    """
    Pick the platform host out of an x-forwarded-host header value.

    Args:
        value: Comma-separated list of hosts

    Returns:
        The first host on a recognized platform domain, otherwise the
        first host in the list (trimmed)
    """
    hosts = [host.strip() for host in value.split(",")]
    for host in hosts:
        if _PLATFORM_HOST_RE.search(host):
            return host
    return hosts[0]


def _request_headers(request: Any) -> Headers:
    source = getattr(request, "headers", request)
    return as_headers(source) or Headers()


def get_subsystem(request: Any) -> str:
    """
    Resolve the subsystem a request was routed to.

    Priority: x-adobe-routing, then x-forwarded-host, then host.

    Args:
        request: Object with a ``headers`` attribute, or a header mapping

    Returns:
        Subsystem identifier, or 'undefined' if no routing information exists
    """
    headers = _request_headers(request)

    routing = headers.get(ROUTING_HEADER)
    if routing:
        return extract_adobe_routing_info(str(routing))

    forwarded_host = headers.get(FORWARDED_HOST_HEADER)
    if forwarded_host:
        return get_forwarded_host(str(forwarded_host))

    host = headers.get(HOST_HEADER)
    if host:
        return host

    return UNDEFINED
