"""
URL utility functions.

Strips potential PII (credentials, query string, fragment) from URLs
reported by RUM clients before they are stored.
"""

import re
from typing import Any
from urllib.parse import quote, urlsplit, urlunsplit

# Schemes that always carry a host and serialize an empty path as "/"
_SPECIAL_SCHEMES = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

_SCHEME_RE = re.compile(r"([a-zA-Z][a-zA-Z0-9+.\-]*):")

# Printable ASCII kept as is in special-scheme paths; quote() adds [A-Za-z0-9_.-~]
_PATH_SAFE = "/%:@!$&'()*+,;=[]|^"


def _normalize_authority(url: str) -> str:
    """
    Give special-scheme URLs exactly two slashes before the authority.

    Browsers accept ``https:host``, ``https:/host``, ``https:///host`` and
    backslashes in place of slashes for these schemes.
    """
    match = _SCHEME_RE.match(url)
    if match is None or match.group(1).lower() not in _SPECIAL_SCHEMES:
        return url
    rest = url[match.end():].replace("\\", "/").lstrip("/")
    return f"{match.group(1)}://{rest}"


def cleanurl(url: Any) -> Any:
    """
    Remove credentials, query string and fragment from a URL.

    Only absolute URLs are rewritten. Input that does not parse as one is
    returned as is, so a URL-ish field never blocks event ingestion.

    Args:
        url: URL string as reported by the client

    Returns:
        Sanitized URL, or the unchanged input if it cannot be parsed

    Examples:
        >>> cleanurl("https://u:p@example.com/path?x=1#f")
        'https://example.com/path'
        >>> cleanurl("https://Example.COM")
        'https://example.com/'
        >>> cleanurl("https:/example.com/a b?token=x")
        'https://example.com/a%20b'
        >>> cleanurl("not a url")
        'not a url'
    """
    if not isinstance(url, str):
        return url

    try:
        parts = urlsplit(_normalize_authority(url.strip()))
        scheme = parts.scheme.lower()
        if not scheme:
            return url

        hostname = parts.hostname or ""
        port = parts.port
    except ValueError:
        return url

    path = parts.path
    if scheme in _SPECIAL_SCHEMES:
        if not hostname:
            return url
        if port == _SPECIAL_SCHEMES[scheme]:
            port = None
        path = quote(path, safe=_PATH_SAFE) or "/"

    if ":" in hostname:
        hostname = f"[{hostname}]"
    netloc = hostname if port is None else f"{hostname}:{port}"

    return urlunsplit((scheme, netloc, path, "", ""))
