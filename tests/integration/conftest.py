"""
Shared fixtures for integration tests.

Provides:
- A fixed clock for deterministic masked timestamps
- Sample (payload, headers) records as a collector would receive them
"""

import pytest

# 2023-11-14T22:15:23.456Z
NOW_MS = 1_700_000_123_456
BASE_HOUR_MS = 1_699_999_200_000

WINDOWS_CHROME = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
IPHONE = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)


@pytest.fixture
def clock():
    """Clock returning a fixed time in milliseconds."""
    return lambda: NOW_MS


@pytest.fixture
def base_hour():
    """Start of the hour containing the fixed clock time."""
    return BASE_HOUR_MS


@pytest.fixture
def windows_user_agent():
    """Desktop Chrome on Windows."""
    return WINDOWS_CHROME


@pytest.fixture
def sample_records():
    """Sample (payload, headers) pairs across two subsystems."""
    return [
        (
            {"checkpoint": "enter", "id": "a1", "weight": 100, "t": 1234},
            {"user-agent": WINDOWS_CHROME, "host": "www.example.com"},
        ),
        (
            {"checkpoint": "click", "id": "a1", "weight": 100, "source": ".hero"},
            {"user-agent": WINDOWS_CHROME, "host": "www.example.com"},
        ),
        (
            {"checkpoint": "enter", "id": "b2", "weight": 10},
            {"user-agent": IPHONE, "host": "www.example.com"},
        ),
        (
            {"checkpoint": "pagesviewed", "id": "c3", "weight": 100},
            {
                "user-agent": "curl/8.4.0",
                "x-adobe-routing": "program=1, environment=2, tier=publish",
            },
        ),
    ]
