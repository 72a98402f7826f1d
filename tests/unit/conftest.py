"""
Pytest configuration and shared fixtures for unit tests.
"""

import pytest

from rum_collector.utils.bot_classifier import BotSignatureTable, SpiderSignatureList

# 2023-11-14T22:15:23.456Z
SAMPLE_TIME_MS = 1_700_000_123_456
SAMPLE_BASE_HOUR_MS = 1_699_999_200_000


@pytest.fixture
def sample_time():
    """A fixed timestamp in milliseconds, 15:23.456 into its hour."""
    return SAMPLE_TIME_MS


@pytest.fixture
def sample_base_hour():
    """Start of the hour containing sample_time."""
    return SAMPLE_BASE_HOUR_MS


@pytest.fixture
def custom_bot_table():
    """Small bot table with two categories that both match 'acme'."""
    return BotSignatureTable.from_dict(
        {
            "Custom": [
                {"user_agent": "AcmeFetcher", "regex": "acmefetcher"},
            ],
            "Fallback": [
                {"user_agent": "Acme", "regex": "acme"},
            ],
        }
    )


@pytest.fixture
def empty_spiders():
    """Spider list without patterns."""
    return SpiderSignatureList([])
