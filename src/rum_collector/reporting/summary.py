"""
Client class reporting over classified RUM events.

Aggregates classified events into weighted client-class distributions per
subsystem, the shape the downstream dashboards consume.
"""

import logging
from typing import Iterable

import pandas as pd

from ..pipeline.classify import ClassifiedEvent

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "subsystem",
    "client_class",
    "device",
    "qualifier",
    "events",
    "weighted_events",
    "share",
]


def split_client_class(tag: str) -> tuple[str, str]:
    """
    Split a client classification tag into device and qualifier.

    Examples:
        >>> split_client_class("mobile:ios")
        ('mobile', 'ios')
        >>> split_client_class("desktop")
        ('desktop', '')
    """
    device, _, qualifier = tag.partition(":")
    return device, qualifier


def events_to_frame(events: Iterable[ClassifiedEvent]) -> pd.DataFrame:
    """
    Convert classified events into a DataFrame, one row per event.

    Args:
        events: Classified events

    Returns:
        DataFrame with the columns of ClassifiedEvent.to_dict()
    """
    rows = [event.to_dict() for event in events]
    df = pd.DataFrame(rows)
    logger.debug(f"Built frame with {len(df)} classified events")
    return df


def summarize_client_classes(df: pd.DataFrame) -> pd.DataFrame:
    """
    Weighted client-class distribution per subsystem.

    Args:
        df: Frame from events_to_frame (needs subsystem, user_agent, weight)

    Returns:
        DataFrame with SUMMARY_COLUMNS, sorted by subsystem and descending
        weighted event count. ``share`` is the fraction of the subsystem's
        weighted events.
    """
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    grouped = (
        df.rename(columns={"user_agent": "client_class"})
        .groupby(["subsystem", "client_class"], as_index=False)
        .agg(events=("weight", "size"), weighted_events=("weight", "sum"))
    )

    totals = grouped.groupby("subsystem")["weighted_events"].transform("sum")
    grouped["share"] = (grouped["weighted_events"] / totals).round(4)

    split = grouped["client_class"].map(split_client_class)
    grouped["device"] = split.map(lambda parts: parts[0])
    grouped["qualifier"] = split.map(lambda parts: parts[1])

    return (
        grouped[SUMMARY_COLUMNS]
        .sort_values(
            ["subsystem", "weighted_events", "client_class"],
            ascending=[True, False, True],
        )
        .reset_index(drop=True)
    )
