"""Reporting module for classified RUM events."""

from .summary import (
    SUMMARY_COLUMNS,
    events_to_frame,
    split_client_class,
    summarize_client_classes,
)

__all__ = [
    "SUMMARY_COLUMNS",
    "events_to_frame",
    "split_client_class",
    "summarize_client_classes",
]
