"""Event classification pipeline."""

from .classify import ClassifiedEvent, classify_event, classify_events, setup_logging

__all__ = [
    "ClassifiedEvent",
    "classify_event",
    "classify_events",
    "setup_logging",
]
