"""
RUM event classification pipeline.

Turns a raw RUM payload plus the headers of the request that carried it
into a classified, privacy-scrubbed event record:

    checkpoint  -> vocabulary check (reported, never enforced)
    t           -> padding hint for the masked receive time
    url fields  -> credentials, query and fragment stripped
    headers     -> client class and subsystem tags

Every step is a pure function of its inputs. Accepting or rejecting the
event is left to the caller.
"""

import logging
import math
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

from ..config.constants import CWV_METRICS, REFERER_HEADER
from ..utils.bot_classifier import BotSignatureTable, SpiderSignatureList
from ..utils.checkpoints import is_valid_checkpoint
from ..utils.headers import Headers, as_headers
from ..utils.subsystem import get_subsystem
from ..utils.time_utils import Number, get_masked_time
from ..utils.url_utils import cleanurl
from ..utils.user_agent import get_masked_user_agent

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@dataclass
class ClassifiedEvent:
    """
    A RUM event after classification and anonymization.

    Attributes:
        id: Client-generated page view id
        weight: Sampling weight (defaults to 1)
        checkpoint: Checkpoint name as reported
        checkpoint_valid: Whether the checkpoint is in the known vocabulary
        time: Masked receive time in milliseconds since the epoch
        url: Sanitized page URL (payload url, else the referer header)
        source: Sanitized source field
        target: Sanitized target field
        referer: Sanitized referer header
        user_agent: Client classification tag
        subsystem: Routing subsystem identifier
        cwv: Numeric Core Web Vitals metrics present in the payload
    """

    id: str
    weight: Number
    checkpoint: Optional[str]
    checkpoint_valid: bool
    time: Number
    user_agent: str
    subsystem: str
    url: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None
    referer: Optional[str] = None
    cwv: dict[str, Number] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary, flattening CWV metrics."""
        result = {
            "id": self.id,
            "weight": self.weight,
            "checkpoint": self.checkpoint,
            "checkpoint_valid": self.checkpoint_valid,
            "time": self.time,
            "url": self.url,
            "source": self.source,
            "target": self.target,
            "referer": self.referer,
            "user_agent": self.user_agent,
            "subsystem": self.subsystem,
        }
        for metric in CWV_METRICS:
            result[metric] = self.cwv.get(metric)
        return result


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _clean_optional(value: Any) -> Optional[str]:
    if value is None:
        return None
    return cleanurl(str(value))


def _extract_cwv(payload: dict) -> dict[str, Number]:
    cwv = payload.get("cwv")
    if not isinstance(cwv, dict):
        return {}
    return {
        metric: cwv[metric]
        for metric in CWV_METRICS
        if metric in cwv and _is_number(cwv[metric])
    }


def classify_event(
    payload: dict,
    headers: Any = None,
    now: Optional[Callable[[], Number]] = None,
    bot_table: Optional[BotSignatureTable] = None,
    spider_list: Optional[SpiderSignatureList] = None,
) -> ClassifiedEvent:
    """
    Classify and anonymize a single RUM event.

    Args:
        payload: Decoded event payload (checkpoint, t, id, weight, cwv, ...)
        headers: Headers of the request that carried the event
        now: Clock returning milliseconds since the epoch; the client
             timestamp is only used as padding hint, never as the time
        bot_table: Bot signature table (bundled table if omitted)
        spider_list: Spider signatures (bundled list if omitted)

    Returns:
        ClassifiedEvent
    """
    if not isinstance(payload, dict):
        payload = {}
    request_headers = as_headers(headers)
    header_view = request_headers if request_headers is not None else Headers()

    checkpoint = payload.get("checkpoint")
    checkpoint_valid = is_valid_checkpoint(checkpoint)

    weight = payload.get("weight")
    if not _is_number(weight):
        weight = 1

    event_id = payload.get("id")
    referer = _clean_optional(header_view.get(REFERER_HEADER))
    url = _clean_optional(payload.get("url")) or referer

    return ClassifiedEvent(
        id="" if event_id is None else str(event_id),
        weight=weight,
        checkpoint=checkpoint if isinstance(checkpoint, str) else None,
        checkpoint_valid=checkpoint_valid,
        time=get_masked_time(payload.get("t"), now=now),
        user_agent=get_masked_user_agent(
            request_headers, bot_table=bot_table, spider_list=spider_list
        ),
        subsystem=get_subsystem(header_view),
        url=url,
        source=_clean_optional(payload.get("source")),
        target=_clean_optional(payload.get("target")),
        referer=referer,
        cwv=_extract_cwv(payload),
    )


def classify_events(
    records: Iterable[tuple[dict, Any]],
    now: Optional[Callable[[], Number]] = None,
    bot_table: Optional[BotSignatureTable] = None,
    spider_list: Optional[SpiderSignatureList] = None,
) -> Iterator[ClassifiedEvent]:
    """
    Classify a stream of (payload, headers) pairs.

    Unknown checkpoints are logged at DEBUG level and still yielded.

    Yields:
        ClassifiedEvent for every input pair
    """
    for payload, headers in records:
        event = classify_event(
            payload,
            headers,
            now=now,
            bot_table=bot_table,
            spider_list=spider_list,
        )
        if not event.checkpoint_valid:
            logger.debug(f"Unknown checkpoint: {event.checkpoint!r}")
        yield event
