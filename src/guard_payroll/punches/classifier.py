from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.datetime_utils import parse_utc_timestamp
from ..core.enums import PunchKind
from .model import ClassifiedPunch, PunchEvent
from .normalizer import normalize_timestamp

logger = logging.getLogger(__name__)

CHECK_IN_MARKERS = ("เข้า", "Check-in")
CHECK_OUT_MARKERS = ("เลิก", "Check-out")
BREAK_MARKERS = ("พัก", "Break")


def classify_event_type(label: str) -> PunchKind:
    """Map a free-text event label onto a PunchKind.

    Check-in markers win over check-out markers, which win over break markers.
    """
    label = label or ""
    if any(marker in label for marker in CHECK_IN_MARKERS):
        return PunchKind.CHECK_IN
    if any(marker in label for marker in CHECK_OUT_MARKERS):
        return PunchKind.CHECK_OUT
    if any(marker in label for marker in BREAK_MARKERS):
        return PunchKind.BREAK
    return PunchKind.OTHER


def classify_punch(event: PunchEvent) -> Optional[ClassifiedPunch]:
    """Classify one event; None when its timestamp cannot be placed in time."""
    timestamp = normalize_timestamp(event.timestamp)
    instant = parse_utc_timestamp(timestamp)
    if instant is None:
        logger.debug("Dropping punch with unreadable timestamp: %r (%s)", event.timestamp, event.guard_name)
        return None
    return ClassifiedPunch(
        event=event,
        kind=classify_event_type(event.event_type),
        instant=instant,
        timestamp=timestamp,
    )


def classify_punches(events: Iterable[PunchEvent]) -> list[ClassifiedPunch]:
    out = []
    for event in events:
        punch = classify_punch(event)
        if punch is not None:
            out.append(punch)
    return out
