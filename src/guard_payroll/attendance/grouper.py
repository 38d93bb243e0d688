"""Daily grouper: guard -> shifted local day -> ordered punches."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable

from ..common.datetime_utils import shifted_date
from ..punches.model import ClassifiedPunch


def punch_order(punch: ClassifiedPunch) -> tuple:
    """Chronological, ties broken by the source sequence number, then label and timestamp text."""
    return (punch.instant, punch.sequence, punch.event.event_type, punch.timestamp)


def group_by_guard(punches: Iterable[ClassifiedPunch]) -> dict[str, list[ClassifiedPunch]]:
    grouped: dict[str, list[ClassifiedPunch]] = defaultdict(list)
    for p in punches:
        grouped[p.event.guard_name].append(p)
    return dict(grouped)


def group_daily(punches: Iterable[ClassifiedPunch], guard_name: str) -> dict[date, list[ClassifiedPunch]]:
    days: dict[date, list[ClassifiedPunch]] = defaultdict(list)
    for p in punches:
        if p.event.guard_name != guard_name:
            continue
        days[shifted_date(p.instant)].append(p)

    return {day: sorted(items, key=punch_order) for day, items in days.items()}
