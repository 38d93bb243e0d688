"""Live guard status indicator for the post (any guard on duty right now)."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..attendance.builder import is_work_day
from ..attendance.grouper import punch_order
from ..common.datetime_utils import now_local, shifted_date
from ..core.constants import (
    SHIFT_START_MINUTES,
    STATUS_LUNCH_END_MINUTES,
    STATUS_LUNCH_START_MINUTES,
    STATUS_WORK_END_MINUTES,
    TEST_GUARD_NAME,
)
from ..core.enums import GuardStatus, PunchKind
from ..punches.classifier import classify_punches
from ..punches.model import PunchEvent
from ..punches.repository import PunchEventSource


def is_outside_hours(now: datetime) -> bool:
    minute = now.hour * 60 + now.minute
    if minute < SHIFT_START_MINUTES or minute >= STATUS_WORK_END_MINUTES:
        return True
    return STATUS_LUNCH_START_MINUTES <= minute < STATUS_LUNCH_END_MINUTES


def evaluate_guard_status(
    events: Iterable[PunchEvent],
    now: datetime,
    *,
    excluded_guards: Iterable[str] = (TEST_GUARD_NAME,),
) -> GuardStatus:
    """Status at local wall-clock ``now`` from today's latest punch."""
    if not is_work_day(now.date()):
        return GuardStatus.HOLIDAY
    if is_outside_hours(now):
        return GuardStatus.OUTSIDE_HOURS

    excluded = set(excluded_guards)
    today = [
        p
        for p in classify_punches(events)
        if p.event.guard_name not in excluded and shifted_date(p.instant) == now.date()
    ]
    if not today:
        return GuardStatus.ABSENT

    latest = max(today, key=punch_order)
    if latest.kind is PunchKind.CHECK_IN:
        return GuardStatus.WORKING
    if latest.kind is PunchKind.BREAK:
        return GuardStatus.OUTSIDE_HOURS
    return GuardStatus.ABSENT


class GuardStatusService:
    def __init__(self, source: PunchEventSource, *, excluded_guards: Iterable[str] = (TEST_GUARD_NAME,)):
        self._source = source
        self._excluded = tuple(excluded_guards)

    def current_status(self, now: Optional[datetime] = None) -> GuardStatus:
        now = now or now_local()
        return evaluate_guard_status(self._source.list_events(), now, excluded_guards=self._excluded)
