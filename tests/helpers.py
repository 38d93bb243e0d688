from __future__ import annotations

from datetime import date, datetime, timedelta

from guard_payroll.common.datetime_utils import format_utc
from guard_payroll.punches.model import PunchEvent

_seq = iter(range(1, 1_000_000))


def local_ts(day: date, hour: int, minute: int = 0) -> str:
    """Canonical UTC timestamp for a local (UTC+7) wall-clock time."""
    return format_utc(datetime(day.year, day.month, day.day, hour, minute) - timedelta(hours=7))


def punch(guard: str, day: date, hour: int, minute: int = 0, *, label: str = "เข้างาน", seq: int | None = None) -> PunchEvent:
    return PunchEvent(
        guard_name=guard,
        event_type=label,
        timestamp=local_ts(day, hour, minute),
        sequence=next(_seq) if seq is None else seq,
    )
