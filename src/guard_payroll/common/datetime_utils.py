from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Iterator, Optional

from ..core.constants import LOCAL_UTC_OFFSET_HOURS
from ..core.exceptions import ValidationError

LOCAL_OFFSET = timedelta(hours=LOCAL_UTC_OFFSET_HOURS)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def as_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def parse_utc_timestamp(value: str) -> Optional[datetime]:
    """Parse a canonical timestamp into a naive UTC datetime.

    Returns None when the value cannot be read; callers drop such events.
    Naive values are taken as UTC, aware values are converted to UTC.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_utc(instant: datetime) -> str:
    """Format a naive UTC datetime the way machine timestamps arrive: 2025-01-06T06:30:00.000Z."""
    return instant.strftime("%Y-%m-%dT%H:%M:%S.") + f"{instant.microsecond // 1000:03d}Z"


def to_shifted(instant: datetime) -> datetime:
    """Shift a UTC instant by the fixed local offset.

    The result is read as local wall-clock time. This stands in for a
    Bangkok timezone conversion: fixed +7 hours, no DST, no tz database.
    """
    return instant + LOCAL_OFFSET


def shifted_date(instant: datetime) -> date:
    return to_shifted(instant).date()


def shifted_hour(instant: datetime) -> int:
    return to_shifted(instant).hour


def shifted_minute_of_day(instant: datetime) -> int:
    local = to_shifted(instant)
    return local.hour * 60 + local.minute


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end inclusive; nothing when end < start."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def now_local() -> datetime:
    """Current local wall-clock time in the shifted convention.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return to_shifted(datetime.now(timezone.utc).replace(tzinfo=None))
