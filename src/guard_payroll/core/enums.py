from __future__ import annotations

from enum import Enum


class PunchKind(str, Enum):
    """Closed set of punch kinds, assigned once at ingestion."""

    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"
    BREAK = "BREAK"
    OTHER = "OTHER"


class DayStatus(str, Enum):
    """Outcome of one guard-day in the daily work record state machine."""

    ABSENT = "ABSENT"
    REST_DAY = "REST_DAY"
    ON_TIME = "ON_TIME"
    LATE_GRACE = "LATE_GRACE"
    LATE_HALF_DEDUCT = "LATE_HALF_DEDUCT"
    LATE_FULL_DEDUCT = "LATE_FULL_DEDUCT"


class PayPeriod(str, Enum):
    """Reporting window inside a month."""

    ALL = "ALL"
    FIRST = "1"
    SECOND = "2"


class GuardStatus(str, Enum):
    HOLIDAY = "HOLIDAY"
    OUTSIDE_HOURS = "OUTSIDE_HOURS"
    WORKING = "WORKING"
    ABSENT = "ABSENT"
