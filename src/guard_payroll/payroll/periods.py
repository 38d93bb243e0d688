from __future__ import annotations

import calendar
from datetime import date

from ..common.validators import require_month
from ..core.enums import PayPeriod
from ..core.exceptions import ValidationError

FIRST_PERIOD_LAST_DAY = 15


def parse_pay_period(value: str | PayPeriod | None) -> PayPeriod:
    if isinstance(value, PayPeriod):
        return value
    try:
        return PayPeriod((value or PayPeriod.ALL.value).strip().upper())
    except ValueError:
        raise ValidationError(f"Invalid pay period: {value!r} (expected ALL, 1 or 2)") from None


def resolve_pay_period(month: str, period: str | PayPeriod | None = PayPeriod.ALL) -> tuple[date, date]:
    """Inclusive (start, end) for a month and pay period.

    ALL is the whole month, 1 is days 1-15, 2 is the 16th to month end.
    """
    year, month_no = require_month(month)
    period = parse_pay_period(period)
    last_day = calendar.monthrange(year, month_no)[1]

    start_day, end_day = 1, last_day
    if period is PayPeriod.FIRST:
        end_day = FIRST_PERIOD_LAST_DAY
    elif period is PayPeriod.SECOND:
        start_day = FIRST_PERIOD_LAST_DAY + 1

    return date(year, month_no, start_day), date(year, month_no, end_day)
