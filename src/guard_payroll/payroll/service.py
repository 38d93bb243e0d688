from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..attendance.builder import DailyWorkRecordBuilder
from ..attendance.grouper import group_by_guard, group_daily
from ..common.datetime_utils import as_date, shifted_date
from ..core.enums import PayPeriod
from ..punches.classifier import classify_punches
from ..punches.model import PunchEvent
from ..punches.repository import PunchEventSource
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollSummary
from .periods import resolve_pay_period

logger = logging.getLogger(__name__)

ALL_GUARDS = "ALL"


def calculate_payroll(
    events: Iterable[PunchEvent],
    start_date: date | str,
    end_date: date | str,
    *,
    builder: Optional[DailyWorkRecordBuilder] = None,
    calculator: Optional[PayrollCalculator] = None,
) -> list[PayrollSummary]:
    """Punch events + inclusive date range -> one summary per guard seen in range.

    Pure: the events are only read, and the result depends on nothing but
    the arguments. Summaries come back sorted by guard name.
    """
    start = as_date(start_date)
    end = as_date(end_date)
    builder = builder or DailyWorkRecordBuilder()
    calculator = calculator or StandardPayrollCalculator()

    in_range = [p for p in classify_punches(events) if start <= shifted_date(p.instant) <= end]

    summaries = []
    for guard_name, punches in sorted(group_by_guard(in_range).items()):
        records = builder.build_range(guard_name, group_daily(punches, guard_name), start, end)
        summary = calculator.summarize(guard_name, records)
        logger.debug(
            "Payroll %s %s..%s: days=%d late=%d absent=%d net=%s",
            guard_name, start, end, summary.total_days, summary.total_late_days,
            summary.total_absent_days, summary.net_payable,
        )
        summaries.append(summary)
    return summaries


class PayrollService:
    def __init__(
        self,
        source: PunchEventSource,
        *,
        builder: Optional[DailyWorkRecordBuilder] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._source = source
        self._builder = builder or DailyWorkRecordBuilder()
        self._calculator = calculator or StandardPayrollCalculator()

    def calculate(
        self,
        start: date | str,
        end: date | str,
        *,
        guard: Optional[str] = None,
        events: Optional[Iterable[PunchEvent]] = None,
    ) -> list[PayrollSummary]:
        if events is None:
            events = self._source.list_events()
        summaries = calculate_payroll(events, start, end, builder=self._builder, calculator=self._calculator)
        if guard and guard != ALL_GUARDS:
            summaries = [s for s in summaries if s.guard_name == guard]
        return summaries

    def calculate_for_period(
        self,
        month: str,
        period: str | PayPeriod | None = PayPeriod.ALL,
        *,
        guard: Optional[str] = None,
    ) -> list[PayrollSummary]:
        start, end = resolve_pay_period(month, period)
        return self.calculate(start, end, guard=guard)

    def guard_names(self) -> list[str]:
        return sorted({e.guard_name for e in self._source.list_events() if e.guard_name})
