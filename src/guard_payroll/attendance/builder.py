"""Daily work record builder.

Every day in the window is judged on its own: no punches means absent
(workday) or rest day (Sunday); any punch means present and paid the flat
daily wage, with lateness assessed from the inferred check-in only.
"""

from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import iter_days, shifted_hour, shifted_minute_of_day
from ..core.constants import DAILY_WAGE, NOON_HOUR, NOTE_ABSENT, NOTE_REST_DAY, SHIFT_HOURS
from ..core.enums import DayStatus, PunchKind
from ..punches.model import ClassifiedPunch
from .factory import LatenessStrategyFactory
from .model import DailyWorkRecord

SUNDAY = 6


def is_work_day(day: date) -> bool:
    return day.weekday() != SUNDAY


def is_morning(punch: ClassifiedPunch) -> bool:
    return shifted_hour(punch.instant) < NOON_HOUR


def morning_fallback(punches: Sequence[ClassifiedPunch]) -> Optional[ClassifiedPunch]:
    """Unlabelled day: the first punch counts as check-in if it is before noon."""
    first = punches[0]
    return first if is_morning(first) else None


def afternoon_fallback(
    punches: Sequence[ClassifiedPunch], check_in: Optional[ClassifiedPunch]
) -> Optional[ClassifiedPunch]:
    """Unlabelled day: the last punch counts as check-out from noon on.

    Never reuses the chosen check-in, nor a punch labelled as a check-in.
    """
    last = punches[-1]
    if is_morning(last) or last is check_in or last.kind is PunchKind.CHECK_IN:
        return None
    return last


def infer_check_in(punches: Sequence[ClassifiedPunch]) -> Optional[ClassifiedPunch]:
    for p in punches:
        if p.kind is PunchKind.CHECK_IN:
            return p
    return morning_fallback(punches)


def infer_check_out(
    punches: Sequence[ClassifiedPunch], check_in: Optional[ClassifiedPunch]
) -> Optional[ClassifiedPunch]:
    for p in reversed(punches):
        if p.kind is PunchKind.CHECK_OUT:
            return p
    return afternoon_fallback(punches, check_in)


def infer_check_in_out(
    punches: Sequence[ClassifiedPunch],
) -> tuple[Optional[ClassifiedPunch], Optional[ClassifiedPunch]]:
    """Pick check-in/check-out for one ordered day; a single punch is never both."""
    if not punches:
        return None, None

    check_in = infer_check_in(punches)
    check_out = infer_check_out(punches, check_in)

    if check_in is not None and check_in is check_out:
        if is_morning(check_in):
            check_out = None
        else:
            check_in = None
    return check_in, check_out


class DailyWorkRecordBuilder:
    def __init__(
        self,
        *,
        lateness_factory: LatenessStrategyFactory | None = None,
        daily_wage: float = DAILY_WAGE,
        shift_hours: int = SHIFT_HOURS,
    ):
        self._factory = lateness_factory or LatenessStrategyFactory()
        self._daily_wage = daily_wage
        self._shift_hours = int(shift_hours)

    @property
    def hourly_rate(self) -> float:
        return self._daily_wage / self._shift_hours

    def build_range(
        self,
        guard_name: str,
        punches_by_day: Mapping[date, Sequence[ClassifiedPunch]],
        start: date,
        end: date,
    ) -> list[DailyWorkRecord]:
        return [self.build_day(guard_name, day, punches_by_day.get(day, ())) for day in iter_days(start, end)]

    def build_day(self, guard_name: str, day: date, punches: Sequence[ClassifiedPunch]) -> DailyWorkRecord:
        if not punches:
            return self._no_punch_record(guard_name, day)

        check_in, check_out = infer_check_in_out(punches)

        if check_in is not None:
            late = self._factory.late_minutes(shifted_minute_of_day(check_in.instant))
            decision = self._factory.for_late_minutes(late).decide(late_minutes=late, hourly_rate=self.hourly_rate)
        else:
            decision = self._factory.for_late_minutes(0).decide(late_minutes=0, hourly_rate=self.hourly_rate)

        return DailyWorkRecord(
            date=day,
            guard_name=guard_name,
            status=decision.status,
            check_in=check_in.timestamp if check_in else None,
            check_out=check_out.timestamp if check_out else None,
            is_late=decision.is_late,
            late_minutes=decision.late_minutes,
            is_absent=False,
            total_work_hours=self._shift_hours,
            wage=self._daily_wage,
            deduction=decision.deduction,
            net_wage=self._daily_wage - decision.deduction,
            note="",
        )

    @staticmethod
    def _no_punch_record(guard_name: str, day: date) -> DailyWorkRecord:
        if is_work_day(day):
            return DailyWorkRecord(date=day, guard_name=guard_name, status=DayStatus.ABSENT, is_absent=True, note=NOTE_ABSENT)
        return DailyWorkRecord(date=day, guard_name=guard_name, status=DayStatus.REST_DAY, note=NOTE_REST_DAY)
