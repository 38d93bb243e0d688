from __future__ import annotations

from ...core.enums import DayStatus
from .base import LatenessDecision, LatenessStrategy


class HalfHourDeductionStrategy(LatenessStrategy):
    """Late past the grace period: half an hour's wage is deducted."""

    def decide(self, *, late_minutes: int, hourly_rate: float) -> LatenessDecision:
        return LatenessDecision(
            status=DayStatus.LATE_HALF_DEDUCT,
            is_late=True,
            late_minutes=late_minutes,
            deduction=hourly_rate / 2,
        )


class FullHourDeductionStrategy(LatenessStrategy):
    """Late by more than half an hour: a full hour's wage is deducted."""

    def decide(self, *, late_minutes: int, hourly_rate: float) -> LatenessDecision:
        return LatenessDecision(
            status=DayStatus.LATE_FULL_DEDUCT,
            is_late=True,
            late_minutes=late_minutes,
            deduction=hourly_rate,
        )
