from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import LATE_GRACE_MINUTES, LATE_HALF_HOUR_MINUTES, SHIFT_START_MINUTES
from .strategies.base import LatenessStrategy
from .strategies.grace_strategy import GraceStrategy
from .strategies.late_strategy import FullHourDeductionStrategy, HalfHourDeductionStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class LatenessStrategyFactory:
    """Factory Pattern: choose the lateness tier from minutes past shift start."""

    shift_start_minutes: int = SHIFT_START_MINUTES
    grace_minutes: int = LATE_GRACE_MINUTES
    half_hour_minutes: int = LATE_HALF_HOUR_MINUTES

    def late_minutes(self, minute_of_day: int) -> int:
        return max(0, minute_of_day - self.shift_start_minutes)

    def for_late_minutes(self, late_minutes: int) -> LatenessStrategy:
        if late_minutes <= 0:
            return OnTimeStrategy()
        if late_minutes <= self.grace_minutes:
            return GraceStrategy()
        if late_minutes <= self.half_hour_minutes:
            return HalfHourDeductionStrategy()
        return FullHourDeductionStrategy()
