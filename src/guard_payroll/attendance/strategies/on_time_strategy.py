from __future__ import annotations

from ...core.enums import DayStatus
from .base import LatenessDecision, LatenessStrategy


class OnTimeStrategy(LatenessStrategy):
    """Checked in at or before the scheduled start."""

    def decide(self, *, late_minutes: int, hourly_rate: float) -> LatenessDecision:
        return LatenessDecision(status=DayStatus.ON_TIME)
