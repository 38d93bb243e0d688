from __future__ import annotations

from ...core.enums import DayStatus
from .base import LatenessDecision, LatenessStrategy


class GraceStrategy(LatenessStrategy):
    """A few minutes late: tolerated, not flagged and not charged.

    Reports 0 late minutes, since late minutes only exist on late days;
    the tier stays visible through DayStatus.LATE_GRACE. Older sheets
    recorded the raw minutes here instead.
    """

    def decide(self, *, late_minutes: int, hourly_rate: float) -> LatenessDecision:
        return LatenessDecision(status=DayStatus.LATE_GRACE)
