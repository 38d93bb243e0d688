from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import DayStatus


@dataclass(frozen=True)
class LatenessDecision:
    status: DayStatus
    is_late: bool = False
    late_minutes: int = 0
    deduction: float = 0


class LatenessStrategy(ABC):
    """Strategy Pattern: encapsulate how a check-in delay is judged and charged."""

    @abstractmethod
    def decide(self, *, late_minutes: int, hourly_rate: float) -> LatenessDecision:
        raise NotImplementedError
