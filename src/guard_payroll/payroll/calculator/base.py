from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import DailyWorkRecord
from ..model import PayrollSummary


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def summarize(self, guard_name: str, records: Sequence[DailyWorkRecord]) -> PayrollSummary:
        raise NotImplementedError
