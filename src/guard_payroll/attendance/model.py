from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayStatus


@dataclass(frozen=True)
class DailyWorkRecord:
    """One guard on one calendar day of the reporting window."""

    date: date
    guard_name: str
    status: DayStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    is_late: bool = False
    late_minutes: int = 0
    is_absent: bool = False
    total_work_hours: int = 0
    wage: float = 0
    deduction: float = 0
    net_wage: float = 0
    note: str = ""

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "guardName": self.guard_name,
            "status": self.status.value,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "isLate": self.is_late,
            "lateMinutes": self.late_minutes,
            "isAbsent": self.is_absent,
            "totalWorkHours": self.total_work_hours,
            "wage": self.wage,
            "deduction": self.deduction,
            "netWage": self.net_wage,
            "note": self.note,
        }
