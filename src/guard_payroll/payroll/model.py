from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import DailyWorkRecord


@dataclass(frozen=True)
class PayrollSummary:
    """Per-guard totals for one reporting window."""

    guard_name: str
    total_days: int
    total_late_days: int
    total_absent_days: int
    total_wage: float
    total_deduction: float
    diligence_bonus: float
    net_payable: float
    is_bonus_eligible: bool = False
    details: tuple[DailyWorkRecord, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "guardName": self.guard_name,
            "totalDays": self.total_days,
            "totalLateDays": self.total_late_days,
            "totalAbsentDays": self.total_absent_days,
            "totalWage": self.total_wage,
            "totalDeduction": self.total_deduction,
            "diligenceBonus": self.diligence_bonus,
            "isBonusEligible": self.is_bonus_eligible,
            "netPayable": self.net_payable,
            "details": [d.to_dict() for d in self.details],
        }
