from __future__ import annotations

from typing import Sequence

from ...attendance.model import DailyWorkRecord
from ..model import PayrollSummary
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: wages - deductions + diligence bonus.

    Eligibility for the diligence bonus (no late day, no absent day) is
    reported, but the payout amount is zero until the amount is decided.
    """

    def diligence_bonus(self, *, eligible: bool) -> float:
        return 0

    def summarize(self, guard_name: str, records: Sequence[DailyWorkRecord]) -> PayrollSummary:
        total_late_days = sum(1 for r in records if r.is_late)
        total_absent_days = sum(1 for r in records if r.is_absent)
        total_wage = sum(r.wage for r in records)
        total_deduction = sum(r.deduction for r in records)

        eligible = total_late_days == 0 and total_absent_days == 0
        bonus = self.diligence_bonus(eligible=eligible)

        return PayrollSummary(
            guard_name=guard_name,
            total_days=sum(1 for r in records if not r.is_absent),
            total_late_days=total_late_days,
            total_absent_days=total_absent_days,
            total_wage=total_wage,
            total_deduction=total_deduction,
            diligence_bonus=bonus,
            net_payable=total_wage - total_deduction + bonus,
            is_bonus_eligible=eligible,
            details=tuple(records),
        )
