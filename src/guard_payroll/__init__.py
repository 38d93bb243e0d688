"""Guard Payroll package.

Attendance-to-payroll engine for a security-guard workforce, organized by
feature modules (punches, attendance, payroll, guards) with a thin Flask
controller layer over pure service layers.
"""

from .payroll.service import calculate_payroll

__all__ = ["calculate_payroll"]
