"""Example: use the service layer directly (no Flask).

Computes the first pay period of a month from the configured punch CSV and
prints one line per guard.
"""

import importlib
import sys

from guard_payroll.config import get_settings_module
from guard_payroll.container import build_container


def main():
    month = sys.argv[1] if len(sys.argv) > 1 else "2025-01"
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    for s in container.payroll_service.calculate_for_period(month, "1"):
        print(f"{s.guard_name}: days={s.total_days} late={s.total_late_days} absent={s.total_absent_days} net={s.net_payable}")


if __name__ == "__main__":
    main()
