from __future__ import annotations

import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .guards.status import GuardStatusService
from .payroll.service import PayrollService
from .punches.repository import CsvPunchEventSource, InMemoryPunchEventSource, PunchEventSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    punch_source: PunchEventSource

    payroll_service: PayrollService
    guard_status_service: GuardStatusService


def build_container(*, settings: ModuleType, punch_source: Optional[PunchEventSource] = None) -> Container:
    if punch_source is None:
        csv_path = getattr(settings, "PUNCH_CSV_PATH", "")
        if csv_path:
            logger.info("Reading punch events from %s", csv_path)
            punch_source = CsvPunchEventSource(csv_path)
        else:
            punch_source = InMemoryPunchEventSource()

    payroll_service = PayrollService(punch_source)
    guard_status_service = GuardStatusService(
        punch_source,
        excluded_guards=getattr(settings, "EXCLUDED_GUARDS", ()),
    )

    return Container(
        punch_source=punch_source,
        payroll_service=payroll_service,
        guard_status_service=guard_status_service,
    )
