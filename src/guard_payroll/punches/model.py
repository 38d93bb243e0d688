from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.validators import require_non_empty
from ..core.enums import PunchKind


@dataclass(frozen=True)
class PunchEvent:
    """A single time-clock punch as delivered by the event source.

    ``timestamp`` is kept as delivered (canonical or localized); duplicates and
    out-of-order delivery are expected. ``sequence`` only breaks ties
    between punches with the same instant.
    """

    guard_name: str
    event_type: str
    timestamp: str
    sequence: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "PunchEvent":
        return cls(
            guard_name=require_non_empty(data.get("guardName", data.get("guard_name", "")), "guardName"),
            event_type=str(data.get("eventType", data.get("event_type", "")) or ""),
            timestamp=str(data.get("timestamp", "") or ""),
            sequence=int(data.get("rowIndex", data.get("sequence", 0)) or 0),
        )


@dataclass(frozen=True)
class ClassifiedPunch:
    """Punch with its kind and parsed UTC instant, ready for day bucketing."""

    event: PunchEvent
    kind: PunchKind
    instant: datetime
    timestamp: str

    @property
    def sequence(self) -> int:
        return self.event.sequence
