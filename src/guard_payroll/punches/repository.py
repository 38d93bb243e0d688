from __future__ import annotations

import csv
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Protocol, Sequence

from .model import PunchEvent
from .normalizer import normalize_timestamp

logger = logging.getLogger(__name__)

# Spreadsheet row of the first data line (row 1 is the header).
FIRST_DATA_ROW = 2


class PunchEventSource(Protocol):
    def list_events(self) -> Sequence[PunchEvent]:
        raise NotImplementedError


class InMemoryPunchEventSource(PunchEventSource):
    def __init__(self, events: Iterable[PunchEvent] = ()):
        self._events = tuple(events)

    def list_events(self) -> Sequence[PunchEvent]:
        return self._events


@contextmanager
def csv_rows(path: Path, *, encoding: str = "utf-8-sig") -> Iterator[csv.DictReader]:
    with open(path, newline="", encoding=encoding) as fh:
        yield csv.DictReader(fh)


class CsvPunchEventSource(PunchEventSource):
    """Punch events from a spreadsheet export.

    Expected columns: ``timestamp``, ``guard_name``, ``event_type`` and an
    optional ``sequence``. Without a sequence column the spreadsheet row
    number is used, matching how the sheet numbers its rows.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def list_events(self) -> Sequence[PunchEvent]:
        if not self._path.exists():
            logger.warning("Punch CSV not found: %s", self._path)
            return ()

        events = []
        with csv_rows(self._path) as reader:
            for row_number, row in enumerate(reader, start=FIRST_DATA_ROW):
                event = self._to_event(row, row_number)
                if event is not None:
                    events.append(event)
        logger.debug("Loaded %d punch events from %s", len(events), self._path)
        return tuple(events)

    @staticmethod
    def _to_event(row: Dict[str, Any], row_number: int) -> PunchEvent | None:
        guard_name = (row.get("guard_name") or "").strip()
        if not guard_name:
            logger.warning("Skipping row %d without guard name", row_number)
            return None

        raw_sequence = (row.get("sequence") or "").strip()
        try:
            sequence = int(raw_sequence) if raw_sequence else row_number
        except ValueError:
            logger.warning("Row %d has non-numeric sequence %r, using row number", row_number, raw_sequence)
            sequence = row_number

        return PunchEvent(
            guard_name=guard_name,
            event_type=(row.get("event_type") or "").strip(),
            timestamp=normalize_timestamp((row.get("timestamp") or "").strip()),
            sequence=sequence,
        )
