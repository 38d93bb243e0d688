"""Timestamp normalizer.

Punch sources deliver either machine timestamps (``2025-01-06T06:30:00.000Z``)
or spreadsheet-localized strings such as ``6-1-2568 13:30`` (day-month-year,
possibly Buddhist era, local wall-clock time). Everything leaves here as a
canonical UTC string; anything unreadable leaves unchanged.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

from ..common.datetime_utils import LOCAL_OFFSET, format_utc
from ..core.constants import BUDDHIST_ERA_MIN_YEAR, BUDDHIST_ERA_OFFSET

logger = logging.getLogger(__name__)

_LOCALIZED_RE = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})\s+(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def is_canonical(value: str) -> bool:
    return "T" in value


def normalize_timestamp(value: str) -> str:
    if not isinstance(value, str) or is_canonical(value):
        return value

    match = _LOCALIZED_RE.match(value.strip())
    if not match:
        logger.debug("Unrecognized timestamp left as-is: %r", value)
        return value

    day, month, year, hour, minute = (int(g) for g in match.groups()[:5])
    second = int(match.group(6) or 0)
    if year > BUDDHIST_ERA_MIN_YEAR:
        year -= BUDDHIST_ERA_OFFSET

    try:
        local = datetime(year, month, day, hour, minute, second)
    except ValueError:
        logger.debug("Out-of-range timestamp left as-is: %r", value)
        return value

    return format_utc(local - LOCAL_OFFSET)
