from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, Optional

from core.domain.enums import RoundingMode
from core.exceptions import ValidationError
from core.services.scheduling.estimates import round_offset
from core.services.scheduling.models import CalendarRange, CPMNode

logger = logging.getLogger(__name__)


def parse_start_date(value: date | datetime | str | None) -> Optional[date]:
    """
    Coerce a project start date; returns None when it cannot be read.

    Strings are read as ISO dates ("2026-01-01"); a full ISO timestamp keeps
    only its date part.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None
    return None


def project_dates(
    nodes: Iterable[CPMNode],
    start_date: date | datetime | str | None,
    rounding: RoundingMode = RoundingMode.HALF_UP,
) -> Dict[str, CalendarRange]:
    """
    Map each node's early start/finish offsets onto calendar days.

    Day 0 is the start date itself. Every calendar day counts, weekends
    included. An unreadable start date yields an empty map.
    """
    base = parse_start_date(start_date)
    if base is None:
        logger.warning("Skipping calendar projection: invalid start date %r", start_date)
        return {}

    result: Dict[str, CalendarRange] = {}
    for node in nodes:
        try:
            result[node.id] = CalendarRange(
                start_date=base + timedelta(days=round_offset(node.early_start, rounding)),
                end_date=base + timedelta(days=round_offset(node.early_finish, rounding)),
            )
        except (ValidationError, OverflowError) as exc:
            logger.warning("No calendar range for task %s: %s", node.id, exc)
    return result


__all__ = ["parse_start_date", "project_dates"]
