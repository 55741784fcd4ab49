"""Mapping between ``Task`` objects and rows of the ``tasks`` table."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Mapping, Optional

from schedule_store.errors import DateParseError, UnitParseError
from schedule_store.mapping import duration_codec
from schedule_store.models.task import Task

logger = logging.getLogger(__name__)

TASK_COLUMNS = (
    "project_id",
    "task_name",
    "start_date",
    "finish_date",
    "duration_value",
    "duration_units",
)


def encode_date(value: Optional[date]) -> Optional[str]:
    """Truncate to the calendar day and render as ``YYYY-MM-DD``."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def decode_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # stored text may carry a time part written by other tools
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as e:
        raise DateParseError(value) from e


def to_row(task: Task, project_id: int) -> dict[str, Any]:
    value, units = duration_codec.encode(task.duration)
    return {
        "project_id": project_id,
        "task_name": task.name,
        "start_date": encode_date(task.start),
        "finish_date": encode_date(task.finish),
        "duration_value": value,
        "duration_units": units,
    }


def from_row(row: Mapping[str, Any], strict: bool = True) -> Task:
    """Rebuild a ``Task``; absent columns stay absent.

    With ``strict=False`` a malformed duration or date is dropped (and
    logged) instead of raising ``UnitParseError`` / ``DateParseError``.
    """
    name = row["task_name"]
    try:
        duration = duration_codec.decode(row["duration_value"], row["duration_units"])
    except UnitParseError as e:
        if strict:
            raise
        logger.warning(f"Task {name!r}: ignoring duration ({e})")
        duration = None

    return Task(
        name=name,
        start=_lenient_date(name, "start_date", row["start_date"], strict),
        finish=_lenient_date(name, "finish_date", row["finish_date"], strict),
        duration=duration,
    )


def _lenient_date(name: str, column: str, value: Any, strict: bool) -> Optional[date]:
    try:
        return decode_date(value)
    except DateParseError as e:
        if strict:
            raise
        logger.warning(f"Task {name!r}: ignoring {column} ({e})")
        return None
