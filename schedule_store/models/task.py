"""Task domain model — one unit of work inside a project."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from schedule_store.models.duration import Duration


@dataclass
class Task:
    """A task with optional start/finish dates and an optional duration.

    ``start`` and ``finish`` may be ``date`` or ``datetime``; only the
    calendar day is persisted.
    """

    name: str
    start: Optional[date] = None
    finish: Optional[date] = None
    duration: Optional[Duration] = None
