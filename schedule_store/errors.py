"""Error taxonomy for the persistence layer.

A missing project is not an error: lookups return ``None`` and updates
return ``UpdateResult.NOT_FOUND``.
"""

from __future__ import annotations

from typing import Optional


class ScheduleStoreError(Exception):
    """Base class for every error raised by schedule_store."""


class ConfigurationError(ScheduleStoreError):
    """Credentials or connection URL are missing or unusable."""


class DatabaseConnectionError(ScheduleStoreError):
    """The database could not be reached or the connection failed."""


class StatementError(DatabaseConnectionError):
    """A statement failed on an otherwise live connection."""


class UnitParseError(ScheduleStoreError, ValueError):
    """A duration unit label (or duration text) could not be parsed."""

    def __init__(self, label: object, message: Optional[str] = None):
        self.label = label
        super().__init__(message or f"Unrecognised duration unit: {label!r}")


class DateParseError(ScheduleStoreError, ValueError):
    """A stored start/finish date is not a calendar date."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unparseable date: {value!r}")
