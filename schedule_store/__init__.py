"""Persist projects and their tasks to a relational store."""

from schedule_store.config import DatabaseConfig, get_database_config
from schedule_store.db import ConnectionProvider, InsertReport, ProjectRepository, UpdateResult
from schedule_store.errors import (
    ConfigurationError,
    DatabaseConnectionError,
    DateParseError,
    ScheduleStoreError,
    StatementError,
    UnitParseError,
)
from schedule_store.models import Duration, Project, Task, TimeUnit

__all__ = [
    "DatabaseConfig", "get_database_config",
    "ConnectionProvider", "ProjectRepository", "InsertReport", "UpdateResult",
    "ScheduleStoreError", "ConfigurationError", "DatabaseConnectionError",
    "StatementError", "UnitParseError", "DateParseError",
    "Duration", "Project", "Task", "TimeUnit",
]
