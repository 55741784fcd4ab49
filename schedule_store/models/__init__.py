"""Domain models for projects, tasks and durations."""

from schedule_store.models.duration import Duration, TimeUnit
from schedule_store.models.task import Task
from schedule_store.models.project import Project

__all__ = ["Duration", "TimeUnit", "Task", "Project"]
