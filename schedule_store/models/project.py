"""Project domain model — a titled container of tasks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from schedule_store.models.duration import Duration
from schedule_store.models.task import Task


@dataclass
class Project:
    """A project identified by an externally assigned integer id."""

    project_id: int
    title: str
    tasks: list[Task] = field(default_factory=list)

    def add_task(
        self,
        name: str,
        start: Optional[date] = None,
        finish: Optional[date] = None,
        duration: Optional[Duration] = None,
    ) -> Task:
        task = Task(name=name, start=start, finish=finish, duration=duration)
        self.tasks.append(task)
        return task
