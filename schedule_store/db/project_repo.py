"""Repository for the ``projects`` and ``tasks`` tables."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from schedule_store.db.database import ConnectionProvider
from schedule_store.errors import ScheduleStoreError, StatementError
from schedule_store.mapping import task_mapper
from schedule_store.models.project import Project
from schedule_store.models.task import Task

logger = logging.getLogger(__name__)

_INSERT_TASK = (
    f"INSERT INTO tasks ({', '.join(task_mapper.TASK_COLUMNS)}) "
    f"VALUES ({', '.join('?' * len(task_mapper.TASK_COLUMNS))})"
)


class UpdateResult(str, Enum):
    APPLIED = "applied"
    NOT_FOUND = "not_found"


@dataclass
class FailedTask:
    index: int
    task_name: Optional[str]
    error: ScheduleStoreError


@dataclass
class InsertReport:
    """Outcome of ``insert_project``: the project row always went in."""

    project_id: int
    imported: int = 0
    failed: list[FailedTask] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class ProjectRepository:
    """Project-level persistence; each call uses its own connection."""

    def __init__(self, provider: ConnectionProvider):
        self._provider = provider

    # -- Create ----------------------------------------------------------------

    def insert_project(self, project: Project) -> InsertReport:
        """Insert the project row, then each of its tasks.

        If the project row fails, ``StatementError`` is raised and no task is
        attempted.  Tasks are committed one at a time; a failing task is
        rolled back, recorded in the report, and the rest still run.
        """
        report = InsertReport(project_id=project.project_id)
        with self._provider.acquire() as conn:
            try:
                conn.execute(
                    "INSERT INTO projects (project_id, project_name) VALUES (?, ?)",
                    (project.project_id, project.title),
                )
                conn.commit()
            except sqlite3.Error as e:
                raise StatementError(
                    f"Could not insert project {project.project_id}: {e}"
                ) from e
            logger.info(f"Inserted project {project.project_id}: {project.title}")

            for index, task in enumerate(project.tasks):
                try:
                    self._insert_task(conn, task, project.project_id)
                    conn.commit()
                except ScheduleStoreError as e:
                    conn.rollback()
                    logger.warning(
                        f"Task {index} ({task.name!r}) of project {project.project_id} not imported: {e}"
                    )
                    report.failed.append(FailedTask(index, task.name, e))
                else:
                    report.imported += 1
        return report

    def import_task(self, task: Task, project_id: int) -> None:
        with self._provider.acquire() as conn:
            self._insert_task(conn, task, project_id)
        logger.info(f"Imported task {task.name!r} into project {project_id}")

    def _insert_task(self, conn: Any, task: Task, project_id: int) -> None:
        try:
            row = task_mapper.to_row(task, project_id)
        except TypeError as e:
            raise StatementError(f"Task {task.name!r} cannot be mapped: {e}") from e
        try:
            conn.execute(_INSERT_TASK, tuple(row[c] for c in task_mapper.TASK_COLUMNS))
        except sqlite3.Error as e:
            raise StatementError(f"Could not insert task {task.name!r}: {e}") from e

    # -- Update ----------------------------------------------------------------

    def update_project_name(self, project_id: int, new_name: str) -> UpdateResult:
        with self._provider.acquire() as conn:
            try:
                changed = conn.execute(
                    "UPDATE projects SET project_name = ? WHERE project_id = ?",
                    (new_name, project_id),
                ).rowcount
            except sqlite3.Error as e:
                raise StatementError(f"Could not rename project {project_id}: {e}") from e
        if changed == 0:
            logger.info(f"Project {project_id} not found; name not updated")
            return UpdateResult.NOT_FOUND
        logger.info(f"Renamed project {project_id} to {new_name!r}")
        return UpdateResult.APPLIED

    def rename(self, project: Project, new_name: str) -> UpdateResult:
        """Rename in the database, then in memory if the write applied."""
        result = self.update_project_name(project.project_id, new_name)
        if result is UpdateResult.APPLIED:
            project.title = new_name
        return result

    # -- Read ------------------------------------------------------------------

    def read_project_data(self, project_id: int, strict: bool = False) -> Optional[Project]:
        """Load a project with its tasks in insertion order.

        Returns ``None`` when the project does not exist.  A task whose
        stored duration or date cannot be parsed keeps its other fields and
        loses only the malformed one, unless ``strict`` is set, in which case
        ``UnitParseError`` or ``DateParseError`` aborts the read.
        """
        with self._provider.acquire() as conn:
            try:
                row = conn.execute(
                    "SELECT project_id, project_name FROM projects WHERE project_id = ?",
                    (project_id,),
                ).fetchone()
                if row is None:
                    return None
                task_rows = conn.execute(
                    f"SELECT {', '.join(task_mapper.TASK_COLUMNS)} FROM tasks "
                    "WHERE project_id = ? ORDER BY rowid",
                    (project_id,),
                ).fetchall()
            except sqlite3.Error as e:
                raise StatementError(f"Could not read project {project_id}: {e}") from e

        project = Project(project_id=row["project_id"], title=row["project_name"])
        for task_row in task_rows:
            project.tasks.append(task_mapper.from_row(task_row, strict=strict))
        return project
