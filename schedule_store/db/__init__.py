"""Database layer — scoped SQLite connections and the project repository."""

from schedule_store.db.database import ConnectionProvider
from schedule_store.db.project_repo import InsertReport, ProjectRepository, UpdateResult
from schedule_store.db.schema import SCHEMA_DDL

__all__ = ["ConnectionProvider", "ProjectRepository", "InsertReport", "UpdateResult", "SCHEMA_DDL"]
