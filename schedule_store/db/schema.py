"""Database schema DDL — projects and their tasks."""

SCHEMA_DDL = """
PRAGMA foreign_keys = ON;

-- ==========================================================================
-- Projects
-- ==========================================================================
CREATE TABLE IF NOT EXISTS projects (
    project_id      INTEGER PRIMARY KEY,
    project_name    TEXT
);

-- ==========================================================================
-- Tasks (one row per task, keyed to its project)
-- ==========================================================================
CREATE TABLE IF NOT EXISTS tasks (
    project_id      INTEGER NOT NULL REFERENCES projects(project_id),
    task_name       TEXT NOT NULL,
    start_date      DATE,
    finish_date     DATE,
    duration_value  DOUBLE,
    duration_units  TEXT,
    CHECK ((duration_value IS NULL) = (duration_units IS NULL))
);

CREATE INDEX IF NOT EXISTS idx_tasks_project ON tasks(project_id);
"""
