"""Row mapping — tasks and durations to/from their relational columns."""

from schedule_store.mapping import duration_codec, task_mapper

__all__ = ["duration_codec", "task_mapper"]
