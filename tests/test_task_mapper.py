"""Unit tests for the task ⇄ row mapping."""

from __future__ import annotations

import unittest
from datetime import date, datetime

from schedule_store.errors import DateParseError, UnitParseError
from schedule_store.mapping import task_mapper
from schedule_store.models.duration import Duration, TimeUnit
from schedule_store.models.task import Task


def _row(**overrides) -> dict:
    row = dict(
        project_id=1,
        task_name="Pour foundations",
        start_date="2026-03-02",
        finish_date="2026-03-06",
        duration_value=5.0,
        duration_units="days",
    )
    row.update(overrides)
    return row


class TestDateEncoding(unittest.TestCase):
    def test_datetime_truncated_to_day(self):
        self.assertEqual(task_mapper.encode_date(datetime(2026, 3, 2, 17, 45)), "2026-03-02")

    def test_date_kept(self):
        self.assertEqual(task_mapper.encode_date(date(2026, 3, 2)), "2026-03-02")

    def test_none_kept(self):
        self.assertIsNone(task_mapper.encode_date(None))

    def test_decode_rejects_non_iso_text(self):
        with self.assertRaises(DateParseError):
            task_mapper.decode_date("03/02/2026")

    def test_other_types_rejected(self):
        with self.assertRaises(TypeError):
            task_mapper.encode_date("2026-03-02")  # type: ignore[arg-type]

    def test_decode(self):
        self.assertIsNone(task_mapper.decode_date(None))
        self.assertEqual(task_mapper.decode_date("2026-03-02"), date(2026, 3, 2))
        self.assertEqual(task_mapper.decode_date("2026-03-02 08:00:00"), date(2026, 3, 2))
        self.assertEqual(task_mapper.decode_date(date(2026, 3, 2)), date(2026, 3, 2))
        self.assertEqual(task_mapper.decode_date(datetime(2026, 3, 2, 8)), date(2026, 3, 2))


class TestToRow(unittest.TestCase):
    def test_full_task(self):
        task = Task(
            name="Pour foundations",
            start=datetime(2026, 3, 2, 9, 30),
            finish=date(2026, 3, 6),
            duration=Duration(5, TimeUnit.DAYS),
        )
        self.assertEqual(task_mapper.to_row(task, 1), _row())

    def test_empty_task_maps_to_nulls(self):
        row = task_mapper.to_row(Task(name="Placeholder"), 7)
        self.assertEqual(row["project_id"], 7)
        self.assertEqual(row["task_name"], "Placeholder")
        for column in ("start_date", "finish_date", "duration_value", "duration_units"):
            self.assertIsNone(row[column], column)

    def test_columns_match_row_keys(self):
        row = task_mapper.to_row(Task(name="x"), 1)
        self.assertEqual(tuple(row), task_mapper.TASK_COLUMNS)


class TestFromRow(unittest.TestCase):
    def test_full_row(self):
        task = task_mapper.from_row(_row())
        self.assertEqual(task.name, "Pour foundations")
        self.assertEqual(task.start, date(2026, 3, 2))
        self.assertEqual(task.finish, date(2026, 3, 6))
        self.assertEqual(task.duration, Duration(5, TimeUnit.DAYS))

    def test_null_row_has_no_synthetic_values(self):
        task = task_mapper.from_row(_row(
            start_date=None, finish_date=None, duration_value=None, duration_units=None,
        ))
        self.assertIsNone(task.start)
        self.assertIsNone(task.finish)
        self.assertIsNone(task.duration)

    def test_bad_unit_strict_raises(self):
        with self.assertRaises(UnitParseError):
            task_mapper.from_row(_row(duration_units="lightyears"), strict=True)

    def test_bad_date_strict_raises(self):
        with self.assertRaises(DateParseError):
            task_mapper.from_row(_row(finish_date="next tuesday"), strict=True)

    def test_bad_date_lenient_drops_only_that_date(self):
        with self.assertLogs("schedule_store.mapping.task_mapper", level="WARNING"):
            task = task_mapper.from_row(_row(finish_date="next tuesday"), strict=False)
        self.assertEqual(task.start, date(2026, 3, 2))
        self.assertIsNone(task.finish)
        self.assertEqual(task.duration, Duration(5, TimeUnit.DAYS))

    def test_bad_unit_lenient_drops_duration(self):
        with self.assertLogs("schedule_store.mapping.task_mapper", level="WARNING"):
            task = task_mapper.from_row(_row(duration_units="lightyears"), strict=False)
        self.assertEqual(task.name, "Pour foundations")
        self.assertEqual(task.start, date(2026, 3, 2))
        self.assertIsNone(task.duration)


if __name__ == "__main__":
    unittest.main()
