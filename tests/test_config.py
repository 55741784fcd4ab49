"""Tests for environment-driven database configuration."""

from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from schedule_store.config import DatabaseConfig, get_database_config
from schedule_store.errors import ConfigurationError

_FULL_ENV = {
    "SCHEDULE_DB_URL": "sqlite:///data/test.db",
    "SCHEDULE_DB_USER": "scheduler",
    "SCHEDULE_DB_PASSWORD": "s3cret",
}


class TestDatabaseConfig(unittest.TestCase):
    def test_reads_environment(self):
        with patch.dict(os.environ, _FULL_ENV, clear=True):
            cfg = get_database_config()
        self.assertEqual(cfg.url, "sqlite:///data/test.db")
        self.assertEqual(cfg.user, "scheduler")
        self.assertEqual(cfg.password, "s3cret")
        self.assertEqual(cfg.missing(), [])
        cfg.require()

    def test_missing_values_do_not_fail_at_load(self):
        with patch.dict(os.environ, {}, clear=True):
            cfg = get_database_config()
        self.assertIsNone(cfg.url)
        self.assertEqual(
            cfg.missing(),
            ["SCHEDULE_DB_URL", "SCHEDULE_DB_USER", "SCHEDULE_DB_PASSWORD"],
        )

    def test_require_names_missing_keys(self):
        cfg = DatabaseConfig(url="sqlite:///x.db", user="", password=None)
        with self.assertRaises(ConfigurationError) as ctx:
            cfg.require()
        self.assertIn("SCHEDULE_DB_USER", str(ctx.exception))
        self.assertIn("SCHEDULE_DB_PASSWORD", str(ctx.exception))

    def test_frozen(self):
        cfg = DatabaseConfig(url="a", user="b", password="c")
        with self.assertRaises(Exception):
            cfg.url = "other"  # type: ignore[misc]

    def test_repr_hides_password(self):
        cfg = DatabaseConfig(url="sqlite:///x.db", user="bob", password="hunter2")
        self.assertNotIn("hunter2", repr(cfg))


if __name__ == "__main__":
    unittest.main()
