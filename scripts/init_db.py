#!/usr/bin/env python3
"""Create the projects/tasks schema at the configured database URL."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from schedule_store.config import get_database_config
from schedule_store.db.database import ConnectionProvider
from schedule_store.errors import ScheduleStoreError
from schedule_store.utils.redact import redact_url


def main() -> int:
    parser = argparse.ArgumentParser(description="Initialize the database")
    parser.add_argument("--url", type=str, help="Override SCHEDULE_DB_URL")
    args = parser.parse_args()

    config = get_database_config()
    if args.url:
        config = replace(config, url=args.url)

    provider = ConnectionProvider(config)
    try:
        provider.init_schema()
    except ScheduleStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Database initialized at: {redact_url(config.url or '')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
