"""
Central configuration loader.
Reads database credentials from environment variables (via .env).
NEVER prints secret values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from schedule_store.errors import ConfigurationError


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")

ENV_URL = "SCHEDULE_DB_URL"
ENV_USER = "SCHEDULE_DB_USER"
ENV_PASSWORD = "SCHEDULE_DB_PASSWORD"


def _get(key: str) -> Optional[str]:
    return os.getenv(key)


# ---------------------------------------------------------------------------
# Database config
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DatabaseConfig:
    """Connection settings, loaded once and read-only afterwards.

    Values may be absent here; they are validated when a connection is
    first requested, not when the config is built.
    """

    url: Optional[str]
    user: Optional[str]
    password: Optional[str]

    def missing(self) -> list[str]:
        names = {ENV_URL: self.url, ENV_USER: self.user, ENV_PASSWORD: self.password}
        return [key for key, val in names.items() if not val]

    def require(self) -> None:
        missing = self.missing()
        if missing:
            raise ConfigurationError(
                f"Missing database configuration: {', '.join(missing)}"
            )

    def __repr__(self) -> str:
        return f"DatabaseConfig(url={self.url!r}, user={self.user!r}, password=***)"


def get_database_config() -> DatabaseConfig:
    return DatabaseConfig(
        url=_get(ENV_URL),
        user=_get(ENV_USER),
        password=_get(ENV_PASSWORD),
    )

