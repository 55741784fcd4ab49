"""Connection acquisition — one scoped connection per operation."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Generator, Optional

from schedule_store.config import DatabaseConfig, get_database_config
from schedule_store.db.schema import SCHEMA_DDL
from schedule_store.errors import ConfigurationError, DatabaseConnectionError, StatementError
from schedule_store.utils.redact import redact_url

logger = logging.getLogger(__name__)

# Returns a sqlite3-compatible connection: the repository uses
# ``conn.execute``, qmark placeholders and catches ``sqlite3.Error``.
ConnectFactory = Callable[[str, str, str], sqlite3.Connection]

_SQLITE_PREFIX = "sqlite:///"


def sqlite_path_from_url(url: str) -> str:
    """``sqlite:///rel.db`` → ``rel.db``; ``sqlite:////abs.db`` → ``/abs.db``.

    Bare filesystem paths (and ``:memory:``) are passed through.
    """
    if url.startswith(_SQLITE_PREFIX):
        path = url[len(_SQLITE_PREFIX):]
        if not path:
            raise ConfigurationError(f"No database path in URL: {redact_url(url)}")
        return path
    if "://" in url:
        raise ConfigurationError(f"Unsupported database URL: {redact_url(url)}")
    return url


def connect_sqlite(url: str, user: str, password: str) -> sqlite3.Connection:
    """Default connect factory.  SQLite has no accounts, so the credentials
    are validated upstream but not used here."""
    path = sqlite_path_from_url(url)
    if path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    try:
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
    except Exception:
        conn.close()
        raise
    return conn


class ConnectionProvider:
    """
    Produces a live SQLite connection from an injected ``DatabaseConfig``.
    A custom ``connect`` factory must return a ``sqlite3.Connection``
    (tests use it to inject failures).

    ``acquire()`` is the only way repositories reach the database: it
    commits on success, rolls back on failure, and always closes the
    connection.  No pooling and no retries.
    """

    def __init__(self, config: DatabaseConfig, connect: Optional[ConnectFactory] = None):
        self.config = config
        self._connect = connect or connect_sqlite

    @classmethod
    def from_env(cls, connect: Optional[ConnectFactory] = None) -> "ConnectionProvider":
        return cls(get_database_config(), connect=connect)

    # -- connection lifecycle --------------------------------------------------

    def connect(self) -> Any:
        """Open a new connection.  The caller owns it and must close it."""
        self.config.require()
        try:
            conn = self._connect(self.config.url, self.config.user, self.config.password)  # type: ignore[arg-type]
        except ConfigurationError:
            raise
        except Exception as e:
            raise DatabaseConnectionError(
                f"Could not connect to {redact_url(self.config.url or '')}: {e}"
            ) from e
        logger.debug(f"Opened connection to {redact_url(self.config.url or '')}")
        return conn

    @contextmanager
    def acquire(self) -> Generator[Any, None, None]:
        """Scoped connection: commit on success, roll back on exception.

        Driver errors escaping the block are re-raised as ``StatementError``.
        """
        conn = self.connect()
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StatementError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create all tables (idempotent)."""
        with self.acquire() as conn:
            conn.executescript(SCHEMA_DDL)
        logger.info(f"Schema ready at {redact_url(self.config.url or '')}")
