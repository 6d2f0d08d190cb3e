"""
SQLite connection pool and simple migration system.

A single :class:`Database` is created when the application is built
and kept on ``app.state.db`` for the lifetime of the process.  It
holds a bounded pool of connections that every request shares;
services receive the ``Database`` explicitly as their first argument.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import queue
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import ConflictError, StorageError

logger = logging.getLogger(__name__)

SQLITE_URL_PREFIX = "sqlite:///"

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: accounts and their water counters
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_name TEXT NOT NULL UNIQUE,
            profile_picture_url TEXT,
            password TEXT NOT NULL,
            recovery_email TEXT,
            daily_water INTEGER NOT NULL DEFAULT 0,
            week_water INTEGER NOT NULL DEFAULT 0,
            total_water INTEGER NOT NULL DEFAULT 0
        );
        """,
    ),
    # Migration 2: index backing the leaderboard ordering
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_users_total_water ON users(total_water DESC);
        """,
    ),
    # Migration 3: counters must stay integers.  SQLite turns an
    # overflowing sum into a REAL; the CHECK rejects that write.  A CHECK
    # cannot be added in place, so the table is rebuilt.
    (
        3,
        """
        BEGIN;
        CREATE TABLE users_new (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_name TEXT NOT NULL UNIQUE,
            profile_picture_url TEXT,
            password TEXT NOT NULL,
            recovery_email TEXT,
            daily_water INTEGER NOT NULL DEFAULT 0 CHECK (typeof(daily_water) = 'integer'),
            week_water INTEGER NOT NULL DEFAULT 0 CHECK (typeof(week_water) = 'integer'),
            total_water INTEGER NOT NULL DEFAULT 0 CHECK (typeof(total_water) = 'integer')
        );
        INSERT INTO users_new (
            id, user_name, profile_picture_url, password, recovery_email,
            daily_water, week_water, total_water
        )
        SELECT id, user_name, profile_picture_url, password, recovery_email,
               daily_water, week_water, total_water
        FROM users;
        DROP TABLE users;
        ALTER TABLE users_new RENAME TO users;
        CREATE INDEX IF NOT EXISTS idx_users_total_water ON users(total_water DESC);
        COMMIT;
        """,
    ),
]

UNIQUE_VIOLATION = "UNIQUE constraint failed"


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Accepts either a plain path or a ``sqlite:///`` URL.  Absolute
    paths are used directly; relative ones are resolved against the
    project root.  ``:memory:`` is passed through untouched.
    """
    db_url = database_url
    if db_url.startswith(SQLITE_URL_PREFIX):
        db_url = db_url[len(SQLITE_URL_PREFIX):]
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


class Database:
    """Bounded pool of SQLite connections.

    Connections are opened eagerly and handed out by
    :meth:`connection`.  When every connection is checked out, callers
    block until one is returned; there is no timeout.
    """

    def __init__(self, database_url: str, pool_size: int = 5) -> None:
        if pool_size < 1:
            raise ValueError("pool_size must be at least 1")
        self.path = get_database_path(database_url)
        self.pool_size = pool_size
        self._pool: "queue.Queue[sqlite3.Connection]" = queue.Queue(maxsize=pool_size)
        for _ in range(pool_size):
            self._pool.put(self._connect())
        logger.info("Opened %d connections to %s", pool_size, self.path)

    def _connect(self) -> sqlite3.Connection:
        # Connections move between FastAPI worker threads; the pool
        # guarantees only one thread uses a connection at a time.
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Check out a connection for the duration of one operation.

        Commits when the block exits normally and rolls back otherwise.
        ``sqlite3`` errors are translated into the application's error
        taxonomy: unique violations become ``ConflictError``, any other
        failure (including integers too large to bind) ``StorageError``.
        Other exceptions propagate unchanged.
        """
        conn = self._pool.get()
        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if UNIQUE_VIOLATION in str(e):
                raise ConflictError(str(e)) from e
            raise StorageError(str(e)) from e
        except (sqlite3.Error, OverflowError) as e:
            conn.rollback()
            raise StorageError(str(e)) from e
        except BaseException:
            conn.rollback()
            raise
        finally:
            self._pool.put(conn)

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Context manager that yields a cursor on a pooled connection."""
        with self.connection() as conn:
            yield conn.cursor()

    def init_db(self) -> None:
        """Create the schema and apply pending migrations.

        Creates the ``migrations`` table if it does not exist, checks
        the current schema version, and applies any new migrations
        defined in ``MIGRATIONS``.  Append new migrations with an
        incremented version number.
        """
        with self.cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) AS version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    logger.info("Applying migration %d", version)
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version

    def close(self) -> None:
        """Close every pooled connection.

        The running service never calls this; it exists for scripts
        and tests that build a short‑lived ``Database``.
        """
        while True:
            try:
                conn = self._pool.get_nowait()
            except queue.Empty:
                break
            conn.close()
