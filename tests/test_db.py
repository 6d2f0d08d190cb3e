"""Tests for the connection pool and migrations."""

import os
import threading

import pytest

from water_tracker_api.app.core.db import MIGRATIONS, Database, get_database_path
from water_tracker_api.app.core.errors import ConflictError, StorageError


def test_sqlite_url_prefix_is_stripped(tmp_path):
    path = str(tmp_path / "x.db")
    assert get_database_path(f"sqlite:///{path}") == path


def test_relative_path_resolves_to_absolute():
    assert os.path.isabs(get_database_path("water_tracker.db"))


def test_init_db_is_idempotent(db):
    db.init_db()
    with db.cursor() as cursor:
        version = cursor.execute("SELECT MAX(version) AS v FROM migrations").fetchone()["v"]
    assert version == MIGRATIONS[-1][0]


def test_failed_block_rolls_back(db):
    with pytest.raises(RuntimeError):
        with db.cursor() as cursor:
            cursor.execute("INSERT INTO users (user_name, password) VALUES ('x', 'h')")
            raise RuntimeError("boom")
    with db.cursor() as cursor:
        assert cursor.execute("SELECT COUNT(*) AS n FROM users").fetchone()["n"] == 0


def test_sqlite_errors_are_translated(db):
    with pytest.raises(StorageError):
        with db.cursor() as cursor:
            cursor.execute("SELECT * FROM missing_table")
    with pytest.raises(ConflictError):
        with db.cursor() as cursor:
            cursor.execute("INSERT INTO users (user_name, password) VALUES ('dup', 'h')")
            cursor.execute("INSERT INTO users (user_name, password) VALUES ('dup', 'h')")


def test_other_constraint_failures_are_storage_errors(db):
    with pytest.raises(StorageError) as excinfo:
        with db.cursor() as cursor:
            cursor.execute("INSERT INTO users (user_name) VALUES ('no password')")
    assert not isinstance(excinfo.value, ConflictError)


def test_overflowing_parameter_is_a_storage_error(db):
    with pytest.raises(StorageError):
        with db.cursor() as cursor:
            cursor.execute("SELECT ? AS too_big", (10**20,))


def test_counters_reject_non_integer_values(db):
    with pytest.raises(StorageError, match="CHECK constraint failed"):
        with db.cursor() as cursor:
            cursor.execute(
                "INSERT INTO users (user_name, password, total_water) VALUES ('x', 'h', 1.5)"
            )


def test_rebuild_migration_keeps_existing_rows(tmp_path):
    database = Database(str(tmp_path / "old.db"), pool_size=1)
    with database.cursor() as cursor:
        cursor.execute("CREATE TABLE migrations (version INTEGER PRIMARY KEY)")
        for version, sql in MIGRATIONS[:2]:
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
        cursor.execute(
            "INSERT INTO users (user_name, password, daily_water, week_water, total_water) "
            "VALUES ('alice', 'h', 1, 2, 3)"
        )

    database.init_db()

    with database.cursor() as cursor:
        row = cursor.execute("SELECT * FROM users WHERE user_name = 'alice'").fetchone()
        assert (row["id"], row["daily_water"], row["week_water"], row["total_water"]) == (1, 1, 2, 3)
        cursor.execute("INSERT INTO users (user_name, password) VALUES ('bob', 'h')")
        assert cursor.lastrowid == 2
    database.close()

def test_connection_returned_to_pool_after_error(db):
    for _ in range(db.pool_size + 1):
        with pytest.raises(StorageError):
            with db.cursor() as cursor:
                cursor.execute("SELECT * FROM missing_table")
    with db.cursor() as cursor:
        assert cursor.execute("SELECT 1 AS one").fetchone()["one"] == 1


def test_pool_blocks_when_exhausted(tmp_path):
    database = Database(str(tmp_path / "pool.db"), pool_size=1)
    acquired = threading.Event()

    def worker():
        with database.connection():
            acquired.set()

    with database.connection():
        thread = threading.Thread(target=worker)
        thread.start()
        assert not acquired.wait(0.2)
    thread.join(timeout=5)
    assert acquired.is_set()
    database.close()


def test_pool_size_must_be_positive(tmp_path):
    with pytest.raises(ValueError):
        Database(str(tmp_path / "bad.db"), pool_size=0)
