"""Pytest configuration and fixtures.

Every test gets its own SQLite file in a temporary directory.

IMPORTANT: ``DATABASE_URL`` must be set BEFORE the application package
is imported, because ``water_tracker_api.app.main`` builds a module
level ``app`` (and its connection pool) at import time.
"""

import os
import tempfile

import pytest

if "DATABASE_URL" not in os.environ:
    _test_base_dir = tempfile.mkdtemp(prefix="water_tracker_test_")
    os.environ["DATABASE_URL"] = os.path.join(_test_base_dir, "import.db")


@pytest.fixture
def db(tmp_path):
    """Initialised database pool over a fresh file."""
    from water_tracker_api.app.core.db import Database

    database = Database(str(tmp_path / "test.db"), pool_size=2)
    database.init_db()
    yield database
    database.close()


@pytest.fixture
def client(db):
    """TestClient for an app wired to the ``db`` fixture.

    Entering the client runs the lifespan, which re‑applies migrations
    (a no‑op on an initialised database).
    """
    from fastapi.testclient import TestClient

    from water_tracker_api.app.core.config import Settings
    from water_tracker_api.app.main import create_app

    app = create_app(Settings(database_url=db.path, cors_origins="*"), db=db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_account(db):
    """Factory creating an account directly through the service."""
    from water_tracker_api.app.schemas.account import AccountCreate
    from water_tracker_api.app.services.account_service import AccountService

    def _make(user_name="alice", password="pw1", url="https://example.com/a.png", email="a@x.com"):
        return AccountService.create_account(
            db,
            AccountCreate(
                user_name=user_name,
                profile_picture_url=url,
                password=password,
                recovery_email=email,
            ),
        )

    return _make
