"""Request dependencies shared by the endpoint modules."""

from fastapi import Request

from water_tracker_api.app.core.db import Database


def get_db(request: Request) -> Database:
    """Return the process‑wide database pool created by ``create_app``."""
    return request.app.state.db
