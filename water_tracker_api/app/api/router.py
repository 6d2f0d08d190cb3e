"""
Top‑level router for the API.

Aggregates the domain routers.  Routes are served from the root path
because the web client calls ``/signup``, ``/scoreboard`` and so on
directly.
"""

from fastapi import APIRouter

from .endpoints import accounts, water

router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(water.router, tags=["water"])
