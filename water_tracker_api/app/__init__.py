"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Persistence, configuration and password hashing live in
``core``; business logic for accounts and water counters lives in
``services``; the HTTP surface is defined by the routers in ``api``.
"""

from .main import app  # noqa: F401
