"""
Main entrypoint for the Water Tracker API.

This module assembles the FastAPI application, sets up logging, CORS
and error handling, and includes the routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn water_tracker_api.app.main:app --reload

or through ``run.py``, which also honours ``PORT``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import WaterTrackerError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    The connection pool is created here, once, and stored on
    ``app.state.db``; every request reuses it and it is never torn
    down explicitly.  Pass ``db`` to supply a pool built elsewhere
    (tests do this).

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    database = db or Database(app_settings.database_url, app_settings.db_pool_size)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Create the tables before the first request is served.
        app.state.db.init_db()
        logger.info("%s %s ready", app_settings.project_name, app_settings.api_version)
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.state.db = database

    origins = app_settings.allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(WaterTrackerError)
    async def water_tracker_error_handler(request: Request, exc: WaterTrackerError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Same {"error": ...} shape as every other failure.
        problems = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content={"error": "; ".join(problems)},
        )

    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
