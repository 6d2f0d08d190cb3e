"""Entry point for the Water Tracker API.

Serves the FastAPI application with uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (or a ``.env`` file in
the working directory); defaults are ``0.0.0.0`` and ``3000``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from water_tracker_api.app.core.config import settings
from water_tracker_api.app.core.logging_config import setup_logging
from water_tracker_api.app.main import app


def main() -> None:
    """Run the API server until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    logging.getLogger(__name__).info("Server listening on port %d", settings.port)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
