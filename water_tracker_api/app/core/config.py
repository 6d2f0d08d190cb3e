"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (via python-dotenv) so that local deployments can keep
the database location and port next to the code.  Defaults are
provided for all fields.
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Water Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path or ``sqlite:///`` URL of the database file.  Relative paths
    # are resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "water_tracker.db")
    # Number of connections kept in the pool.  Requests block until a
    # connection is free once all of them are checked out.
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "5"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of allowed origins; ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Environment variables (and .env) must be in place before this module
# is imported, because the dataclass defaults are read at class creation.
settings = Settings()
