"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  Tests
and embedding code may construct their own ``Settings`` instance and
pass it to ``create_app`` instead of relying on the environment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Command API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional file receiving a copy of the log output.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module; ``:memory:`` keeps
    # the data for the lifetime of the store only.
    database_url: str = os.getenv("DATABASE_URL", "commands.db")

    # Prefix under which the versioned router is mounted.
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")


# Environment variables must be set before this module is imported.
settings = Settings()
