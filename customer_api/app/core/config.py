"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  In a
production deployment you should override these via environment
variables.  A ``Settings`` instance is handed to ``create_app`` and
from there to every component that needs it; nothing below the
application factory reads the module level ``settings`` object.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Customer API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  If a relative path is provided,
    # it is resolved relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "customer.db")

    host: str = os.getenv("CUSTOMER_API_HOST", "0.0.0.0")
    port: int = int(os.getenv("CUSTOMER_API_PORT", "8080"))

    # Joins the per-field messages of a 400 response.  Existing consumers
    # parse the plain concatenation, so the default is an empty string.
    validation_error_separator: str = os.getenv("VALIDATION_ERROR_SEPARATOR", "")


# Instantiate settings once so the entrypoints can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
