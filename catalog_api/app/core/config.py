"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so that no ``pydantic-settings`` package is
needed.  Defaults are provided for all fields.  The store contents
themselves are never configured: records live in memory only.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Defaults use ``default_factory`` so that a fresh ``Settings()``
    picks up the environment as it is at construction time rather
    than at import time.
    """

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Catalog API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Prefix under which the resource routes are mounted.  Empty by
    # default so the routes are exactly ``/products`` and ``/users``.
    # Set e.g. ``API_PREFIX=/api/v1`` to move them.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", ""))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
