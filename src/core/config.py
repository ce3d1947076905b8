"""
Configuration read from environment variables.

A ``.env`` file in the working directory is loaded first, so local overrides do not need to be exported.
Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

STORAGE_MEMORY = "memory"
STORAGE_SQL = "sql"


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings. Values are read when the instance is created."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Games API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))
    storage_backend: str = field(
        default_factory=lambda: _env("STORAGE_BACKEND", STORAGE_MEMORY).lower()
    )
    database_url: str = field(
        default_factory=lambda: _env("DATABASE_URL", "sqlite:///:memory:")
    )
    host: str = field(default_factory=lambda: _env("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8000")))


settings = Settings()
