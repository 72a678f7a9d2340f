"""Configuration module for the User Directory API.

This module provides centralized configuration management, including the
data directory, database URL, API server settings and logging defaults.
All configuration values can be overridden via environment variables.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from user_directory.core.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_list(name: str, default: str) -> List[str]:
    """Split a comma-separated variable, dropping blanks and whitespace."""
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


# --- Directory Configuration ---

# Root directory of the project (the one holding src/)
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()

DATA_DIR_NAME = "data"
DATA_DIR = Path(os.getenv("DATA_DIR", str(ROOT_DIR / DATA_DIR_NAME)))

# --- Database Configuration ---

DATABASE_FILE_NAME = "user_directory.db"
DATABASE_URL: str = os.getenv(
    "DATABASE_URL", f"sqlite:///{DATA_DIR / DATABASE_FILE_NAME}"
)

# Echo every SQL statement SQLAlchemy emits
SQL_ECHO: bool = _env_bool("SQL_ECHO")

# --- API Server Configuration ---

API_TITLE = "User Directory API"
API_VERSION = "1.0.0"

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = _env_int("API_PORT", "8000")

# CORS allowed origins (comma-separated list)
CORS_ALLOWED_ORIGINS: List[str] = _env_list(
    "CORS_ALLOWED_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,"
    "http://127.0.0.1:3000",
)

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
