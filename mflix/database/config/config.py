"""
Configuration - Pydantic v2 Settings (env / .env)
================================================

Purpose
-------
Centralized, strongly-typed configuration for the MongoDB data-access layer using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- `MFLIX_DB_URI` is required; every other knob has a stated default.
- `extra="ignore"`: unknown env vars are ignored (not an error).
- Nothing is read at import time. Call `load_settings()` for the cached
  process-wide instance, or build `Settings(...)` directly (tests).

Usage
-----
from mflix.database.config.config import load_settings

settings = load_settings()
db_name = settings.MFLIX_DB_NAME

Security
--------
- Never commit the `.env` file; connection strings usually embed credentials.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Connection, durability and logging settings loaded from environment variables
    or a `.env` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    MFLIX_DB_URI: str = Field(..., description="MongoDB connection string (e.g., `mongodb+srv://...`).")
    MFLIX_DB_NAME: str = Field("sample_mflix", description="Name of the MFlix database.")
    MFLIX_CONNECT_TIMEOUT_MS: int = Field(30000, ge=1, description="Socket connect timeout in milliseconds.")
    MFLIX_SERVER_SELECTION_TIMEOUT_MS: int = Field(30000, ge=1, description="Server selection timeout in milliseconds.")
    MFLIX_MAX_POOL_WAIT_MS: int = Field(2000, ge=1, description="Max time a request waits for a pooled connection.")
    MFLIX_WRITE_CONCERN_W: str = Field("majority", description="Default write concern `w` value (`majority` or a node count).")
    MFLIX_WRITE_CONCERN_WTIMEOUT_MS: int = Field(2500, ge=0, description="Write concern timeout in milliseconds.")
    LOG_LEVEL: str = Field("INFO", description="Root log level (e.g., `DEBUG`, `INFO`, `WARNING`).")

    @property
    def write_concern_w(self) -> int | str:
        """`w` as pymongo expects it: an int for node counts, else the tag/`majority` string."""
        w = self.MFLIX_WRITE_CONCERN_W.strip()
        return int(w) if w.isdigit() else w


@lru_cache
def load_settings() -> Settings:
    """Return the process-wide Settings instance, loading it on first use."""
    return Settings()
