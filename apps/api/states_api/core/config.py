from __future__ import annotations

"""Configuration helpers and environment-driven settings."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

API_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_STATIC_STATE_DATA_PATH = str(Path(__file__).resolve().parents[1] / "data" / "statesData.json")


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def resolve_path(path_str: str) -> Path:
    """Resolve a configured path, treating relative paths as relative to the API root."""
    path = Path(path_str)
    if path.is_absolute():
        return path
    return API_ROOT / path


@dataclass(frozen=True)
class Settings:
    """Typed configuration values used across the backend."""

    cors_origins: list[str]
    static_state_data_path: str
    state_records_path: str
    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment with defaults."""
    cors_raw = _get_str("CORS_ORIGINS", "*")
    cors_origins = [o.strip() for o in cors_raw.split(",") if o.strip()]
    if not cors_origins:
        cors_origins = ["*"]
    return Settings(
        cors_origins=cors_origins,
        static_state_data_path=_get_str("STATIC_STATE_DATA_PATH", DEFAULT_STATIC_STATE_DATA_PATH),
        state_records_path=_get_str("STATE_RECORDS_PATH", ""),
        log_level=_get_str("LOG_LEVEL", "INFO").upper(),
    )
