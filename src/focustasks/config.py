# src/focustasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a sensible local default; nothing is required.
- The per-user storage key is derived here, not scattered across callers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "FOCUSTASKS"

DEFAULT_KEY_PREFIX = "focustasks"
DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def storage_key_for(user_id: str, prefix: str = DEFAULT_KEY_PREFIX) -> str:
    """Storage key for one user's task list, e.g. ``focustasks_6092``."""
    return f"{prefix}_{user_id}"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Identity ----
    user_id: str
    key_prefix: str

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_path: Path

    # ---- Storage tuning ----
    storage_quota_bytes: int

    @property
    def storage_key(self) -> str:
        return storage_key_for(self.user_id, self.key_prefix)

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "FocusTasks")
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        user_id = _env(_k("USER_ID"), "0000").strip() or "0000"
        key_prefix = _env(_k("KEY_PREFIX"), DEFAULT_KEY_PREFIX).strip() or DEFAULT_KEY_PREFIX

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/focustasks"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "storage.sqlite3")

        storage_quota_bytes = max(0, _env_int(_k("STORAGE_QUOTA_BYTES"), DEFAULT_QUOTA_BYTES))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            user_id=user_id,
            key_prefix=key_prefix,
            console_enabled=console_enabled,
            data_dir=data_dir,
            storage_path=storage_path,
            storage_quota_bytes=storage_quota_bytes,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
