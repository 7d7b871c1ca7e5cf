"""Settings loaded from environment variables (+ optional .env).

Store credentials are opaque strings handed to the REST client; nothing
is required at import time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKDECK"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _first_env(*names: str, default: str = "") -> str:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v.strip()
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip().upper()
    if raw and isinstance(logging.getLevelName(raw), int):
        return raw
    return default


@dataclass(frozen=True)
class Settings:
    # ---- Remote store ----
    store_url: str
    store_key: str
    table: str

    # ---- Logging ----
    log_dir: Path
    log_level: str

    # ---- UI ----
    dark: bool

    @property
    def store_configured(self) -> bool:
        return bool(self.store_url and self.store_key)

    def with_overrides(self, **changes) -> "Settings":
        """Copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(*, dotenv: bool = True) -> Settings:
    """Build Settings from the environment, reading .env first if present."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)

    return Settings(
        store_url=_first_env("SUPABASE_URL", _k("STORE_URL")),
        store_key=_first_env("SUPABASE_KEY", "SUPABASE_ANON_KEY", _k("STORE_KEY")),
        table=_first_env(_k("TABLE"), default="todos"),
        log_dir=_env_path(_k("LOG_DIR"), Path(".local/taskdeck")),
        log_level=_env_level(_k("LOG_LEVEL"), "INFO"),
        dark=_env_bool(_k("DARK"), True),
    )
