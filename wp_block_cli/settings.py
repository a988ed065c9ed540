"""Runtime settings resolved from defaults, the environment and CLI flags."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SQLITE_PATH = Path("wp-block.db")

_ENV_KEYS: dict[str, tuple[str, ...]] = {
    "snapshot_path": ("WP_BLOCK_SNAPSHOT",),
    "database_url": ("WP_BLOCK_DATABASE_URL", "DATABASE_URL"),
    "sqlite_path": ("WP_BLOCK_SQLITE_PATH",),
    "wp_version": ("WP_BLOCK_WP_VERSION",),
    "user_id": ("WP_BLOCK_USER_ID",),
    "log_level": ("WP_BLOCK_LOG_LEVEL",),
}


class Settings(BaseModel):
    """Where registries and posts come from, and how noisy the CLI is."""

    snapshot_path: Path | None = None
    database_url: str | None = None
    sqlite_path: Path = DEFAULT_SQLITE_PATH
    wp_version: str | None = None
    user_id: int = Field(default=0, ge=0)
    log_level: str = "WARNING"

    model_config = ConfigDict(frozen=True)

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    dotenv_path: str | Path | None = None,
    **overrides: Any,
) -> Settings:
    """Build settings; explicit ``overrides`` win over environment values.

    When ``environ`` is omitted the process environment is used, after a
    ``.env`` file (``dotenv_path`` or the nearest one) has been loaded into it.
    Overrides set to ``None`` are ignored so unset CLI flags fall through.
    """
    if environ is None:
        load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)
        environ = os.environ

    values: dict[str, Any] = {}
    for field_name, keys in _ENV_KEYS.items():
        for key in keys:
            raw = environ.get(key)
            if raw:
                values[field_name] = raw
                break

    values.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(**values)


__all__ = ["DEFAULT_SQLITE_PATH", "Settings", "load_settings"]
