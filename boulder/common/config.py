from __future__ import annotations

import os
from dataclasses import dataclass

from boulder.common.constants import DEFAULT_VIEW_HEIGHT, DEFAULT_VIEW_WIDTH


def _env_bool(value: str | None, default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


def _env_optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass(frozen=True)
class Settings:
    """Runtime settings loaded from environment variables.

    Command line flags override these in the terminal frontend.
    """

    random_seed: int | None = _env_optional_int(os.getenv("BOULDER_RANDOM_SEED"))
    fps: int = int(os.getenv("BOULDER_FPS", "60"))
    start_level: int = int(os.getenv("BOULDER_START_LEVEL", "0"))
    sound_enabled: bool = _env_bool(os.getenv("BOULDER_SOUND", "1"))
    view_width: int = int(os.getenv("BOULDER_VIEW_WIDTH", str(DEFAULT_VIEW_WIDTH)))
    view_height: int = int(os.getenv("BOULDER_VIEW_HEIGHT", str(DEFAULT_VIEW_HEIGHT)))
    log_file: str = os.getenv("BOULDER_LOG_FILE", "boulder.log")
    log_level: str = os.getenv("BOULDER_LOG_LEVEL", "INFO")


settings = Settings()
