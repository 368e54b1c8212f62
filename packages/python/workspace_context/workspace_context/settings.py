"""Settings for workspace scans.

Values come from the environment (or the nearest ``.env``). Callers can also
build a ``ScanSettings`` directly and pass it to ``scan_directory`` /
``list_important_files``.
"""

from __future__ import annotations

import os
from typing import List

from dotenv import find_dotenv, load_dotenv
from loguru import logger
from pydantic import BaseModel, Field

from .constants import MAX_FILE_SIZE_BYTES

# Search for the nearest .env so running from subdirectories still loads root config.
load_dotenv(find_dotenv(usecwd=True))

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        logger.error(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


def _default_extra_patterns() -> List[str]:
    """Comma separated WORKSPACE_CONTEXT_EXTRA_IGNORE, blanks dropped."""

    raw = os.getenv("WORKSPACE_CONTEXT_EXTRA_IGNORE", "")
    return [pattern.strip() for pattern in raw.split(",") if pattern.strip()]


class ScanSettings(BaseModel):
    """Knobs for a workspace scan."""

    max_file_size_bytes: int = Field(
        default_factory=lambda: _env_int("WORKSPACE_CONTEXT_MAX_FILE_BYTES", MAX_FILE_SIZE_BYTES),
        ge=0,
    )
    sort_entries: bool = Field(
        default_factory=lambda: _env_flag("WORKSPACE_CONTEXT_SORT_ENTRIES", True)
    )
    extra_ignore_patterns: List[str] = Field(default_factory=_default_extra_patterns)
    # Include file contents in rendered context; otherwise only the tree is shown.
    use_full_workspace: bool = Field(
        default_factory=lambda: _env_flag("WORKSPACE_CONTEXT_USE_FULL_WORKSPACE", False)
    )
    log_level: str = Field(
        default_factory=lambda: os.getenv("WORKSPACE_CONTEXT_LOG_LEVEL", "INFO").upper()
    )


def load_settings(**overrides) -> ScanSettings:
    """Build settings from the environment, applying explicit overrides on top."""

    values = ScanSettings().model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return ScanSettings(**values)
