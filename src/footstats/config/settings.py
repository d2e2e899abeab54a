"""Environment-driven settings for pipeline runs."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

_OUTPUT_DIR_ENV = "FOOTSTATS_OUTPUT_DIR"
_TOP_N_ENV = "FOOTSTATS_TOP_N"

_OUTPUT_DIR_DEFAULT = "output"
_TOP_N_DEFAULT = 10


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_path(name: str, default: str) -> Path:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return Path(default)
    return Path(raw.strip())


@dataclass(frozen=True)
class RunSettings:
    output_root: Path
    top_n: int


def load_settings() -> RunSettings:
    return RunSettings(
        output_root=_env_path(_OUTPUT_DIR_ENV, _OUTPUT_DIR_DEFAULT),
        top_n=_env_int(_TOP_N_ENV, _TOP_N_DEFAULT, min_value=1),
    )
