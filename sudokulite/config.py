from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_SIZE = 9
DEFAULT_STARTING_CELLS = 26
DEFAULT_MAX_SOLUTIONS = 1
DEFAULT_LOG_LEVEL = "WARNING"


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'.") from None


def resolve_size() -> int:
    return _env_int("SUDOKULITE_SIZE", DEFAULT_SIZE)


def resolve_starting_cells() -> int:
    return _env_int("SUDOKULITE_STARTING_CELLS", DEFAULT_STARTING_CELLS)


def resolve_max_solutions() -> int:
    return _env_int("SUDOKULITE_MAX_SOLUTIONS", DEFAULT_MAX_SOLUTIONS)


def resolve_seed() -> Optional[int]:
    return _env_int("SUDOKULITE_SEED", None)


def resolve_log_level() -> str:
    raw = os.environ.get("SUDOKULITE_LOG_LEVEL", "").strip().upper()
    if raw == "":
        return DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"SUDOKULITE_LOG_LEVEL must be a logging level name, got '{raw}'.")
    return raw


@dataclass(frozen=True)
class Settings:
    size: int = DEFAULT_SIZE
    starting_cells: int = DEFAULT_STARTING_CELLS
    max_solutions: int = DEFAULT_MAX_SOLUTIONS
    seed: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    return Settings(
        size=resolve_size(),
        starting_cells=resolve_starting_cells(),
        max_solutions=resolve_max_solutions(),
        seed=resolve_seed(),
        log_level=resolve_log_level(),
    )
