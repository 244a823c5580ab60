from __future__ import annotations

import os

from cycledecomp.exceptions import ConfigError, ScheduleError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _env_int(name: str, default: int, error: type[ConfigError]) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise error(f"{name} must be an integer, got {raw!r}") from None


def default_divisor() -> int:
    """Divisor of the size scheduler, from CYCLEDECOMP_DIVISOR (default 3)."""
    divisor = _env_int("CYCLEDECOMP_DIVISOR", 3, ScheduleError)
    if divisor < 1:
        raise ScheduleError(f"CYCLEDECOMP_DIVISOR must be a positive integer, got {divisor}")
    return divisor


def default_max_draw_nodes() -> int:
    """Drawing cut-off, from CYCLEDECOMP_MAX_DRAW_NODES (default 600)."""
    return _env_int("CYCLEDECOMP_MAX_DRAW_NODES", 600, ConfigError)


def default_log_level() -> str:
    """CLI log level name, from CYCLEDECOMP_LOG_LEVEL (default WARNING)."""
    level = os.environ.get("CYCLEDECOMP_LOG_LEVEL", "WARNING").upper()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"CYCLEDECOMP_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
    return level
