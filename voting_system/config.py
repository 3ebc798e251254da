from __future__ import annotations

import logging
import os
from dataclasses import dataclass


DEFAULT_WIN_THRESHOLD = 20

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    win_threshold: int
    log_level: str
    log_json: bool


def load_settings() -> Settings:
    threshold_raw = os.getenv("VOTING_WIN_THRESHOLD", str(DEFAULT_WIN_THRESHOLD)).strip()
    try:
        win_threshold = int(threshold_raw)
    except ValueError:
        raise RuntimeError(f"VOTING_WIN_THRESHOLD must be an integer, got {threshold_raw!r}.") from None
    if win_threshold < 1:
        raise RuntimeError(f"VOTING_WIN_THRESHOLD must be >= 1, got {win_threshold}.")

    log_level = os.getenv("VOTING_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"VOTING_LOG_LEVEL is not a known logging level: {log_level!r}.")

    log_json_raw = os.getenv("VOTING_LOG_JSON", "false").strip().lower()
    if log_json_raw in _TRUE_VALUES:
        log_json = True
    elif log_json_raw in _FALSE_VALUES:
        log_json = False
    else:
        raise RuntimeError(f"VOTING_LOG_JSON must be true or false, got {log_json_raw!r}.")

    return Settings(
        win_threshold=win_threshold,
        log_level=log_level,
        log_json=log_json,
    )
