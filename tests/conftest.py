"""Shared pytest configuration: adds project root to sys.path."""
import logging
import sys
from pathlib import Path

import pytest
import structlog

# Ensure the project root is on sys.path so `from voting_system.xxx import` works
# regardless of where pytest is invoked from.
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def make_candidates():
    """Build candidates named A, B, C, ... with the given vote counts and ids c0, c1, ..."""
    from voting_system.candidates import Candidate

    def _make(*votes: int) -> list[Candidate]:
        return [
            Candidate(name=chr(ord("A") + i), votes=v, color=f"#00000{i}", id=f"c{i}")
            for i, v in enumerate(votes)
        ]

    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every VOTING_* variable so settings fall back to defaults."""
    for var in ("VOTING_WIN_THRESHOLD", "VOTING_LOG_LEVEL", "VOTING_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo configure_logging() calls (structlog config and root handlers) after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
