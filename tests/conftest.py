"""
Shared pytest configuration for the monolog test suite.

This file centralizes reusable testing utilities so that:
    • CLI tests share one Typer CliRunner
    • Store tests run against a throwaway SQLite file
    • Timestamps are deterministic through an adjustable fake clock

All helpers here are intentionally simple so tests stay stable across
machines and local time zones.
"""

from datetime import datetime

import pytest
from typer.testing import CliRunner

from monolog.store import NoteStore


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Fake clock
# ---------------------------------------------------------------------------
class FakeClock:
    """
    A clock whose current time is set by the test.

    Calling the instance returns `now` as an aware local datetime, which is
    exactly what NoteStore expects from its clock dependency.
    """

    def __init__(self, now: datetime):
        self.now = now

    def set(self, year, month, day, hour=0, minute=0, second=0, microsecond=0):
        self.now = datetime(year, month, day, hour, minute, second, microsecond).astimezone()

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    """A fake clock starting at 2024-01-01 09:05 local time."""
    return FakeClock(datetime(2024, 1, 1, 9, 5).astimezone())


@pytest.fixture
def db_path(tmp_path):
    """Location of a journal file inside the test's temporary directory."""
    return tmp_path / "journal" / "monolog.db"


@pytest.fixture
def store(db_path, clock):
    """A NoteStore on a fresh database, driven by the fake clock."""
    with NoteStore(db_path, clock=clock) as note_store:
        yield note_store
