"""
monolog — a tiny timestamped journal for the terminal.

Public API surface:

    • Note, DateFilter, DateRange   — value types
    • NoteStore                     — SQLite persistence
    • build_date_range              — partial date filter → DateRange
    • group_notes, render_notes     — day/time report rendering
"""

from .date_range import build_date_range
from .errors import InvalidDate, MonologError, QueryFailed, StorageUnavailable
from .render import group_notes, print_notes, render_notes
from .store import NoteStore
from .types import DateFilter, DateRange, Note

__version__ = "0.1.0"

__all__ = [
    "build_date_range",
    "DateFilter",
    "DateRange",
    "group_notes",
    "InvalidDate",
    "MonologError",
    "Note",
    "NoteStore",
    "print_notes",
    "QueryFailed",
    "render_notes",
    "StorageUnavailable",
]
