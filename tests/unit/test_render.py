"""
Unit tests for monolog.render.

Rendering must:
    • group by local day, then by HH:MM, both ascending
    • keep encounter order for notes inside the same minute
    • ignore input order otherwise
    • render nothing for an empty collection
"""

import io
from datetime import date, datetime

from monolog.render import group_notes, print_notes, render_notes, time_key
from monolog.types import Note


def note(text, *parts) -> Note:
    return Note(text=text, date=datetime(*parts).astimezone())


A = note("A", 2024, 1, 1, 9, 5, 10)
B = note("B", 2024, 1, 1, 9, 5, 42)
C = note("C", 2024, 1, 2, 10, 0)

EXPECTED = (
    "# 2024-01-01\n"
    "\n"
    "## 09:05\n"
    "\n"
    "> A\n"
    "> B\n"
    "\n"
    "# 2024-01-02\n"
    "\n"
    "## 10:00\n"
    "\n"
    "> C\n"
    "\n"
)


def test_renders_days_then_times() -> None:
    assert render_notes([A, B, C]) == EXPECTED


def test_output_is_insensitive_to_day_order() -> None:
    """Newest-first input (as from `last`) still prints the oldest day first."""
    assert render_notes([C, A, B]) == EXPECTED


def test_rendering_twice_is_identical() -> None:
    notes = [C, B, A]
    assert render_notes(notes) == render_notes(notes)


def test_same_minute_notes_share_one_heading_in_encounter_order() -> None:
    report = render_notes([A, B])

    assert report.count("## 09:05") == 1
    assert report.index("> A") < report.index("> B")

    reversed_report = render_notes([B, A])
    assert reversed_report.index("> B") < reversed_report.index("> A")


def test_time_keys_are_zero_padded_and_sorted() -> None:
    early = note("early", 2024, 3, 1, 7, 3)
    late = note("late", 2024, 3, 1, 13, 45)

    grouping = group_notes([late, early])

    assert list(grouping) == [date(2024, 3, 1)]
    assert list(grouping[date(2024, 3, 1)]) == ["07:03", "13:45"]
    assert time_key(early) == "07:03"


def test_empty_collection_renders_nothing() -> None:
    assert render_notes([]) == ""
    assert group_notes([]) == {}


def test_print_notes_writes_to_sink() -> None:
    sink = io.StringIO()
    print_notes([A, B, C], out=sink)
    assert sink.getvalue() == EXPECTED


def test_print_notes_with_no_notes_writes_nothing() -> None:
    sink = io.StringIO()
    print_notes([], out=sink)
    assert sink.getvalue() == ""
