"""
monolog/render.py

Grouping and rendering of notes into a day/time report.

Notes are grouped twice:

    • by calendar day (the local date of the timestamp), days ascending
    • within a day, by "HH:MM" (minute precision), times ascending

Notes written in the same minute share one time heading and keep the
order in which they were encountered. The input order is otherwise
irrelevant, so notes from any retrieval mode print oldest day first.

Report layout:

    # 2024-01-01

    ## 09:05

    > A
    > B

"""

from datetime import date
from typing import Dict, Iterable, List, Optional, TextIO

import typer

from monolog.types import Note

Grouping = Dict[date, Dict[str, List[str]]]


def time_key(note: Note) -> str:
    """Zero-padded hour and minute of the note's timestamp."""
    return f"{note.date.hour:02d}:{note.date.minute:02d}"


def group_notes(notes: Iterable[Note]) -> Grouping:
    """
    Build the two-level day → time → texts grouping.

    The returned dicts are ordered: day keys ascending, and within each day
    the time keys ascending.
    """
    per_day: Dict[date, List[Note]] = {}
    for note in notes:
        per_day.setdefault(note.date.date(), []).append(note)

    grouping: Grouping = {}
    for day in sorted(per_day):
        per_time: Dict[str, List[str]] = {}
        for note in per_day[day]:
            per_time.setdefault(time_key(note), []).append(note.text)

        # Fixed-width "HH:MM" strings sort chronologically.
        grouping[day] = {key: per_time[key] for key in sorted(per_time)}

    return grouping


def render_notes(notes: Iterable[Note]) -> str:
    """Render notes as the report text. An empty collection renders as ""."""
    lines: List[str] = []

    for day, per_time in group_notes(notes).items():
        lines.append(f"# {day.isoformat()}")
        lines.append("")
        for time, texts in per_time.items():
            lines.append(f"## {time}")
            lines.append("")
            lines.extend(f"> {text}" for text in texts)
            lines.append("")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def print_notes(notes: Iterable[Note], out: Optional[TextIO] = None) -> None:
    """Write the rendered report to `out` (stdout by default)."""
    report = render_notes(notes)
    if report:
        typer.echo(report, file=out, nl=False)
