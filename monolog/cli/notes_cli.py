"""
Command handlers for the monolog CLI.

Each handler maps one command onto exactly one NoteStore call and, for the
read commands, hands the result to the renderer:

    • monolog add <words...>
    • monolog last <count>
    • monolog today
    • monolog from [--year Y] [--month M] [--day D]

The handlers are plain functions; registration happens in
monolog/cli/main.py. This module is also the single error boundary:
store and date errors are printed to stderr and the command exits with
code 1. Nothing is rendered after an error.
"""

from typing import Callable, List, Optional

import typer

from monolog.errors import MonologError
from monolog.logging_utils import log_error, log_verbose
from monolog.render import print_notes
from monolog.store import NoteStore
from monolog.types import DateFilter, Note


# ---------------------------------------------------------------------------
# Helper: run one store action inside a scoped connection
# ---------------------------------------------------------------------------
def run_with_store(
    ctx: typer.Context,
    action: Callable[[NoteStore], Optional[List[Note]]],
) -> None:
    """
    Open the journal, run `action`, close the journal, then render.

    `action` returns the notes to print, or None for write commands.
    """
    settings = ctx.obj
    verbose = settings["verbose"]

    log_verbose(f"Opening journal at {settings['db_path']}", verbose)

    try:
        with NoteStore(settings["db_path"]) as store:
            notes = action(store)
    except (MonologError, ValueError) as e:
        log_error(str(e))
        raise typer.Exit(code=1)

    if notes is None:
        return

    log_verbose(f"Found {len(notes)} note(s).", verbose)
    print_notes(notes)


# ---------------------------------------------------------------------------
# Command: monolog add <words...>
# ---------------------------------------------------------------------------
def add_note(
    ctx: typer.Context,
    words: List[str] = typer.Argument(
        ...,
        help="Words of the note. They are joined with single spaces.",
    ),
) -> None:
    """Write a new note stamped with the current time."""

    def _create(store: NoteStore) -> None:
        note = store.create(words)
        saved_at = note.date.isoformat(timespec="seconds")
        log_verbose(f"Saved note at {saved_at}.", ctx.obj["verbose"])

    run_with_store(ctx, _create)


# ---------------------------------------------------------------------------
# Command: monolog last <count>
# ---------------------------------------------------------------------------
def last_notes(
    ctx: typer.Context,
    count: int = typer.Argument(
        ...,
        min=0,
        max=255,
        help="How many of the most recent notes to show (0-255).",
    ),
) -> None:
    """Show the most recent notes, oldest day first."""
    run_with_store(ctx, lambda store: store.list_last(count))


# ---------------------------------------------------------------------------
# Command: monolog today
# ---------------------------------------------------------------------------
def today_notes(ctx: typer.Context) -> None:
    """Show every note written since local midnight."""
    run_with_store(ctx, lambda store: store.list_today())


# ---------------------------------------------------------------------------
# Command: monolog from [--year Y] [--month M] [--day D]
#
# Missing parts default to the current month/year where needed:
#   --day 15            → the 15th of this month
#   --month 3           → March of this year
#   --year 2024 --day 1 → the 1st of this month in 2024
# ---------------------------------------------------------------------------
def notes_from(
    ctx: typer.Context,
    year: Optional[int] = typer.Option(None, "--year", "-y", min=1, help="Calendar year."),
    month: Optional[int] = typer.Option(None, "--month", "-m", min=1, max=12, help="Month (1-12)."),
    day: Optional[int] = typer.Option(None, "--day", "-d", min=1, max=31, help="Day of month (1-31)."),
) -> None:
    """Show notes from a year, a month, or a single day."""
    date_filter = DateFilter(year=year, month=month, day=day)
    run_with_store(ctx, lambda store: store.list_by_filter(date_filter))
