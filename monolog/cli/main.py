"""
Root entrypoint for the monolog CLI.

This module defines the top-level `monolog` command, its global options,
and registers the note commands implemented in monolog/cli/notes_cli.py:

    monolog add <words...>
    monolog last <count>
    monolog today
    monolog from [--year Y] [--month M] [--day D]

Global options:

    --db PATH    journal file (default: $MONOLOG_DB, then ./monolog.db)
    --verbose    progress messages on stderr
"""

from pathlib import Path
from typing import Optional

import typer

from monolog.config import get_db_path

from .notes_cli import add_note, last_notes, notes_from, today_notes

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    help=(
        "A tiny journal for the terminal.\n\n"
        "Write a note:\n\n"
        "    monolog add had coffee with Sam\n\n"
        "Read them back grouped by day and minute:\n\n"
        "    monolog today\n"
        "    monolog last 10\n"
        "    monolog from --year 2024 --month 3"
    ),
    no_args_is_help=True,
)


@cli.callback()
def main(
    ctx: typer.Context,
    db: Optional[Path] = typer.Option(
        None,
        "--db",
        dir_okay=False,
        help="Path to the journal database. Overrides MONOLOG_DB.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show progress messages on stderr.",
    ),
) -> None:
    """Resolve global settings shared by every command."""
    ctx.obj = {
        "db_path": db if db is not None else get_db_path(),
        "verbose": verbose,
    }


# ---------------------------------------------------------------------------
# Register commands
# ---------------------------------------------------------------------------
# `add` keeps dash-prefixed words as note text instead of rejecting them.
cli.command("add", context_settings={"ignore_unknown_options": True})(add_note)
cli.command("last")(last_notes)
cli.command("today")(today_notes)
cli.command("from")(notes_from)

# ---------------------------------------------------------------------------
# Entry point for `python -m monolog.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
