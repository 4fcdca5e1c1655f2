"""
logging_utils.py

Small logging helpers for the monolog CLI.

Progress messages are printed with Typer's echo when `--verbose` is set.
They go to stderr so that the rendered report on stdout stays clean and
can be piped or redirected on its own.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a short progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Plain description of what is happening (e.g. "Opening journal...").
    verbose : bool
        Whether verbose mode is active. When False, nothing is printed.
    """
    if verbose:
        typer.echo(message, err=True)


def log_error(message: str) -> None:
    """Print an error message to stderr, regardless of verbosity."""
    typer.echo(f"Error: {message}", err=True)
