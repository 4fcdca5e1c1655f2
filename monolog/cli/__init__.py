"""Typer command-line interface for monolog."""

from .main import cli

__all__ = ["cli"]
