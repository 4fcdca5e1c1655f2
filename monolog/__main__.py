"""Entry point for `python -m monolog`."""

from monolog.cli.main import cli

if __name__ == "__main__":
    cli()
