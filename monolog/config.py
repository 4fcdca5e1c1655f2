# monolog/config.py

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from a .env file into the process environment
load_dotenv()

# Environment variable that overrides the journal location
DB_PATH_ENV = "MONOLOG_DB"

# Journal file used when nothing else is configured
DEFAULT_DB_PATH = Path("monolog.db")


def get_db_path() -> Path:
    """Return the configured database path, falling back to DEFAULT_DB_PATH."""
    value = os.getenv(DB_PATH_ENV)
    if value:
        return Path(value).expanduser()
    return DEFAULT_DB_PATH
