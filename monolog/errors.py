"""
Error kinds raised by monolog.

All of them propagate untouched through the store and the date-range
builder. Only the CLI command boundary catches them, prints the message,
and ends the invocation.
"""


class MonologError(Exception):
    """Base class for every error monolog raises on purpose."""


class StorageUnavailable(MonologError):
    """The database file or connection could not be opened or initialized."""


class QueryFailed(MonologError):
    """A read or write against an open database failed."""


class InvalidDate(MonologError):
    """A date filter does not denote a real calendar date."""
