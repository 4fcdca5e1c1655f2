"""
monolog/store.py

SQLite-backed note store.

This is the persistence boundary of monolog. It owns one sqlite3
connection for the lifetime of a command and exposes:

    • create(words)              → append one note, stamped now
    • list_today()               → notes since local midnight
    • list_last(count)           → the `count` most recent notes
    • list_by_filter(filter)     → notes inside a year/month/day range

Timestamps are stored as fixed-width ISO-8601 strings in UTC
(`YYYY-MM-DDTHH:MM:SS.ffffff+00:00`). Because every row uses the same
offset and width, lexical order in SQL is chronological order, and the
half-open range predicates can be evaluated by the database directly.
Rows are converted back to the host's local zone when they are read.

The table is created on every start if it is missing; there is no
separate migration step.
"""

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

from monolog.date_range import build_date_range, day_range
from monolog.errors import InvalidDate, QueryFailed, StorageUnavailable
from monolog.types import Clock, DateFilter, DateRange, Note, local_now

SCHEMA = (
    "CREATE TABLE IF NOT EXISTS notes ("
    "id INTEGER PRIMARY KEY NOT NULL, "
    "text VARCHAR(250) NOT NULL, "
    "date TIMESTAMPTZ)"
)


def to_db_timestamp(moment: datetime) -> str:
    """Encode an aware datetime as the fixed-width UTC text stored in `date`."""
    return moment.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_db_timestamp(value: str) -> datetime:
    """Decode a stored timestamp into an aware datetime in local time."""
    return datetime.fromisoformat(value).astimezone()


class NoteStore:
    """
    A note store over a single local SQLite file.

    Use it as a context manager so the connection is released on every
    exit path:

        with NoteStore(path) as store:
            store.create(["hello", "world"])
    """

    def __init__(self, db_path: Union[str, Path], clock: Optional[Clock] = None) -> None:
        """
        Open (creating if needed) the database and ensure the schema exists.

        Parameters
        ----------
        db_path : str | Path
            Location of the SQLite file. Parent directories are created.
        clock : callable, optional
            Source of "now" for note timestamps and for "today".
            Defaults to the host's local clock.

        Raises
        ------
        StorageUnavailable
            If the file cannot be created or opened, or the schema cannot
            be applied.
        """
        self._db_path = Path(db_path)
        self._clock = clock or local_now
        self._conn: Optional[sqlite3.Connection] = None

        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._db_path))
            self._conn.row_factory = sqlite3.Row
            self._conn.execute(SCHEMA)
            self._conn.commit()
        except (OSError, sqlite3.Error) as e:
            self.close()
            raise StorageUnavailable(f"cannot open database {self._db_path}: {e}") from e

    # -----------------------------------------------------------------------
    # Resource handling
    # -----------------------------------------------------------------------

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "NoteStore":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageUnavailable("note store is closed")
        return self._conn

    def _fetch(self, sql: str, params: Tuple[Any, ...] = ()) -> List[Note]:
        conn = self._require_conn()
        try:
            rows = conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise QueryFailed(f"query failed: {e}") from e
        return [Note(text=row["text"], date=from_db_timestamp(row["date"])) for row in rows]

    def _fetch_range(self, date_range: DateRange) -> List[Note]:
        try:
            start, end = date_range.bounds()
            params = (to_db_timestamp(start), to_db_timestamp(end))
        except (ValueError, OverflowError, OSError) as e:
            raise InvalidDate(f"cannot search {date_range} in local time: {e}") from e
        return self._fetch(
            "SELECT text, date FROM notes WHERE date >= ? AND date < ? ORDER BY date, id",
            params,
        )

    # -----------------------------------------------------------------------
    # Write
    # -----------------------------------------------------------------------

    def create(self, words: Sequence[str]) -> Note:
        """
        Join the words with single spaces and store them as a new note.

        Returns
        -------
        Note
            The note that was written.

        Raises
        ------
        ValueError
            If the joined text is empty or too long.
        QueryFailed
            If the insert fails.
        """
        note = Note.create(" ".join(words), clock=self._clock)
        conn = self._require_conn()

        try:
            conn.execute(
                "INSERT INTO notes (text, date) VALUES (?, ?)",
                (note.text, to_db_timestamp(note.date)),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise QueryFailed(f"could not save note: {e}") from e

        return note

    # -----------------------------------------------------------------------
    # Read
    # -----------------------------------------------------------------------

    def list_today(self) -> List[Note]:
        """Notes created between local midnight today and local midnight tomorrow."""
        return self._fetch_range(day_range(self._clock().date()))

    def list_last(self, count: int) -> List[Note]:
        """
        The `count` most recent notes, oldest first.

        Rows are selected newest first and reversed, so notes written in the
        same minute keep their creation order when rendered.
        """
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return []
        notes = self._fetch(
            "SELECT text, date FROM notes ORDER BY date DESC, id DESC LIMIT ?",
            (count,),
        )
        notes.reverse()
        return notes

    def list_by_filter(self, date_filter: DateFilter) -> List[Note]:
        """
        Notes inside the range described by a partial year/month/day filter.

        An empty filter selects every note.

        Raises
        ------
        InvalidDate
            If the filter does not denote a real calendar date.
        """
        date_range = build_date_range(date_filter, self._clock().date())
        if date_range is None:
            return self._fetch("SELECT text, date FROM notes ORDER BY date, id")
        return self._fetch_range(date_range)
