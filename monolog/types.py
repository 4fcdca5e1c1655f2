"""
monolog/types.py

Centralized type definitions for monolog.

This module defines the small set of value types shared by the store,
the date-range builder, the renderer, and the CLI:

    • Note               — an immutable timestamped text record
    • DateFilter         — the optional (year, month, day) input tuple
    • DateRange          — a half-open [start, end) interval of calendar dates

Keeping these types in one place gives the CLI and the tests a single
source of truth for the note schema.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Callable, NamedTuple, Optional, Tuple

# Matches the VARCHAR(250) column of the `notes` table.
MAX_TEXT_LENGTH = 250

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Return the current time as an aware datetime in the host's local zone."""
    return datetime.now().astimezone()


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------
# A note is created once, stamped by the clock, and never mutated.
# The surrogate `id` column of the table is not part of the domain record.
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Note:
    text: str
    date: datetime

    @classmethod
    def create(cls, text: str, clock: Optional[Clock] = None) -> "Note":
        """
        Build a new note stamped with the current local time.

        Parameters
        ----------
        text : str
            The note body. Surrounding whitespace is trimmed.
        clock : callable, optional
            Source of the creation timestamp. Defaults to the local clock.

        Raises
        ------
        ValueError
            If the text is empty or longer than MAX_TEXT_LENGTH.
        """
        text = text.strip()
        if not text:
            raise ValueError("note text must not be empty")
        if len(text) > MAX_TEXT_LENGTH:
            raise ValueError(
                f"note text is {len(text)} characters long; the limit is {MAX_TEXT_LENGTH}"
            )

        now = (clock or local_now)()
        return cls(text=text, date=now)


class DateFilter(NamedTuple):
    """Optional year/month/day components, each independently omittable."""

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None


# ---------------------------------------------------------------------------
# DateRange
# ---------------------------------------------------------------------------
# Half-open: `start` is included, `end` is not. Both ends are anchored to
# local midnight when converted to timestamps.
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def bounds(self) -> Tuple[datetime, datetime]:
        """Local-midnight aware datetimes for the start and end dates."""
        return (
            datetime.combine(self.start, time.min).astimezone(),
            datetime.combine(self.end, time.min).astimezone(),
        )

    def __contains__(self, moment: object) -> bool:
        if not isinstance(moment, datetime):
            return False
        start, end = self.bounds()
        return start <= moment < end

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end.isoformat()})"

