"""
monolog/date_range.py

Date-range query builder.

Turns a partial (year, month, day) filter into a concrete half-open
DateRange. Missing components are defaulted from "today" as follows:

    • day given, month missing   → current month (and current year if missing)
    • month given, year missing  → current year

After defaulting, the shape of the filter selects the span:

    • year only            → the whole year
    • year + month         → the whole month
    • year + month + day   → that single day
    • nothing              → no filtering (None)

Any other combination also means "no filtering". With the defaulting above
such combinations cannot occur, but the fallback is kept explicit.

No calendar validation happens before the range is built; a triple that is
not a real date (2024-02-30, month 13, ...) raises InvalidDate at that point.
"""

from datetime import date, timedelta
from typing import Optional

from monolog.errors import InvalidDate
from monolog.types import DateFilter, DateRange


def _make_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise InvalidDate(
            f"{year:04d}-{month:02d}-{day:02d} is not a valid calendar date"
        ) from e


def _next_month(start: date) -> date:
    if start.month == 12:
        return _make_date(start.year + 1, 1, 1)
    return _make_date(start.year, start.month + 1, 1)


def year_range(year: int) -> DateRange:
    """The whole calendar year."""
    start = _make_date(year, 1, 1)
    return DateRange(start=start, end=_make_date(year + 1, 1, 1))


def month_range(year: int, month: int) -> DateRange:
    """The whole calendar month."""
    start = _make_date(year, month, 1)
    return DateRange(start=start, end=_next_month(start))


def day_range(day: date) -> DateRange:
    """A single calendar day."""
    try:
        end = day + timedelta(days=1)
    except OverflowError as e:
        raise InvalidDate(f"no day follows {day.isoformat()}") from e
    return DateRange(start=day, end=end)


def build_date_range(date_filter: DateFilter, today: date) -> Optional[DateRange]:
    """
    Normalize a partial date filter into a DateRange.

    Parameters
    ----------
    date_filter : DateFilter
        The optional year/month/day components supplied by the user.
    today : date
        Provides the current year and month used for defaulting.

    Returns
    -------
    DateRange | None
        The half-open interval to select, or None for "no filtering".

    Raises
    ------
    InvalidDate
        If the normalized components do not form a real calendar date.
    """
    year, month, day = date_filter

    if day is not None:
        if month is None:
            month = today.month
        if year is None:
            year = today.year

    if month is not None and year is None:
        year = today.year

    if year is None and month is None and day is None:
        return None

    if year is not None and month is None and day is None:
        return year_range(year)

    if year is not None and month is not None and day is None:
        return month_range(year, month)

    if year is not None and month is not None and day is not None:
        return day_range(_make_date(year, month, day))

    # Unreachable after defaulting; treated as unfiltered.
    return None
