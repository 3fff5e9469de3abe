"""
calutils.instant
~~~~~~~~~~~~~~~~

Parsing, conversion and formatting of single points in time.  An instant is a
plain ``datetime``; strings and ``date`` objects are accepted wherever one is
expected.  Naive datetimes are read as UTC wall-clock time.

Basic usage::

    from calutils.instant import date_to_timestamp, format_date, get_day_name

    date_to_timestamp("04 Dec 1995 00:12:00 UTC")   # → 818035920000
    get_day_name("2024-01-30T00:00:00.000Z")         # → 'Tuesday'
    format_date("2024-02-01T15:00:00.000Z")          # → '2/1/2024, 3:00:00 PM'

Public API
----------
as_instant         Coerce a string/date/datetime to a datetime.
to_utc             Aware UTC view of an instant.
day_of_week        0 = Sunday … 6 = Saturday.
date_to_timestamp  Milliseconds since the Unix epoch.
get_time           Local ``HH:MM:SS``.
get_day_name       English weekday name of the UTC date.
format_date        UTC ``M/D/YYYY, h:mm:ss AM|PM``.
"""

from __future__ import annotations

from calutils.instant.instant import (
    DAY_NAMES,
    MS_PER_DAY,
    InstantLike,
    as_instant,
    date_to_timestamp,
    day_of_week,
    format_date,
    get_day_name,
    get_time,
    to_utc,
)

__all__ = [
    "DAY_NAMES",
    "MS_PER_DAY",
    "InstantLike",
    "as_instant",
    "date_to_timestamp",
    "day_of_week",
    "format_date",
    "get_day_name",
    "get_time",
    "to_utc",
]
