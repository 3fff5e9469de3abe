from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Union

from dateutil import parser as _parser

from calutils._exceptions import InvalidDateInput

logger = logging.getLogger(__name__)

InstantLike = Union[str, date, datetime]

MS_PER_DAY: int = 24 * 60 * 60 * 1000

# Indexed by day_of_week(): 0 = Sunday … 6 = Saturday.
DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)
_MERIDIEM = ("AM", "PM")

# Missing fields are filled from here, never from the current date.
_PARSE_DEFAULT = datetime(1970, 1, 1)

# RFC 2822 zone names, in seconds east of UTC.
_RFC2822_ZONES: dict[str, int] = {
    "UT": 0,
    "GMT": 0,
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}

# dateutil reads "GMT+0200" with POSIX sign semantics; drop the prefix so the
# offset is taken as written.
_ZONE_PREFIXED_OFFSET = re.compile(r"(?<![A-Za-z])(?:GMT|UTC)\s*(?=[+-]\d)")


# ── parsing ──────────────────────────────────────────────────────────────────

def as_instant(value: InstantLike) -> datetime:
    """
    Coerce ``value`` to a datetime.

    Strings are parsed with dateutil (ISO 8601 and RFC-2822-like forms such as
    ``"04 Dec 1995 00:12:00 UTC"``); dates become midnight of that day;
    datetimes are returned unchanged.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        raise InvalidDateInput(
            f"Expected a date string, date or datetime; got {type(value).__name__}."
        )
    try:
        return _parser.parse(
            _ZONE_PREFIXED_OFFSET.sub("", value),
            default=_PARSE_DEFAULT,
            tzinfos=_RFC2822_ZONES,
        )
    except (ValueError, OverflowError) as exc:
        logger.debug("Could not parse %r: %s", value, exc)
        raise InvalidDateInput(f"Invalid date: {value!r}.") from exc


def to_utc(value: InstantLike) -> datetime:
    """Aware UTC view of ``value``; naive values are taken to be UTC already."""
    dt = as_instant(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def day_of_week(value: InstantLike, utc: bool = False) -> int:
    """0 = Sunday … 6 = Saturday, from local fields unless ``utc`` is set."""
    dt = to_utc(value) if utc else as_instant(value)
    return dt.isoweekday() % 7


# ── conversions ──────────────────────────────────────────────────────────────

def date_to_timestamp(value: InstantLike) -> int:
    """Milliseconds elapsed since 1970-01-01T00:00:00Z."""
    return (to_utc(value) - _EPOCH) // _MILLISECOND


def get_time(value: InstantLike) -> str:
    dt = as_instant(value)
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def get_day_name(value: InstantLike) -> str:
    return DAY_NAMES[day_of_week(value, utc=True)]


def format_date(value: InstantLike) -> str:
    """Render UTC fields as ``M/D/YYYY, h:mm:ss AM|PM``."""
    dt = to_utc(value)
    hour = dt.hour % 12 or 12
    meridiem = _MERIDIEM[dt.hour >= 12]
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )
