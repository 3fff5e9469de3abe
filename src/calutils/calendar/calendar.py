from __future__ import annotations

import math
from datetime import datetime, timedelta, tzinfo
from typing import Optional, Union

import numpy as np

from calutils._exceptions import InvalidDateInput
from calutils.instant import InstantLike, as_instant, day_of_week

ArrayLike = Union[int, "np.ndarray"]

# numpy week mask, Monday first: Saturday and Sunday.
WEEKEND_MASK: str = "0000011"

_MONTH_DAYS = np.array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64)

# Days to add to reach the next Friday, indexed by day_of_week() (0 = Sunday).
_DAYS_TO_FRIDAY = (5, 4, 3, 2, 1, 7, 6)
_FRIDAY = 5


# ── month arithmetic ─────────────────────────────────────────────────────────

def _is_leap(year):
    # Works elementwise on arrays as well as on plain ints.
    return (year % 4 == 0) & ((year % 100 != 0) | (year % 400 == 0))


def _whole_numbers(values: ArrayLike, name: str) -> np.ndarray:
    arr = np.asarray(values)
    if arr.dtype.kind in "iu":
        return arr.astype(np.int64)
    if arr.dtype.kind == "f" and np.isfinite(arr).all() and (arr == np.floor(arr)).all():
        return arr.astype(np.int64)
    raise InvalidDateInput(f"{name} must be a whole number; got {values!r}.")


def _month_year_arrays(
    month: ArrayLike, year: ArrayLike
) -> tuple[np.ndarray, np.ndarray]:
    m = np.atleast_1d(_whole_numbers(month, "Month"))
    y = np.atleast_1d(_whole_numbers(year, "Year"))
    m, y = np.broadcast_arrays(m, y)

    out_of_range = (m < 1) | (m > 12)
    if out_of_range.any():
        raise InvalidDateInput(
            f"Month must be in 1..12; got {int(m[out_of_range][0])}."
        )
    return m, y


def _next_month(year: int, month: int) -> tuple[int, int]:
    return (year + 1, 1) if month == 12 else (year, month + 1)


def _thirteenth(year: int, month: int, tz: Optional[tzinfo]) -> datetime:
    try:
        return datetime(year, month, 13, tzinfo=tz)
    except ValueError as exc:
        raise InvalidDateInput(f"Year {year} is outside the supported range.") from exc


# ── month / year queries ─────────────────────────────────────────────────────

def get_count_days_in_month(month: ArrayLike, year: ArrayLike) -> ArrayLike:
    """
    Number of days in ``month`` (1-12) of ``year``.

    Scalars return an ``int``; NumPy arrays are broadcast together and return an
    integer array of the broadcast shape.
    """
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    m, y = _month_year_arrays(month, year)
    days = _MONTH_DAYS[m - 1] + ((m == 2) & _is_leap(y))
    return int(days.flat[0]) if scalar else days


def get_count_weekends_in_month(
    month: ArrayLike,
    year: ArrayLike,
    weekend: str = WEEKEND_MASK,
) -> ArrayLike:
    """
    Number of weekend days in ``month`` of ``year``.

    ``weekend`` is a NumPy week mask (Monday first) selecting which weekdays
    count; the default selects Saturday and Sunday.
    """
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    m, y = _month_year_arrays(month, year)

    first = ((y - 1970) * 12 + (m - 1)).astype("datetime64[M]").astype("datetime64[D]")
    last = first + get_count_days_in_month(m, y)
    counts = np.busday_count(first, last, weekmask=weekend)
    return int(counts.flat[0]) if scalar else counts


def is_leap_year(value: InstantLike) -> bool:
    return bool(_is_leap(as_instant(value).year))


def get_quarter(value: InstantLike) -> int:
    return (as_instant(value).month - 1) // 3 + 1


def get_week_number_by_date(value: InstantLike) -> int:
    """
    Week of the year, where week 1 is the week containing January 1 and weeks
    start on Monday.
    """
    day = as_instant(value).date()
    jan1 = day.replace(month=1, day=1)
    days = (day - jan1).days + 1
    return math.ceil((days + jan1.weekday()) / 7)


# ── weekday searches ─────────────────────────────────────────────────────────

def get_next_friday(value: InstantLike) -> datetime:
    """The nearest Friday strictly after ``value``; a Friday maps to a week later."""
    dt = as_instant(value)
    return dt + timedelta(days=_DAYS_TO_FRIDAY[day_of_week(dt)])


def get_next_friday_the_13th(value: InstantLike) -> datetime:
    """
    Midnight of the first Friday the 13th after ``value``.

    The month of ``value`` is searched only while its 13th is still ahead.
    The search continues into following years; one is always found within
    fourteen months.
    """
    dt = as_instant(value)
    year, month = dt.year, dt.month
    if dt.day >= 13:
        year, month = _next_month(year, month)

    while True:
        candidate = _thirteenth(year, month, dt.tzinfo)
        if day_of_week(candidate) == _FRIDAY:
            return candidate
        year, month = _next_month(year, month)
