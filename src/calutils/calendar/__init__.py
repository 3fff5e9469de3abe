"""
calutils.calendar
~~~~~~~~~~~~~~~~~

Gregorian calendar queries: month lengths, weekend counts, leap years, week
numbers, quarters and weekday searches.

Basic usage::

    from calutils.calendar import get_count_days_in_month, get_next_friday_the_13th
    from datetime import datetime

    get_count_days_in_month(2, 2024)                  # → 29
    get_next_friday_the_13th(datetime(2024, 1, 13))   # → datetime(2024, 9, 13)

NumPy arrays are accepted for month and year counts::

    import numpy as np
    get_count_weekends_in_month(np.arange(1, 13), 2024)

Public API
----------
get_count_days_in_month      Days in a month.
get_count_weekends_in_month  Saturdays and Sundays in a month.
is_leap_year                 Gregorian leap-year test.
get_quarter                  Quarter (1-4) of a date.
get_week_number_by_date      Monday-first week number; week 1 holds January 1.
get_next_friday              Next Friday strictly after a date.
get_next_friday_the_13th     Next Friday falling on the 13th.
CalendarError                Base exception for all calendar-related errors.
InvalidDateInput             Unparseable or out-of-range date input.
InvalidPeriod                Period whose start is after its end.
"""

from __future__ import annotations

from calutils._exceptions import CalendarError, InvalidDateInput, InvalidPeriod
from calutils.calendar.calendar import (
    WEEKEND_MASK,
    get_count_days_in_month,
    get_count_weekends_in_month,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_week_number_by_date,
    is_leap_year,
)

__all__ = [
    "WEEKEND_MASK",
    "CalendarError",
    "InvalidDateInput",
    "InvalidPeriod",
    "get_count_days_in_month",
    "get_count_weekends_in_month",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_week_number_by_date",
    "is_leap_year",
]
