"""
calutils.period
~~~~~~~~~~~~~~~

Inclusive date ranges.

Basic usage::

    from calutils.period import get_count_days_on_period, is_date_in_period

    get_count_days_on_period("2024-02-01T00:00:00.000Z", "2024-02-12T00:00:00.000Z")  # → 12
    is_date_in_period("2024-02-10", {"start": "2024-02-02", "end": "2024-03-02"})     # → True

Public API
----------
DatePeriod                Frozen ``start``/``end`` pair.
get_count_days_on_period  Day count including both endpoints.
is_date_in_period         Inclusive membership test.
"""

from __future__ import annotations

from calutils.period.period import (
    DatePeriod,
    PeriodLike,
    get_count_days_on_period,
    is_date_in_period,
)

__all__ = [
    "DatePeriod",
    "PeriodLike",
    "get_count_days_on_period",
    "is_date_in_period",
]
