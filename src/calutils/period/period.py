from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from calutils._exceptions import InvalidPeriod
from calutils.instant import MS_PER_DAY, InstantLike, date_to_timestamp


@dataclass(frozen=True, slots=True)
class DatePeriod:
    """Inclusive ``start``/``end`` pair of date strings."""

    start: str
    end: str

    @classmethod
    def coerce(cls, period: PeriodLike) -> DatePeriod:
        """Accept a DatePeriod, a mapping with ``start``/``end`` keys or a pair."""
        if isinstance(period, DatePeriod):
            return period
        if isinstance(period, (str, bytes)):
            raise InvalidPeriod(f"Expected a start/end pair; got the string {period!r}.")
        try:
            if isinstance(period, Mapping):
                return cls(period["start"], period["end"])
            start, end = period
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidPeriod(f"Expected a start/end pair; got {period!r}.") from exc
        return cls(start, end)


PeriodLike = Union[DatePeriod, Mapping[str, str], Sequence[str]]


def _bounds(start: InstantLike, end: InstantLike) -> tuple[int, int]:
    lo, hi = date_to_timestamp(start), date_to_timestamp(end)
    if lo > hi:
        raise InvalidPeriod(f"Period start {start!r} is after its end {end!r}.")
    return lo, hi


def get_count_days_on_period(start: InstantLike, end: InstantLike) -> int:
    """Days from ``start`` to ``end``, counting both endpoints."""
    lo, hi = _bounds(start, end)
    return math.floor((hi - lo) / MS_PER_DAY + 0.5) + 1


def is_date_in_period(value: InstantLike, period: PeriodLike) -> bool:
    period = DatePeriod.coerce(period)
    lo, hi = _bounds(period.start, period.end)
    return lo <= date_to_timestamp(value) <= hi
