from __future__ import annotations

import logging
from datetime import date, datetime

import numpy as np

from calutils._exceptions import CalendarError, InvalidDateInput, InvalidPeriod
from calutils.period import DatePeriod, PeriodLike

logger = logging.getLogger(__name__)

SCHEDULE_DATE_FORMAT: str = "%d-%m-%Y"


def _day_count(value) -> int:
    # Whole numbers only; 3.0 is accepted, 2.5 and "3" are not.
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise CalendarError(f"Day count must be a whole number; got {value!r}.") from exc
    if isinstance(value, (str, bytes)) or count != value:
        raise CalendarError(f"Day count must be a whole number; got {value!r}.")
    return count


class WorkCycle:
    """
    Repeating shift pattern: ``work_days`` consecutive working days followed by
    ``off_days`` consecutive days off, anchored on day 0.
    """

    def __init__(self, work_days: int, off_days: int) -> None:
        work_days = _day_count(work_days)
        off_days = _day_count(off_days)
        if work_days < 0 or off_days < 0:
            raise CalendarError(
                f"Day counts must be non-negative; got {work_days} on, {off_days} off."
            )
        if work_days + off_days == 0:
            raise CalendarError("Cycle must not be empty.")

        self._work_days = work_days
        self._off_days = off_days
        self._pattern: np.ndarray = np.concatenate(
            [np.ones(self._work_days, dtype=bool), np.zeros(self._off_days, dtype=bool)]
        )

    def is_working(self, day: int) -> bool:
        return bool(self._pattern[day % self.length])

    def mask(self, n_days: int) -> np.ndarray:
        """Boolean working-day mask for days ``0 .. n_days - 1``."""
        return self._pattern[np.arange(n_days, dtype=np.int64) % self.length]

    @property
    def work_days(self) -> int:
        return self._work_days

    @property
    def off_days(self) -> int:
        return self._off_days

    @property
    def length(self) -> int:
        return self._work_days + self._off_days

    def __repr__(self) -> str:
        return f"WorkCycle(work_days={self._work_days}, off_days={self._off_days})"


def _parse_day(value: str, fmt: str) -> date:
    try:
        return datetime.strptime(value, fmt).date()
    except (TypeError, ValueError) as exc:
        raise InvalidDateInput(f"Expected a date in {fmt!r} format; got {value!r}.") from exc


def get_work_schedule(
    period: PeriodLike,
    count_work_days: int,
    count_off_days: int,
    fmt: str = SCHEDULE_DATE_FORMAT,
) -> list[str]:
    """
    Working days of a shift cycle that starts on ``period.start``.

    Both ends of the period are inclusive.  Dates are read and written in
    ``fmt`` (``DD-MM-YYYY`` by default) and returned in calendar order.
    """
    period = DatePeriod.coerce(period)
    cycle = WorkCycle(count_work_days, count_off_days)

    start = _parse_day(period.start, fmt)
    end = _parse_day(period.end, fmt)
    if start > end:
        raise InvalidPeriod(f"Period start {period.start!r} is after its end {period.end!r}.")

    days = np.arange(np.datetime64(start, "D"), np.datetime64(end, "D") + 1)
    working = days[cycle.mask(days.size)]
    logger.debug(
        "%r over %s..%s: %d of %d days working", cycle, start, end, working.size, days.size
    )
    return [day.strftime(fmt) for day in working.tolist()]
