"""
tests/schedule/test_schedule.py

Covers:
  - Documented on/off schedules
  - Cycle anchoring on the period start
  - Degenerate cycles (no days off, no working days)
  - Custom date formats
  - Invalid cycles, dates and periods
"""

import numpy as np
import pytest

from calutils.calendar import CalendarError, InvalidDateInput, InvalidPeriod
from calutils.period import DatePeriod
from calutils.schedule import WorkCycle, get_work_schedule


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def first_half_of_january():
    return {"start": "01-01-2024", "end": "15-01-2024"}


@pytest.fixture
def two_on_two_off():
    return WorkCycle(2, 2)


# ── WorkCycle ─────────────────────────────────────────────────────────────────

class TestWorkCycle:

    def test_length(self, two_on_two_off):
        assert two_on_two_off.length == 4
        assert two_on_two_off.work_days == 2
        assert two_on_two_off.off_days == 2

    def test_mask(self, two_on_two_off):
        np.testing.assert_array_equal(
            two_on_two_off.mask(6), [True, True, False, False, True, True]
        )

    def test_is_working_wraps(self, two_on_two_off):
        assert two_on_two_off.is_working(0)
        assert not two_on_two_off.is_working(3)
        assert two_on_two_off.is_working(101)

    def test_negative_counts_raise(self):
        with pytest.raises(CalendarError):
            WorkCycle(-1, 2)
        with pytest.raises(CalendarError):
            WorkCycle(2, -1)

    def test_empty_cycle_raises(self):
        with pytest.raises(CalendarError):
            WorkCycle(0, 0)

    def test_whole_float_counts_accepted(self):
        cycle = WorkCycle(1.0, 3.0)
        assert (cycle.work_days, cycle.off_days) == (1, 3)
        assert isinstance(cycle.work_days, int)

    def test_numpy_integer_counts_accepted(self):
        assert WorkCycle(np.int64(2), np.int32(1)).length == 3

    @pytest.mark.parametrize("count", [1.5, "3", None, float("nan")])
    def test_non_whole_counts_raise(self, count):
        with pytest.raises(CalendarError):
            WorkCycle(count, 1)

    def test_repr(self, two_on_two_off):
        assert repr(two_on_two_off) == "WorkCycle(work_days=2, off_days=2)"


# ── Schedules ─────────────────────────────────────────────────────────────────

class TestGetWorkSchedule:

    def test_one_on_three_off(self, first_half_of_january):
        assert get_work_schedule(first_half_of_january, 1, 3) == [
            "01-01-2024",
            "05-01-2024",
            "09-01-2024",
            "13-01-2024",
        ]

    def test_one_on_one_off(self):
        period = {"start": "01-01-2024", "end": "10-01-2024"}
        assert get_work_schedule(period, 1, 1) == [
            "01-01-2024",
            "03-01-2024",
            "05-01-2024",
            "07-01-2024",
            "09-01-2024",
        ]

    def test_two_on_one_off_across_month_end(self):
        period = DatePeriod("28-02-2024", "05-03-2024")
        assert get_work_schedule(period, 2, 1) == [
            "28-02-2024",
            "29-02-2024",
            "02-03-2024",
            "03-03-2024",
            "05-03-2024",
        ]

    def test_no_days_off_is_every_day(self, first_half_of_january):
        schedule = get_work_schedule(first_half_of_january, 3, 0)
        assert len(schedule) == 15
        assert schedule[0] == "01-01-2024"
        assert schedule[-1] == "15-01-2024"

    def test_no_working_days_is_empty(self, first_half_of_january):
        assert get_work_schedule(first_half_of_january, 0, 2) == []

    def test_single_day_period(self):
        assert get_work_schedule(("01-01-2024", "01-01-2024"), 1, 3) == ["01-01-2024"]

    def test_end_inclusive(self):
        period = {"start": "01-01-2024", "end": "05-01-2024"}
        assert get_work_schedule(period, 1, 3)[-1] == "05-01-2024"

    def test_working_count_matches_cycle(self):
        period = {"start": "01-01-2024", "end": "31-12-2024"}
        # 366 days = 52 full 7-day cycles plus 2 leftover working days.
        assert len(get_work_schedule(period, 5, 2)) == 52 * 5 + 2

    def test_custom_format(self):
        period = {"start": "2024-01-01", "end": "2024-01-06"}
        assert get_work_schedule(period, 2, 1, fmt="%Y-%m-%d") == [
            "2024-01-01",
            "2024-01-02",
            "2024-01-04",
            "2024-01-05",
        ]

    def test_wrong_format_raises(self):
        with pytest.raises(InvalidDateInput):
            get_work_schedule({"start": "2024-01-01", "end": "15-01-2024"}, 1, 3)

    def test_impossible_date_raises(self):
        with pytest.raises(InvalidDateInput):
            get_work_schedule({"start": "30-02-2024", "end": "15-03-2024"}, 1, 3)

    def test_reversed_period_raises(self):
        with pytest.raises(InvalidPeriod):
            get_work_schedule({"start": "15-01-2024", "end": "01-01-2024"}, 1, 3)

    def test_invalid_cycle_raises(self, first_half_of_january):
        with pytest.raises(CalendarError):
            get_work_schedule(first_half_of_january, 0, 0)

    def test_whole_float_counts(self, first_half_of_january):
        assert get_work_schedule(first_half_of_january, 1.0, 3.0) == get_work_schedule(
            first_half_of_january, 1, 3
        )
