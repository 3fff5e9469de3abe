"""
calutils.schedule
~~~~~~~~~~~~~~~~~

Shift schedules built from a repeating on/off cycle.

Basic usage::

    from calutils.schedule import get_work_schedule

    get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
    # → ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']

Public API
----------
WorkCycle          On/off day pattern anchored on the first day of a period.
get_work_schedule  Working dates of a cycle within an inclusive period.
"""

from __future__ import annotations

from calutils.schedule.schedule import SCHEDULE_DATE_FORMAT, WorkCycle, get_work_schedule

__all__ = [
    "SCHEDULE_DATE_FORMAT",
    "WorkCycle",
    "get_work_schedule",
]
