"""Counting recurring calendar events between two instants (no I/O).

All instants are naive local datetimes. Counts are closed-form except the
annual counter, which walks one calendar year at a time.

    annual:   occurrences at 23:59:59 with start < occurrence < end
    weekday:  from start's midnight (inclusive) to end (exclusive)
    moons:    reference-aligned full moons with start < moon < end
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from life_clock.lifespan.models import (
    EVENT_TIME,
    REFERENCE_FULL_MOON,
    SYNODIC_MONTH,
    WEEK,
)


def _ceil_div(numerator: timedelta, denominator: timedelta) -> int:
    return -(-numerator // denominator)


def calendar_datetime(year: int, month: int, day: int, at: time = EVENT_TIME) -> datetime:
    """Build a datetime, letting an out-of-range day spill into the next month.

    ``calendar_datetime(2023, 2, 29)`` is March 1st, 2023.
    """
    return datetime.combine(date(year, month, 1) + timedelta(days=day - 1), at)


def count_annual_event(start: datetime, end: datetime, month: int, day: int) -> int:
    """Count yearly month/day occurrences strictly between start and end.

    Args:
        start: Exclusive lower bound (usually "now").
        end: Exclusive upper bound (usually the death instant).
        month: Month of the event, 1-12.
        day: Day of the event. Feb 29 falls on Mar 1 in non-leap years.

    Returns:
        Number of years whose occurrence lies inside the interval.
    """
    count = 0
    for year in range(start.year, end.year + 1):
        occurrence = calendar_datetime(year, month, day)
        if start < occurrence < end:
            count += 1
    return count


def count_weekdays(start: datetime, end: datetime, weekday: int) -> int:
    """Count occurrences of a weekday (Monday=0 ... Sunday=6) before end.

    ``start`` is first normalized to midnight, so if today already is the
    target weekday it still counts as a remaining occurrence. Offsets are
    measured from that midnight, so no instant past ``end`` is ever built.
    """
    window = end - datetime.combine(start.date(), time())
    offset = timedelta(days=(weekday - start.weekday()) % 7)
    if offset >= window:
        return 0
    return _ceil_div(window - offset, WEEK)


def count_full_moons(start: datetime, end: datetime) -> int:
    """Approximate the number of full moons strictly between start and end.

    Moons are placed every synodic month from a known reference full moon;
    drift against the real sky over centuries is accepted.
    """
    cycles = (start - REFERENCE_FULL_MOON) // SYNODIC_MONTH + 1
    # time from the first moon after start to end
    gap = (end - REFERENCE_FULL_MOON) - cycles * SYNODIC_MONTH
    if gap <= timedelta(0):
        return 0
    return _ceil_div(gap, SYNODIC_MONTH)
