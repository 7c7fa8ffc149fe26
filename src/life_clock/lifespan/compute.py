"""Life statistics calculation (pure, no I/O).

    death         = birth + lifespan_years (calendar years)
    used %        = clamp(0, 100, (now - birth) / (death - birth) * 100)
    remaining     = death - now, floored to seconds/hours/days/weeks/years
    daily free    = max(0, 24 - sleep - work)
    lifestyle     = remaining_days * daily rate

Invalid settings and an elapsed lifespan never raise; they come back as the
dead-state record inside a non-active ``LifeCalculation``.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time

from life_clock.lifespan.events import (
    calendar_datetime,
    count_annual_event,
    count_full_moons,
    count_weekdays,
)
from life_clock.lifespan.models import (
    HOURS_PER_DAY,
    SPRING_DAY,
    SPRING_MONTH,
    SUNDAY,
    LifeSpan,
    LifestyleHours,
    RemainingUnits,
)
from life_clock.schemas import LifeCalculation, LifeStats, LifeStatus, UserSettings

logger = logging.getLogger(__name__)

# date.fromisoformat also takes basic ("19900101") and week ("1990-W01-1") forms
_BIRTH_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_birth_date(value: str | None) -> date | None:
    """Parse an ISO ``YYYY-MM-DD`` birth date, or return None if it isn't one."""
    if not value:
        return None
    value = value.strip()
    if not _BIRTH_DATE_RE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def add_years(start: date, years: int) -> date:
    """Add calendar years; Feb 29 lands on Mar 1 when the target year has none.

    Raises:
        ValueError: If the resulting year is outside 1-9999.
    """
    year = start.year + years
    if not 1 <= year <= 9999:
        msg = f"Year out of range: {year}"
        raise ValueError(msg)
    return calendar_datetime(year, start.month, start.day, time()).date()


def to_local(now: datetime) -> datetime:
    """Drop timezone info, converting aware datetimes to host-local wall time."""
    if now.tzinfo is None:
        return now
    return now.astimezone().replace(tzinfo=None)


def project_lifestyle_hours(
    remaining_days: int,
    daily_sleep_hours: float,
    daily_work_hours: float,
) -> LifestyleHours:
    """Project sleep/work/free hours over the remaining whole days.

    Free time is clamped at zero when sleep + work exceeds a day, but the
    sleep and work totals are left uncapped.
    """
    daily_free = max(0.0, HOURS_PER_DAY - daily_sleep_hours - daily_work_hours)
    return LifestyleHours(
        sleep=remaining_days * daily_sleep_hours,
        work=remaining_days * daily_work_hours,
        free=remaining_days * daily_free,
    )


def _dead(status: LifeStatus, reason: str) -> LifeCalculation:
    return LifeCalculation(status=status, stats=LifeStats.dead(), reason=reason)


def evaluate(now: datetime, settings: UserSettings) -> LifeCalculation:
    """Compute life statistics and tag how the calculation ended.

    Args:
        now: The instant to calculate against. Naive values are local time.
        settings: Birth date and lifestyle assumptions.

    Returns:
        ``ACTIVE`` with real statistics, or ``EXPIRED`` / ``INVALID_INPUT``
        carrying the dead-state record.
    """
    birth_date = parse_birth_date(settings.birth_date)
    if birth_date is None:
        logger.warning("Invalid birth date: %r", settings.birth_date)
        return _dead(LifeStatus.INVALID_INPUT, f"invalid birth date: {settings.birth_date!r}")

    try:
        death_date = add_years(birth_date, settings.lifespan_years)
    except ValueError:
        return _dead(
            LifeStatus.INVALID_INPUT,
            f"lifespan out of range: {settings.lifespan_years} years",
        )

    span = LifeSpan(
        birth=datetime.combine(birth_date, time()),
        death=datetime.combine(death_date, time()),
    )
    if span.total.total_seconds() <= 0:
        return _dead(
            LifeStatus.INVALID_INPUT,
            f"lifespan must be positive, got {settings.lifespan_years} years",
        )

    now = to_local(now)
    if span.remaining(now).total_seconds() <= 0:
        return _dead(LifeStatus.EXPIRED, "assumed lifespan has elapsed")

    units = RemainingUnits.from_timedelta(span.remaining(now))
    hours = project_lifestyle_hours(
        units.days, settings.daily_sleep_hours, settings.daily_work_hours
    )

    stats = LifeStats(
        used_percentage=span.used_percentage(now),
        remaining_years=units.years,
        remaining_days=units.days,
        remaining_weeks=units.weeks,
        remaining_hours=units.hours,
        remaining_seconds=units.seconds,
        remaining_springs=count_annual_event(now, span.death, SPRING_MONTH, SPRING_DAY),
        remaining_birthdays=count_annual_event(
            now, span.death, birth_date.month, birth_date.day
        ),
        remaining_sundays=count_weekdays(now, span.death, SUNDAY),
        remaining_full_moons=count_full_moons(now, span.death),
        sleep_hours=hours.sleep,
        work_hours=hours.work,
        free_hours=hours.free,
        movies_watchable=hours.movies,
        books_readable=hours.books,
    )
    return LifeCalculation(status=LifeStatus.ACTIVE, stats=stats)


def calculate(now: datetime, settings: UserSettings) -> LifeStats:
    """Compute life statistics, collapsing every failure into the dead-state record.

    Use ``evaluate`` to tell an elapsed lifespan apart from bad input.
    """
    return evaluate(now, settings).stats
