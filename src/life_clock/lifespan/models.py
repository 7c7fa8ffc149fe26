"""Lifespan value objects and constants."""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import datetime, time, timedelta

# Recurring events
SPRING_MONTH = 3
SPRING_DAY = 20
SUNDAY = calendar.SUNDAY
EVENT_TIME = time(23, 59, 59)

# A known full moon and the mean synodic month
REFERENCE_FULL_MOON = datetime(2024, 1, 25, 12, 0, 0)
SYNODIC_MONTH = timedelta(days=29.53059)

WEEK = timedelta(days=7)
DAYS_PER_YEAR = 365.25
HOURS_PER_DAY = 24

# Fixed per-unit costs for the metaphor counts
HOURS_PER_MOVIE = 2
HOURS_PER_BOOK = 10


@dataclass(frozen=True)
class LifeSpan:
    """Birth and death instants (local wall-clock time)."""

    birth: datetime
    death: datetime

    @property
    def total(self) -> timedelta:
        return self.death - self.birth

    def elapsed(self, now: datetime) -> timedelta:
        return now - self.birth

    def remaining(self, now: datetime) -> timedelta:
        return self.death - now

    def used_percentage(self, now: datetime) -> float:
        """Share of the lifespan elapsed at ``now``, clamped to 0-100."""
        return min(100.0, max(0.0, self.elapsed(now) / self.total * 100))


@dataclass(frozen=True)
class RemainingUnits:
    """Floor-truncated remaining time, each unit derived from the one below it."""

    seconds: int
    hours: int
    days: int
    weeks: int
    years: int

    @classmethod
    def from_timedelta(cls, remaining: timedelta) -> RemainingUnits:
        millis = remaining // timedelta(milliseconds=1)
        seconds = millis // 1000
        hours = seconds // 3600
        days = hours // HOURS_PER_DAY
        return cls(
            seconds=seconds,
            hours=hours,
            days=days,
            weeks=days // 7,
            years=math.floor(days / DAYS_PER_YEAR),
        )


@dataclass(frozen=True)
class LifestyleHours:
    """Sleep/work/free hours projected over the remaining days."""

    sleep: float
    work: float
    free: float

    @property
    def movies(self) -> int:
        """Films that fit in the free hours."""
        return math.floor(self.free / HOURS_PER_MOVIE)

    @property
    def books(self) -> int:
        """Books that fit in the free hours."""
        return math.floor(self.free / HOURS_PER_BOOK)
