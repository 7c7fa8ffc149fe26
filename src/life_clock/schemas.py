"""
Domain models for life clock.

Pydantic models for the settings that drive a calculation and the
statistics it produces. Both are immutable snapshots.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

# =============================================================================
# Input
# =============================================================================


class UserSettings(BaseModel):
    """Birth date and lifestyle assumptions, as persisted by the profile store.

    ``birth_date`` is kept as the raw ISO string; parsing it (and rejecting
    garbage) is the calculator's job, so an invalid value must survive here.
    """

    model_config = {"str_strip_whitespace": True, "frozen": True}

    birth_date: str | None = Field(default=None, description="Birth date as YYYY-MM-DD")
    lifespan_years: int = Field(default=85, description="Assumed total lifespan in years")
    daily_sleep_hours: float = Field(default=7, ge=0, le=24)
    daily_work_hours: float = Field(default=8, ge=0, le=24)


# =============================================================================
# Output
# =============================================================================


class LifeStats(BaseModel):
    """Snapshot of remaining-life statistics.

    Every field defaults to zero except ``used_percentage``, so ``LifeStats.dead()``
    (100 % used, nothing remaining) is simply the model with no arguments
    but the percentage.
    """

    model_config = {"frozen": True}

    used_percentage: float = Field(..., ge=0, le=100)

    remaining_years: int = 0
    remaining_days: int = 0
    remaining_weeks: int = 0
    remaining_hours: int = 0
    remaining_seconds: int = 0

    # Experiences
    remaining_springs: int = 0
    remaining_birthdays: int = 0
    remaining_sundays: int = 0
    remaining_full_moons: int = 0

    # Totals over the remaining days, not daily rates
    sleep_hours: float = 0
    work_hours: float = 0
    free_hours: float = 0

    # Metaphors
    movies_watchable: int = 0
    books_readable: int = 0

    @classmethod
    def dead(cls) -> LifeStats:
        """The terminal record: 100 % used, every other field zero."""
        return cls(used_percentage=100.0)


class LifeStatus(StrEnum):
    """Outcome of a calculation."""

    ACTIVE = "active"
    EXPIRED = "expired"
    INVALID_INPUT = "invalid_input"


class LifeCalculation(BaseModel):
    """Tagged calculation result.

    ``stats`` is always renderable: for ``EXPIRED`` and ``INVALID_INPUT`` it
    holds the dead-state record.
    """

    model_config = {"frozen": True}

    status: LifeStatus
    stats: LifeStats
    reason: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status is LifeStatus.ACTIVE
