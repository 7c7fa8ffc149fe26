"""Dashboard renderer.

Headline used percentage, remaining time grid, remaining experiences and
the lifestyle-hour breakdown for one calculation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from life_clock.lifespan.models import HOURS_PER_BOOK, HOURS_PER_MOVIE
from life_clock.renderers import render_template
from life_clock.renderers.format_utils import (
    format_count,
    format_hours,
    format_percentage,
    format_rate,
)
from life_clock.schemas import LifeStatus

if TYPE_CHECKING:
    from life_clock.schemas import LifeCalculation, UserSettings


def _notice(calculation: LifeCalculation) -> str:
    if calculation.status is LifeStatus.EXPIRED:
        return "Your assumed lifespan has already elapsed."
    return f"Cannot calculate: {calculation.reason}"


def build_dashboard_html(calculation: LifeCalculation, settings: UserSettings) -> str:
    """Build the dashboard HTML fragment for a calculation."""
    stats = calculation.stats

    if not calculation.is_active:
        return render_template(
            "dashboard.html.j2",
            active=False,
            used_percentage=format_percentage(stats.used_percentage),
            notice=_notice(calculation),
        )

    remaining = [
        {"label": "Years left", "value": format_count(stats.remaining_years)},
        {"label": "Days left", "value": format_count(stats.remaining_days)},
        {"label": "Weeks left", "value": format_count(stats.remaining_weeks)},
        {"label": "Hours left", "value": format_count(stats.remaining_hours)},
    ]
    experiences = [
        {"label": "Springs", "value": format_count(stats.remaining_springs)},
        {"label": "Full moons", "value": format_count(stats.remaining_full_moons)},
        {"label": "Sunday nights", "value": format_count(stats.remaining_sundays)},
        {"label": "Birthdays", "value": format_count(stats.remaining_birthdays)},
    ]
    sleep_rate = format_rate(settings.daily_sleep_hours)
    work_rate = format_rate(settings.daily_work_hours)
    breakdown = [
        {"label": f"Sleep ({sleep_rate} h/day)", "value": format_hours(stats.sleep_hours)},
        {"label": f"Work ({work_rate} h/day)", "value": format_hours(stats.work_hours)},
    ]
    metaphors = [
        {
            "label": f"Movies ({HOURS_PER_MOVIE} h each)",
            "value": format_count(stats.movies_watchable),
        },
        {
            "label": f"Books ({HOURS_PER_BOOK} h each)",
            "value": format_count(stats.books_readable),
        },
    ]

    return render_template(
        "dashboard.html.j2",
        active=True,
        used_percentage=format_percentage(stats.used_percentage),
        lifespan_years=settings.lifespan_years,
        sleep_rate=sleep_rate,
        work_rate=work_rate,
        remaining=remaining,
        experiences=experiences,
        breakdown=breakdown,
        free_hours=format_hours(stats.free_hours),
        metaphors=metaphors,
    )
