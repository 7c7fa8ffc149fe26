"""Life statistics calculator.

Turns a birth date and lifestyle assumptions into remaining-life statistics
for a given instant.

Public API:
  - models: LifeSpan, RemainingUnits, LifestyleHours, event/metaphor constants
  - events: count_annual_event, count_weekdays, count_full_moons
  - compute: evaluate, calculate, project_lifestyle_hours, parse_birth_date
  - serialization: calculation_to_dict
"""

from life_clock.lifespan.compute import (
    add_years,
    calculate,
    evaluate,
    parse_birth_date,
    project_lifestyle_hours,
)
from life_clock.lifespan.events import (
    calendar_datetime,
    count_annual_event,
    count_full_moons,
    count_weekdays,
)
from life_clock.lifespan.models import (
    HOURS_PER_BOOK,
    HOURS_PER_MOVIE,
    REFERENCE_FULL_MOON,
    SPRING_DAY,
    SPRING_MONTH,
    SUNDAY,
    SYNODIC_MONTH,
    LifeSpan,
    LifestyleHours,
    RemainingUnits,
)
from life_clock.lifespan.serialization import calculation_to_dict

__all__ = [
    "HOURS_PER_BOOK",
    "HOURS_PER_MOVIE",
    "REFERENCE_FULL_MOON",
    "SPRING_DAY",
    "SPRING_MONTH",
    "SUNDAY",
    "SYNODIC_MONTH",
    "LifeSpan",
    "LifestyleHours",
    "RemainingUnits",
    "add_years",
    "calculate",
    "calculation_to_dict",
    "calendar_datetime",
    "count_annual_event",
    "count_full_moons",
    "count_weekdays",
    "evaluate",
    "parse_birth_date",
    "project_lifestyle_hours",
]
