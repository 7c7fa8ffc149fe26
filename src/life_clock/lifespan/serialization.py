"""JSON serialization helpers for calculation results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from life_clock.schemas import LifeCalculation


def calculation_to_dict(calculation: LifeCalculation) -> dict[str, Any]:
    """Serialize a LifeCalculation to a JSON-compatible dict.

    Args:
        calculation: The tagged result to serialize.

    Returns:
        Dict with status, reason, and the statistics payload.
    """
    stats = calculation.stats.model_dump(mode="json")
    stats["used_percentage"] = round(calculation.stats.used_percentage, 4)
    return {
        "status": calculation.status.value,
        "reason": calculation.reason,
        "stats": stats,
    }
