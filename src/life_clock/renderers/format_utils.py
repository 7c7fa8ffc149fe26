"""Number formatting helpers for renderers."""

from __future__ import annotations


def format_count(value: float) -> str:
    """Round to a whole number with thousands separators, e.g. ``12,345``."""
    return f"{round(value):,}"


def format_percentage(value: float) -> str:
    """One decimal place, e.g. ``40.0``."""
    return f"{value:.1f}"


def format_rate(hours: float) -> str:
    """Hours per day without a trailing ``.0`` (``7`` but ``7.5``)."""
    return f"{hours:g}"


def format_hours(value: float) -> str:
    """Hour totals keep their fraction: ``6,506.5``, ``7,300``.

    Ten significant digits hide float noise such as ``7299.999999999999``.
    """
    return f"{value:,.10g}"
