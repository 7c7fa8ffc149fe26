"""User profile: default settings, first-time setup and lifespan adjustment.

Settings are persisted through ``SettingsStore`` under a single fixed key.
Nothing stored (or an explicit reset) means ``DEFAULT_SETTINGS``, whose
empty birth date marks the profile as not yet configured.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from life_clock import __version__
from life_clock.lifespan import parse_birth_date
from life_clock.schemas import UserSettings

if TYPE_CHECKING:
    from pathlib import Path

    from life_clock.store import SettingsStore

logger = logging.getLogger(__name__)

SETTINGS_KEY = "life-counter-settings"

DEFAULT_SETTINGS = UserSettings(
    birth_date=None,
    lifespan_years=85,
    daily_sleep_hours=7,
    daily_work_hours=8,
)

# Applied on first-time setup; only the birth date is asked for
SETUP_SLEEP_HOURS = 7
SETUP_WORK_HOURS = 8
SETUP_LIFESPAN_YEARS = 90

MIN_LIFESPAN_YEARS = 0
MAX_LIFESPAN_YEARS = 110

_FULLWIDTH_DIGITS = str.maketrans("０１２３４５６７８９", "0123456789")


def normalize_digits(text: str) -> str:
    """Replace full-width digits (０-９) with their ASCII counterparts."""
    return text.translate(_FULLWIDTH_DIGITS)


def build_birth_date(year: str, month: str, day: str) -> str | None:
    """Assemble a ``YYYY-MM-DD`` string from separately entered parts.

    Parts are digit-normalized and zero-padded, so ``("1990", "1", "5")``
    gives ``"1990-01-05"``.

    Returns:
        The ISO date string, or None if a part is missing or the date
        doesn't exist.
    """
    parts = [normalize_digits(p).strip() for p in (year, month, day)]
    if not all(parts) or not all(p.isascii() and p.isdigit() for p in parts):
        return None

    y, m, d = parts
    birth_date = f"{y.zfill(4)}-{m.zfill(2)}-{d.zfill(2)}"
    if parse_birth_date(birth_date) is None:
        return None
    return birth_date


def initial_settings(year: str, month: str, day: str) -> UserSettings | None:
    """Settings for a first-time setup, or None if the date is unusable."""
    birth_date = build_birth_date(year, month, day)
    if birth_date is None:
        return None
    return UserSettings(
        birth_date=birth_date,
        lifespan_years=SETUP_LIFESPAN_YEARS,
        daily_sleep_hours=SETUP_SLEEP_HOURS,
        daily_work_hours=SETUP_WORK_HOURS,
    )


def with_lifespan(settings: UserSettings, years: int) -> UserSettings:
    """Copy of ``settings`` with the lifespan clamped to the adjustable range."""
    clamped = min(MAX_LIFESPAN_YEARS, max(MIN_LIFESPAN_YEARS, years))
    return settings.model_copy(update={"lifespan_years": clamped})


def is_configured(settings: UserSettings) -> bool:
    """Whether a birth date has been entered."""
    return bool(settings.birth_date)


def load_settings(store: SettingsStore) -> UserSettings:
    """Load stored settings, falling back to ``DEFAULT_SETTINGS``."""
    try:
        data = store.read(SETTINGS_KEY)
    except json.JSONDecodeError as e:
        logger.warning("Unreadable settings file %s: %s", store.path_for(SETTINGS_KEY), e)
        return DEFAULT_SETTINGS

    if data is None:
        return DEFAULT_SETTINGS

    try:
        return UserSettings.model_validate(data)
    except ValidationError as e:
        logger.warning("Ignoring invalid stored settings: %s", e)
        return DEFAULT_SETTINGS


def save_settings(store: SettingsStore, settings: UserSettings) -> Path:
    """Persist ``settings`` under the fixed settings key, stamped with the app version."""
    return store.write(SETTINGS_KEY, settings.model_dump(mode="json"), app_version=__version__)


def reset_settings(store: SettingsStore) -> UserSettings:
    """Overwrite stored settings with the defaults and return them."""
    save_settings(store, DEFAULT_SETTINGS)
    return DEFAULT_SETTINGS
