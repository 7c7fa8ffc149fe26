"""Tests for profile setup, adjustment and persistence."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from life_clock import __version__
from life_clock.profile import (
    DEFAULT_SETTINGS,
    MAX_LIFESPAN_YEARS,
    SETTINGS_KEY,
    build_birth_date,
    initial_settings,
    is_configured,
    load_settings,
    normalize_digits,
    reset_settings,
    save_settings,
    with_lifespan,
)
from life_clock.schemas import UserSettings
from life_clock.store import SettingsStore

if TYPE_CHECKING:
    from pathlib import Path


class TestNormalizeDigits:
    """Test full-width digit normalization."""

    def test_fullwidth(self) -> None:
        assert normalize_digits("１９９０") == "1990"

    def test_mixed(self) -> None:
        assert normalize_digits("1９9０") == "1990"

    def test_ascii_unchanged(self) -> None:
        assert normalize_digits("abc 123") == "abc 123"


class TestBuildBirthDate:
    """Test assembling a birth date from separate inputs."""

    def test_pads_month_and_day(self) -> None:
        assert build_birth_date("1990", "1", "5") == "1990-01-05"

    def test_pads_year(self) -> None:
        assert build_birth_date("990", "12", "31") == "0990-12-31"

    def test_fullwidth_input(self) -> None:
        assert build_birth_date("１９９０", "１", "５") == "1990-01-05"

    @pytest.mark.parametrize(
        ("year", "month", "day"),
        [
            ("", "1", "1"),
            ("1990", "", "1"),
            ("1990", "1", ""),
            ("1990", "2", "30"),
            ("1990", "13", "1"),
            ("19x0", "1", "1"),
            ("1990", "-1", "1"),
            ("1990", "001", "5"),
        ],
    )
    def test_invalid(self, year: str, month: str, day: str) -> None:
        assert build_birth_date(year, month, day) is None


class TestInitialSettings:
    """Test first-time setup defaults."""

    def test_setup_defaults(self) -> None:
        settings = initial_settings("1990", "1", "1")
        assert settings == UserSettings(
            birth_date="1990-01-01",
            lifespan_years=90,
            daily_sleep_hours=7,
            daily_work_hours=8,
        )

    def test_invalid_date(self) -> None:
        assert initial_settings("1990", "2", "31") is None


class TestWithLifespan:
    """Test lifespan adjustment."""

    @pytest.mark.parametrize(("years", "expected"), [(70, 70), (0, 0), (-3, 0), (150, 110)])
    def test_clamped(self, years: int, expected: int) -> None:
        settings = UserSettings(birth_date="1990-01-01")
        assert with_lifespan(settings, years).lifespan_years == expected

    def test_other_fields_preserved(self) -> None:
        settings = UserSettings(birth_date="1990-01-01", daily_sleep_hours=6)
        updated = with_lifespan(settings, MAX_LIFESPAN_YEARS)
        assert updated.birth_date == "1990-01-01"
        assert updated.daily_sleep_hours == 6
        assert settings.lifespan_years == 85


class TestIsConfigured:
    """Test the configured-profile gate."""

    def test_defaults_not_configured(self) -> None:
        assert not is_configured(DEFAULT_SETTINGS)

    def test_empty_string_not_configured(self) -> None:
        assert not is_configured(UserSettings(birth_date="   "))

    def test_configured(self) -> None:
        assert is_configured(UserSettings(birth_date="1990-01-01"))


class TestPersistence:
    """Test loading, saving and resetting settings."""

    def test_load_missing_returns_defaults(self, tmp_path: Path) -> None:
        assert load_settings(SettingsStore(tmp_path)) == DEFAULT_SETTINGS

    def test_save_and_load(self, tmp_path: Path) -> None:
        store = SettingsStore(tmp_path)
        settings = UserSettings(birth_date="1990-01-01", lifespan_years=77)
        path = save_settings(store, settings)
        assert path == tmp_path / f"{SETTINGS_KEY}.json"
        assert load_settings(store) == settings

    def test_save_stamps_app_version(self, tmp_path: Path) -> None:
        store = SettingsStore(tmp_path)
        save_settings(store, UserSettings(birth_date="1990-01-01"))
        envelope = store.read_raw(SETTINGS_KEY)
        assert envelope is not None
        assert envelope["meta"]["app_version"] == __version__

    def test_load_corrupt_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / f"{SETTINGS_KEY}.json").write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="life_clock.profile"):
            assert load_settings(SettingsStore(tmp_path)) == DEFAULT_SETTINGS
        assert "Unreadable settings file" in caplog.text

    def test_load_invalid_payload(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        store = SettingsStore(tmp_path)
        store.write(SETTINGS_KEY, {"birth_date": "1990-01-01", "daily_sleep_hours": -1})
        with caplog.at_level(logging.WARNING, logger="life_clock.profile"):
            assert load_settings(store) == DEFAULT_SETTINGS
        assert "invalid stored settings" in caplog.text

    def test_reset(self, tmp_path: Path) -> None:
        store = SettingsStore(tmp_path)
        save_settings(store, UserSettings(birth_date="1990-01-01"))
        assert reset_settings(store) == DEFAULT_SETTINGS

        stored = json.loads((tmp_path / f"{SETTINGS_KEY}.json").read_text())
        assert stored["data"]["birth_date"] is None
        assert stored["data"]["lifespan_years"] == 85
