"""
Prefect flow for building the static dashboard page.

Loads the stored settings, calculates statistics for the current instant and
writes ``index.html`` to the site directory.

Run locally:
    python -m life_clock.flows.build
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path  # noqa: TC003 - used at runtime
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from life_clock.config import get_settings
from life_clock.lifespan import evaluate
from life_clock.profile import is_configured, load_settings
from life_clock.renderers import render_template
from life_clock.renderers.dashboard import build_dashboard_html
from life_clock.schemas import LifeCalculation, UserSettings
from life_clock.store import SettingsStore

# Store and output paths
store = SettingsStore(get_settings().data_dir)
SITE_DIR: Path = get_settings().site_dir


# =============================================================================
# Tasks
# =============================================================================


@task(name="load-settings", cache_policy=NO_CACHE)
def load_user_settings() -> UserSettings:
    """Load user settings from store (defaults if none saved)."""
    return load_settings(store)


@task(name="calculate-stats")
def calculate_stats(settings: UserSettings, now: datetime) -> LifeCalculation:
    """Calculate life statistics for ``now``."""
    return evaluate(now, settings)


@task(name="build-html")
def build_html(calculation: LifeCalculation, settings: UserSettings, now: datetime) -> str:
    """Build the full HTML page for a calculation."""
    return render_template(
        "base.html.j2",
        updated=now.strftime("%Y-%m-%d %H:%M"),
        dashboard=build_dashboard_html(calculation, settings),
    )


@task(name="write-site", cache_policy=NO_CACHE)
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-site", log_prints=True)
def build_all(now: datetime | None = None) -> dict[str, Any]:
    """
    Build the static dashboard from stored settings.

    Args:
        now: Instant to calculate against (defaults to the current local time).
    """
    now = now or datetime.now()

    print("Loading settings...")
    settings = load_user_settings()
    if not is_configured(settings):
        print("No birth date configured. Run 'life-clock setup' first.")
        return {"error": "no settings"}

    print("Calculating statistics...")
    calculation = calculate_stats(settings, now)
    if not calculation.is_active:
        print(f"Warning: {calculation.status.value} ({calculation.reason})")

    print("Building HTML...")
    html = build_html(calculation, settings, now)

    print("Writing site...")
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {"pages": 1, "output": str(output_path), "status": calculation.status.value}


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
