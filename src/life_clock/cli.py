"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import json
import logging
import sys
from datetime import datetime

from life_clock import __version__
from life_clock.config import get_settings
from life_clock.flows.build import build_all
from life_clock.lifespan import calculation_to_dict, evaluate
from life_clock.profile import (
    MAX_LIFESPAN_YEARS,
    MIN_LIFESPAN_YEARS,
    SETTINGS_KEY,
    initial_settings,
    is_configured,
    load_settings,
    reset_settings,
    save_settings,
    with_lifespan,
)
from life_clock.renderers.format_utils import (
    format_count,
    format_hours,
    format_percentage,
    format_rate,
)
from life_clock.schemas import LifeCalculation, LifeStatus, UserSettings
from life_clock.store import SettingsStore

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="life-clock",
        description="How much of your life is left, in years, Sundays and full moons",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'stats' command - calculate and print statistics
    stats_parser = subparsers.add_parser("stats", help="Show remaining-life statistics")
    stats_parser.add_argument("--birth-date", type=str, default=None, help="YYYY-MM-DD")
    stats_parser.add_argument("--lifespan", type=int, default=None, help="Lifespan in years")
    stats_parser.add_argument("--sleep", type=float, default=None, help="Sleep hours per day")
    stats_parser.add_argument("--work", type=float, default=None, help="Work hours per day")
    stats_parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Calculate as of this ISO datetime (default: current time)",
    )
    stats_parser.add_argument("--json", action="store_true", help="Print JSON")

    # 'setup' command - first-time setup
    setup_parser = subparsers.add_parser("setup", help="Save your birth date")
    setup_parser.add_argument("--year", type=str, required=True)
    setup_parser.add_argument("--month", type=str, required=True)
    setup_parser.add_argument("--day", type=str, required=True)

    # 'lifespan' command - adjust assumed lifespan
    lifespan_parser = subparsers.add_parser("lifespan", help="Change the assumed lifespan")
    lifespan_parser.add_argument(
        "years",
        type=int,
        help=f"Years to live ({MIN_LIFESPAN_YEARS}-{MAX_LIFESPAN_YEARS})",
    )

    subparsers.add_parser("reset", help="Discard saved settings")
    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("refresh", help="Build the static dashboard page")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def _store() -> SettingsStore:
    return SettingsStore(get_settings().data_dir)


def _apply_overrides(settings: UserSettings, args: argparse.Namespace) -> UserSettings:
    overrides = {
        "birth_date": args.birth_date,
        "lifespan_years": args.lifespan,
        "daily_sleep_hours": args.sleep,
        "daily_work_hours": args.work,
    }
    update = {k: v for k, v in overrides.items() if v is not None}
    if not update:
        return settings
    return UserSettings.model_validate(settings.model_dump() | update)


def _print_rows(rows: list[tuple[str, str]]) -> None:
    for label, value in rows:
        print(f"{label + ':':<22}{value}")


def _print_stats(calculation: LifeCalculation, settings: UserSettings) -> None:
    stats = calculation.stats
    sleep_rate = format_rate(settings.daily_sleep_hours)
    work_rate = format_rate(settings.daily_work_hours)
    sections = [
        [
            ("Life used", f"{format_percentage(stats.used_percentage)}%"),
            ("Years left", format_count(stats.remaining_years)),
            ("Days left", format_count(stats.remaining_days)),
            ("Weeks left", format_count(stats.remaining_weeks)),
            ("Hours left", format_count(stats.remaining_hours)),
            ("Seconds left", format_count(stats.remaining_seconds)),
        ],
        [
            ("Springs", format_count(stats.remaining_springs)),
            ("Full moons", format_count(stats.remaining_full_moons)),
            ("Sunday nights", format_count(stats.remaining_sundays)),
            ("Birthdays", format_count(stats.remaining_birthdays)),
        ],
        [
            (f"Sleep ({sleep_rate} h/day)", f"{format_hours(stats.sleep_hours)} h"),
            (f"Work ({work_rate} h/day)", f"{format_hours(stats.work_hours)} h"),
            ("Free time", f"{format_hours(stats.free_hours)} h"),
            ("Movies", format_count(stats.movies_watchable)),
            ("Books", format_count(stats.books_readable)),
        ],
    ]
    for i, rows in enumerate(sections):
        if i:
            print()
        _print_rows(rows)


def cmd_stats(args: argparse.Namespace) -> int:
    """Handle the 'stats' command."""
    try:
        settings = _apply_overrides(load_settings(_store()), args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not is_configured(settings):
        print("No birth date configured. Run 'life-clock setup' first.", file=sys.stderr)
        return 1

    calculation = evaluate(args.now or datetime.now(), settings)
    if calculation.status is LifeStatus.INVALID_INPUT:
        print(f"Error: {calculation.reason}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(calculation_to_dict(calculation), indent=2))
    elif calculation.status is LifeStatus.EXPIRED:
        print("Your assumed lifespan has already elapsed.")
    else:
        _print_stats(calculation, settings)
    return 0


def cmd_setup(args: argparse.Namespace) -> int:
    """Handle the 'setup' command."""
    settings = initial_settings(args.year, args.month, args.day)
    if settings is None:
        print(f"Error: not a valid date: {args.year}-{args.month}-{args.day}", file=sys.stderr)
        return 1

    path = save_settings(_store(), settings)
    print(f"Saved birth date {settings.birth_date} to {path}")
    return 0


def cmd_lifespan(args: argparse.Namespace) -> int:
    """Handle the 'lifespan' command."""
    store = _store()
    settings = with_lifespan(load_settings(store), args.years)
    save_settings(store, settings)
    print(f"Lifespan set to {settings.lifespan_years} years")
    return 0


def cmd_reset(_args: argparse.Namespace) -> int:
    """Handle the 'reset' command."""
    reset_settings(_store())
    print("Settings reset to defaults.")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command: app settings and the stored profile."""
    settings = get_settings()
    store = _store()
    profile = load_settings(store)
    _print_rows(
        [
            ("Application", f"{settings.app_name} {__version__} ({settings.app_env})"),
            ("Debug", str(settings.debug)),
            ("Settings file", str(store.path_for(SETTINGS_KEY))),
            ("Site dir", str(settings.site_dir)),
            ("Birth date", profile.birth_date or "not set"),
            ("Lifespan", f"{profile.lifespan_years} years"),
        ]
    )
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: build the dashboard page."""
    print("Building site...")
    result = build_all()
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built dashboard locally."""
    settings = get_settings()
    index = settings.site_dir / "index.html"
    if not index.exists():
        print(f"No dashboard at {index}. Run 'life-clock refresh' first.", file=sys.stderr)
        return 1

    port = settings.api_port if args.port is None else args.port
    handler = functools.partial(
        http.server.SimpleHTTPRequestHandler, directory=str(settings.site_dir)
    )
    with http.server.ThreadingHTTPServer(("", port), handler) as server:
        logger.info("Serving %s on port %d", settings.site_dir, port)
        print(f"Dashboard at http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")
    return 0


def configure_logging(debug: bool) -> None:
    """Route module loggers to stderr at the configured level."""
    level = "DEBUG" if debug else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "stats": cmd_stats,
        "setup": cmd_setup,
        "lifespan": cmd_lifespan,
        "reset": cmd_reset,
        "info": cmd_info,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
