"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: pydantic models or dicts (from lifespan/ or profile)
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which wraps the fragment in ``base.html.j2``.

Public API:
  - dashboard: build_dashboard_html
  - format_utils: format_count, format_hours, format_percentage, format_rate
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def create_environment(template_dir: Path = TEMPLATE_DIR) -> jinja2.Environment:
    """Jinja2 environment for the dashboard templates.

    Undefined variables raise ``jinja2.UndefinedError`` instead of rendering
    as empty strings.
    """
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        autoescape=jinja2.select_autoescape(["html", "html.j2"]),
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


_env = create_environment()


def render_template(template_name: str, **context: Any) -> str:
    """Render a template from the package's ``templates`` directory."""
    return _env.get_template(template_name).render(**context)
