"""
renderer.py

Responsibility: Deterministically render the demo report with Jinja2.

Rules:
- The default template ships with the package (`templates/report.txt.j2`).
- A custom template file may be supplied instead; it receives `results`,
  a list of objects with `title` and `house` attributes.
- Undefined template variables are errors, never empty strings.

This module intentionally does NOT know about plans, builders or CLI parsing.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined

DEFAULT_TEMPLATE = Path(__file__).resolve().parent / "templates" / "report.txt.j2"


class RenderError(RuntimeError):
    pass


def _environment() -> Environment:
    return Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render_report(results: Sequence[Any], template_path: str | Path | None = None) -> str:
    tpl_path = Path(template_path) if template_path is not None else DEFAULT_TEMPLATE
    if not tpl_path.is_file():
        raise RenderError(f"Template file not found: {tpl_path}")

    try:
        text = tpl_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RenderError(f"Cannot read template file: {tpl_path}") from e

    try:
        template = _environment().from_string(text)
        return template.render(results=list(results))
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering template file: {tpl_path.name}") from e
