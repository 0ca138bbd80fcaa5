"""
plan_parser.py

Responsibility: Load and parse a demo plan into a deterministic, typed model.

A plan names the builder variant to bind and the runs to perform with it.
It is read from either:
- a plain YAML document, or
- a markdown file that starts with YAML frontmatter (the rest is ignored).

The demo harness treats the parsed `Plan` as the single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from housebuilder.builders import BUILDERS, STEPS
from housebuilder.director import RECIPES


class PlanError(ValueError):
    pass


@dataclass(frozen=True)
class Run:
    """One titled product: either a director recipe or a custom list of steps."""

    title: str
    recipe: str | None = None
    steps: tuple[str, ...] = ()


@dataclass(frozen=True)
class Plan:
    builder: str = "plain"
    runs: tuple[Run, ...] = ()


DEFAULT_PLAN = Plan(
    builder="plain",
    runs=(
        Run(title="Basic house", recipe="basic"),
        Run(title="Full house", recipe="full"),
        Run(title="Custom house", steps=("walls", "door", "roof", "windows", "swimming_pool")),
    ),
)


def _split_frontmatter(text: str) -> str:
    """
    If the text begins with YAML frontmatter delimited by '---', return only
    the frontmatter. Otherwise the whole text is taken to be YAML (a leading
    '---' with no closing one is just a YAML document-start marker).
    """
    if not text.startswith("---\n"):
        return text

    end = text.find("\n---\n", 4)
    if end == -1:
        # A lone trailing delimiter without a newline after it.
        if text.endswith("\n---"):
            return text[4 : -len("\n---")]
        return text
    return text[4:end]


def _parse_run(index: int, raw: Any) -> Run:
    where = f"runs[{index}]"
    if not isinstance(raw, dict):
        raise PlanError(f"`{where}` must be an object/mapping.")

    title = str(raw.get("title") or "").strip()
    if not title:
        raise PlanError(f"`{where}` must define a non-empty `title`.")

    recipe = raw.get("recipe")
    steps_raw = raw.get("steps")
    if (recipe is None) == (steps_raw is None):
        raise PlanError(f"`{where}` must define exactly one of `recipe` or `steps`.")

    if recipe is not None:
        recipe = str(recipe).strip()
        if recipe not in RECIPES:
            raise PlanError(f"`{where}.recipe` is unknown: {recipe!r} (known: {', '.join(RECIPES)})")
        return Run(title=title, recipe=recipe)

    if not isinstance(steps_raw, list):
        raise PlanError(f"`{where}.steps` must be a list of step names.")
    steps = tuple(str(s).strip() for s in steps_raw)
    unknown = [s for s in steps if s not in STEPS]
    if unknown:
        raise PlanError(f"`{where}.steps` has unknown steps: {', '.join(unknown)} (known: {', '.join(STEPS)})")
    return Run(title=title, steps=steps)


def load_plan(text: str) -> Plan:
    """
    Parse plan text into a `Plan`.

    Expected keys:
    - builder: str (optional, default "plain")
    - runs: list (required) of {title, recipe} or {title, steps}
    """
    try:
        data = yaml.safe_load(_split_frontmatter(text))
    except yaml.YAMLError as e:
        raise PlanError(f"Plan is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise PlanError("Plan must be an object/mapping at the top level.")

    builder = str(data.get("builder") or "plain").strip()
    if builder not in BUILDERS:
        raise PlanError(f"`builder` is unknown: {builder!r} (known: {', '.join(sorted(BUILDERS))})")

    runs_raw = data.get("runs")
    if not isinstance(runs_raw, list) or not runs_raw:
        raise PlanError("Plan must define `runs` as a non-empty list.")

    return Plan(builder=builder, runs=tuple(_parse_run(i, r) for i, r in enumerate(runs_raw)))


def parse_plan(plan_path: str | Path) -> Plan:
    path = Path(plan_path)
    if not path.is_file():
        raise PlanError(f"Plan file does not exist or is not a file: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PlanError(f"Cannot read plan file: {path}") from e
    return load_plan(text)
