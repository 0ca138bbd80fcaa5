"""
cli.py

Responsibility: CLI entrypoint for the house builder demo.

Commands:
- `demo`:  parse a plan (or use the default one) -> run it -> render report
- `build`: run a single director recipe and print the house
- `list`:  show registered builders and recipes

This module should orchestrate behavior but keep concerns isolated:
- Plan parsing: `plan_parser.py`
- Running a plan: `demo.py`
- Rendering: `renderer.py`
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from housebuilder.builders import BUILDERS, UnknownBuilderError, make_builder
from housebuilder.demo import run_plan
from housebuilder.director import RECIPES, Director, DirectorError
from housebuilder.plan_parser import DEFAULT_PLAN, PlanError, parse_plan
from housebuilder.renderer import RenderError, render_report

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    pass


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("housebuilder").setLevel(level)


def demo_cmd(args: argparse.Namespace) -> int:
    try:
        plan = parse_plan(args.plan) if args.plan else DEFAULT_PLAN
        # CLI override
        if args.builder:
            plan = replace(plan, builder=args.builder)
        results = run_plan(plan)
        report = render_report(results, template_path=args.template)
    except (PlanError, RenderError, DirectorError, UnknownBuilderError) as e:
        raise CLIError(str(e)) from e

    print(report, end="")
    return 0


def build_cmd(args: argparse.Namespace) -> int:
    try:
        builder = make_builder(args.builder)
        director = Director()
        director.set_builder(builder)
        director.build(args.recipe)
    except (DirectorError, UnknownBuilderError) as e:
        raise CLIError(str(e)) from e

    print(builder.take_product().render())
    return 0


def list_cmd(args: argparse.Namespace) -> int:
    print("Builders:")
    for name, cls in sorted(BUILDERS.items()):
        print(f"  {name}: {cls.__name__}")
    print("Recipes:")
    for name, steps in RECIPES.items():
        print(f"  {name}: {', '.join(steps)}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="housebuilder", description="Builder pattern demo - assemble houses step by step")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    sub = p.add_subparsers(dest="command", required=True)

    d = sub.add_parser("demo", help="Run a demo plan and print the report")
    d.add_argument("--plan", default=None, help="Path to a YAML plan (or markdown with YAML frontmatter)")
    d.add_argument("--builder", default=None, help="Builder variant (overrides plan.builder)")
    d.add_argument("--template", default=None, help="Jinja2 template for the report")
    d.set_defaults(func=demo_cmd)

    b = sub.add_parser("build", help="Run one recipe and print the house")
    b.add_argument("recipe", help=f"Recipe name ({', '.join(RECIPES)})")
    b.add_argument("--builder", default="plain", help="Builder variant (default: plain)")
    b.set_defaults(func=build_cmd)

    ls = sub.add_parser("list", help="List builders and recipes")
    ls.set_defaults(func=list_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(bool(args.verbose))
    try:
        return int(args.func(args))
    except CLIError as e:
        logger.debug("command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
