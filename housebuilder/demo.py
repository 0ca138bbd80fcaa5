"""
demo.py

Responsibility: play a `Plan` the way a client of the builder pattern would.

For each run the director drives the bound builder through a recipe, or the
steps are called on the builder directly (the pattern works without a
director too). The finished house is then taken from the builder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from housebuilder.builders import HouseProductBuilder, make_builder, produce
from housebuilder.director import Director
from housebuilder.house import House
from housebuilder.plan_parser import Plan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    title: str
    house: House


def run_plan(plan: Plan, builder: HouseProductBuilder | None = None) -> list[RunResult]:
    """
    Execute every run of `plan` and return the houses in run order.

    `builder` overrides `plan.builder`.
    """
    if builder is None:
        builder = make_builder(plan.builder)
    director = Director()
    director.set_builder(builder)

    results: list[RunResult] = []
    for run in plan.runs:
        if run.recipe is not None:
            director.build(run.recipe)
        else:
            for step in run.steps:
                produce(builder, step)
        house = builder.take_product()
        logger.debug("took %r: %d parts", run.title, len(house))
        results.append(RunResult(title=run.title, house=house))
    return results
