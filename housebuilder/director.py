"""
director.py

Responsibility: run fixed step sequences ("recipes") against a bound builder.

The director owns nothing: the builder is borrowed from the client and the
product stays inside the builder until the client takes it.
"""

from __future__ import annotations

import logging

from housebuilder.builders import HouseBuilder, produce

logger = logging.getLogger(__name__)

RECIPES: dict[str, tuple[str, ...]] = {
    "basic": ("walls", "windows", "door", "roof"),
    "full": ("walls", "windows", "door", "roof", "garage", "swimming_pool", "garden"),
}


class DirectorError(RuntimeError):
    pass


class UnboundBuilderError(DirectorError):
    pass


class UnknownRecipeError(DirectorError):
    pass


class Director:
    def __init__(self) -> None:
        self._builder: HouseBuilder | None = None

    @property
    def is_bound(self) -> bool:
        return self._builder is not None

    @property
    def builder(self) -> HouseBuilder:
        if self._builder is None:
            raise UnboundBuilderError("No builder bound; call set_builder() first.")
        return self._builder

    def set_builder(self, builder: HouseBuilder) -> None:
        """Bind `builder`, replacing any previous one (its house is left as is)."""
        logger.debug("binding builder %s", type(builder).__name__)
        self._builder = builder

    def build(self, recipe: str) -> None:
        try:
            steps = RECIPES[recipe]
        except KeyError:
            known = ", ".join(RECIPES)
            raise UnknownRecipeError(f"Unknown recipe {recipe!r} (known: {known})") from None

        # Resolve before the first step so an unbound director never half-builds.
        builder = self.builder
        logger.debug("running recipe %s on %s", recipe, type(builder).__name__)
        for step in steps:
            produce(builder, step)

    def build_basic(self) -> None:
        self.build("basic")

    def build_full(self) -> None:
        self.build("full")
