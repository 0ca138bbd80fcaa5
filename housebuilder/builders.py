"""
builders.py

Responsibility: the builder capability set and its concrete variants.

- `HouseBuilder` is a structural protocol: anything with the seven
  `produce_*` steps can be driven by the director.
- `PlainHouseBuilder` and `CastleBuilder` differ only in the label text they
  append; the order and number of parts is decided by whoever calls the steps.
- `take_product()` (required by `HouseProductBuilder`) hands the finished
  house to the caller and leaves the builder holding a fresh, empty one.

Step order is never validated: `produce_roof()` before `produce_walls()` is fine.
"""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from housebuilder.house import House

# Short step names, in the order they are declared on the protocol.
STEPS: tuple[str, ...] = (
    "walls",
    "windows",
    "door",
    "roof",
    "swimming_pool",
    "garage",
    "garden",
)


class UnknownStepError(LookupError):
    pass


class UnknownBuilderError(LookupError):
    pass


@runtime_checkable
class HouseBuilder(Protocol):
    def produce_walls(self) -> None: ...

    def produce_windows(self) -> None: ...

    def produce_door(self) -> None: ...

    def produce_roof(self) -> None: ...

    def produce_swimming_pool(self) -> None: ...

    def produce_garage(self) -> None: ...

    def produce_garden(self) -> None: ...


@runtime_checkable
class HouseProductBuilder(HouseBuilder, Protocol):
    """A `HouseBuilder` that also hands over what it built."""

    def take_product(self) -> House: ...


class _LabelledHouseBuilder:
    """
    Shared plumbing for the concrete builders.

    Subclasses only provide `labels`, a mapping of every step name to the text
    appended for it.
    """

    labels: ClassVar[dict[str, str]]

    def __init__(self) -> None:
        self._house = House()

    def reset(self) -> None:
        """Drop the house in progress (if any) and start an empty one."""
        self._house = House()

    def _add(self, step: str) -> None:
        self._house.append(self.labels[step])

    def produce_walls(self) -> None:
        self._add("walls")

    def produce_windows(self) -> None:
        self._add("windows")

    def produce_door(self) -> None:
        self._add("door")

    def produce_roof(self) -> None:
        self._add("roof")

    def produce_swimming_pool(self) -> None:
        self._add("swimming_pool")

    def produce_garage(self) -> None:
        self._add("garage")

    def produce_garden(self) -> None:
        self._add("garden")

    def take_product(self) -> House:
        """
        Return the house assembled so far and reset.

        The builder is immediately ready for a new assembly; the returned house
        is no longer touched by it.
        """
        result = self._house
        self.reset()
        return result

    def get_product(self) -> House:
        return self.take_product()


class PlainHouseBuilder(_LabelledHouseBuilder):
    labels = {
        "walls": "Walls",
        "windows": "Windows",
        "door": "Door",
        "roof": "Roof",
        "swimming_pool": "Swimming pool",
        "garage": "Garage",
        "garden": "Garden",
    }


class CastleBuilder(_LabelledHouseBuilder):
    labels = {
        **PlainHouseBuilder.labels,
        "walls": "Marble walls",
    }


BUILDERS: dict[str, type[HouseProductBuilder]] = {
    "plain": PlainHouseBuilder,
    "castle": CastleBuilder,
}


def make_builder(name: str) -> HouseProductBuilder:
    try:
        cls = BUILDERS[name]
    except KeyError:
        known = ", ".join(sorted(BUILDERS))
        raise UnknownBuilderError(f"Unknown builder {name!r} (known: {known})") from None
    return cls()


def produce(builder: HouseBuilder, step: str) -> None:
    """Invoke a single step on `builder` by its short name (e.g. "swimming_pool")."""
    if step not in STEPS:
        raise UnknownStepError(f"Unknown step {step!r} (known: {', '.join(STEPS)})")
    getattr(builder, f"produce_{step}")()
