"""
house.py

Responsibility: the product assembled by the builders.

A `House` is nothing more than an ordered list of part labels. Builders own a
house while they assemble it and hand it over through `take_product()`.
"""

from __future__ import annotations

from collections.abc import Iterator


class House:
    """Ordered, append-only list of part labels."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    @property
    def parts(self) -> tuple[str, ...]:
        return tuple(self._parts)

    def append(self, label: str) -> None:
        self._parts.append(label)

    def render(self) -> str:
        return f"House parts: {', '.join(self._parts)}"

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, House):
            return NotImplemented
        return self._parts == other._parts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"House(parts={self._parts!r})"
