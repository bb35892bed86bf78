"""Volume calculation decoupled from the shape that supplies its measures."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class Solid(Protocol):
    """Anything that can report a base measure and a height."""

    def perimeter(self) -> float: ...

    def height(self) -> float: ...


@dataclass(frozen=True)
class TriangularObject:
    """A prism with a triangular base."""

    apex_height: float
    base: float
    length: float

    def perimeter(self) -> float:
        return self.apex_height * self.base / 2

    def height(self) -> float:
        return self.length


@dataclass(frozen=True)
class RectangularObject:
    """A box with sides x, y and height z."""

    x: float
    y: float
    z: float

    def perimeter(self) -> float:
        return self.x * self.y

    def height(self) -> float:
        return self.z


@dataclass(frozen=True)
class VolumeCalculator:
    """Combines the measures of any solid into a volume figure."""

    solid: Solid

    def volume(self) -> float:
        return self.solid.perimeter() + self.solid.height()


def main(argv: Sequence[str] | None = None) -> None:
    """Compute and log the volume of a sample solid."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    triangle = TriangularObject(apex_height=1, base=2, length=3)
    rectangle = RectangularObject(x=23, y=4, z=1)

    x = 4
    solid: Solid = triangle if x > 5 else rectangle

    volume = VolumeCalculator(solid).volume()
    logger.info("%g", volume)


if __name__ == "__main__":
    main()