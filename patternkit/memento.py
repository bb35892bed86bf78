"""Snapshots of a character's state that can be taken and restored."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", covariant=True)


class Memento(Protocol, Generic[T]):
    """A stored snapshot that can hand back its state."""

    def restore(self) -> T: ...


@dataclass
class Human:
    """A character with life points."""

    life_points: int = 100

    def display(self) -> str:
        message = f"life points: {self.life_points}"
        logger.info("%s", message)
        return message

    def damage(self, damage_points: int) -> None:
        self.life_points -= damage_points


@dataclass(frozen=True)
class HumanMemento:
    """A snapshot of a Human."""

    human: Human

    def restore(self) -> Human:
        return replace(self.human)


class HumanOriginator:
    """Owns a copy of a Human and saves or restores its snapshots."""

    def __init__(self, human: Human) -> None:
        self.human = replace(human)

    def save(self) -> HumanMemento:
        return HumanMemento(replace(self.human))

    def restore(self, memento: Memento[Human]) -> None:
        self.human = memento.restore()


def main(argv: Sequence[str] | None = None) -> None:
    """Save a human's state, then damage the original."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logger.info("\n")
    h = Human()
    h.display()

    originator = HumanOriginator(h)
    originator.save()

    h.damage(25)
    h.display()


if __name__ == "__main__":
    main()