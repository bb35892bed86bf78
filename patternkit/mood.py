"""A person whose thoughts depend on their current mood."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class Mood(Protocol):
    """A state of mind that produces a thought."""

    def think(self) -> str: ...


class Happy:
    def think(self) -> str:
        return "Everything is great! I'm feeling positive and optimistic."


class Sad:
    def think(self) -> str:
        return "I'm feeling down. Everything seems gloomy and hard."


class Angry:
    def think(self) -> str:
        return "I'm frustrated and angry. Everything is annoying me right now."


@dataclass
class Person:
    """Thinks according to whichever mood is set."""

    state: Mood

    def think(self) -> str:
        return self.state.think()


def main(argv: Sequence[str] | None = None) -> None:
    """Log a person's thoughts through three moods."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    person = Person(Happy())
    logger.info("%s", person.think())

    person.state = Sad()
    logger.info("%s", person.think())

    person.state = Angry()
    logger.info("%s", person.think())


if __name__ == "__main__":
    main()