"""Immutable person record built up step by step."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Human:
    """A person; each ``with_*`` call returns a changed copy."""

    age: int = 0
    height: int = 0
    eye_color: str = ""

    def with_eye_color(self, color: str) -> Human:
        return replace(self, eye_color=color)

    def with_age(self, age: int) -> Human:
        return replace(self, age=age)

    def with_height(self, height: int) -> Human:
        return replace(self, height=height)

    def reset(self) -> Human:
        """Return a blank human."""
        return Human()


def giant() -> Human:
    """A pre-configured tall, green-eyed human."""
    return Human().with_height(280).with_eye_color("green")


def main(argv: Sequence[str] | None = None) -> None:
    """Build a few humans and log them."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    me = Human().with_eye_color("black").with_age(25).with_height(180).reset()
    you = Human(age=26, height=170, eye_color="blue")
    logger.info("%r", me)
    logger.info("%r", you)

    young_giant = giant().with_age(20)
    old_giant = giant().with_age(90)
    logger.info("%r", young_giant)
    logger.info("%r", old_giant)


if __name__ == "__main__":
    main()