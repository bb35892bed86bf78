"""A chain of number handlers, each passing its result to the next."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class Handler(ABC):
    """A link in the chain; subclasses decide how a number is processed."""

    def __init__(self) -> None:
        self.next_handler: Handler | None = None

    def set_next(self, handler: Handler) -> Handler:
        """Attach the following link and return it, so calls can be chained."""
        self.next_handler = handler
        return handler

    @abstractmethod
    def process(self, number: int) -> int:
        """Transform a single number."""

    def handle(self, number: int) -> int:
        """Process the number, log it, and pass it down the chain."""
        result = self.process(number)
        logger.info("%d", result)
        if self.next_handler is not None:
            return self.next_handler.handle(result)
        return result


class MultiplyHandler(Handler):
    """Doubles the number."""

    def process(self, number: int) -> int:
        return number * 2


class AdditionHandler(Handler):
    """Adds ten to the number."""

    def process(self, number: int) -> int:
        return number + 10


def main(argv: Sequence[str] | None = None) -> None:
    """Run a sample value through multiply, multiply, add."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    first = MultiplyHandler()
    first.set_next(MultiplyHandler()).set_next(AdditionHandler())
    first.handle(2)


if __name__ == "__main__":
    main()