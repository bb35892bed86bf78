"""A publisher that broadcasts messages to subscribers keyed by identifier."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Listener(Protocol):
    """Something with an identifier that reacts to messages."""

    sub_id: str

    def react(self, msg: str) -> Any: ...


class Publisher:
    """Keeps subscribers by identifier and sends each of them every message."""

    def __init__(self) -> None:
        self.subscribers: dict[str, Listener] = {}

    def add_subscriber(self, subscriber: Listener) -> None:
        """Add a subscriber, replacing any with the same identifier."""
        self.subscribers[subscriber.sub_id] = subscriber

    def remove_subscriber(self, sub_id: str) -> None:
        """Remove a subscriber; unknown identifiers are ignored."""
        self.subscribers.pop(sub_id, None)

    def broadcast(self, msg: str) -> list[Any]:
        """Deliver a message to every subscriber and collect their reactions."""
        return [subscriber.react(msg) for subscriber in list(self.subscribers.values())]


@dataclass(frozen=True)
class Subscriber:
    """Logs every message it receives."""

    sub_id: str

    def react(self, msg: str) -> str:
        line = f"ID {self.sub_id} - received: {msg}"
        logger.info("%s", line)
        return line


def _random_id() -> str:
    return str(random.randrange(2**63))


@dataclass(frozen=True)
class AutoIdSubscriber:
    """A subscriber whose identifier is generated at random."""

    sub_id: str = field(default_factory=_random_id)

    def react(self, msg: str) -> str:
        line = f"ID {self.sub_id} - auto generatedId sub received: {msg}"
        logger.info("%s", line)
        return line


def main(argv: Sequence[str] | None = None) -> None:
    """Broadcast a few messages while subscribers come and go."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    publisher = Publisher()
    publisher.broadcast("hello")

    s = Subscriber("321")
    s2 = Subscriber("456")
    publisher.add_subscriber(s)
    publisher.add_subscriber(s2)
    publisher.broadcast("hello again")

    publisher.remove_subscriber(s.sub_id)
    publisher.broadcast("good afternoon")

    publisher.add_subscriber(AutoIdSubscriber())
    publisher.broadcast("bye")


if __name__ == "__main__":
    main()