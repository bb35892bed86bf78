"""A lazily created, shared identifier service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class IdService:
    """Hands out increasing integer identifiers starting at 1."""

    counter: int = 0

    def next_id(self) -> int:
        self.counter += 1
        return self.counter


class IdServiceSingleton:
    """Holds one IdService, created on first request."""

    def __init__(self) -> None:
        self._service: IdService | None = None

    def get_service(self) -> IdService:
        if self._service is None:
            logger.info("no id service available, instantiation")
            self._service = IdService()
        return self._service


def _build_car(vehicle_id: int) -> None:
    logger.info("car: %d", vehicle_id)


def _build_motorbike(vehicle_id: int) -> None:
    logger.info("motorbike: %d", vehicle_id)


def main(argv: Sequence[str] | None = None) -> None:
    """Build vehicles that share one identifier sequence."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    singleton = IdServiceSingleton()

    s1 = singleton.get_service()
    _build_car(s1.next_id())
    _build_car(s1.next_id())

    s2 = singleton.get_service()
    _build_motorbike(s2.next_id())
    _build_motorbike(s2.next_id())
    _build_motorbike(s1.next_id())


if __name__ == "__main__":
    main()