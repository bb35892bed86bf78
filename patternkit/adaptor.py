"""Temperature providers and an adaptor from Fahrenheit to Celsius."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NewType, Protocol

logger = logging.getLogger(__name__)

Celsius = NewType("Celsius", int)
Fahrenheit = NewType("Fahrenheit", int)


class CelsiusProvider(Protocol):
    """Supplies a temperature in degrees Celsius."""

    def celsius(self) -> Celsius: ...


class FahrenheitSource(Protocol):
    """Supplies a temperature in degrees Fahrenheit."""

    def fahrenheit(self) -> Fahrenheit: ...


class StaticProvider:
    """Always reports 25 degrees Celsius."""

    def celsius(self) -> Celsius:
        return Celsius(25)


@dataclass
class RandomFahrenheitProvider:
    """Reports a random whole Fahrenheit reading in [0, 170)."""

    rng: random.Random = field(default_factory=random.Random)

    def fahrenheit(self) -> Fahrenheit:
        return Fahrenheit(self.rng.randrange(170))


@dataclass
class RandomAdaptor:
    """Presents a Fahrenheit source as a Celsius provider."""

    source: FahrenheitSource

    def celsius(self) -> Celsius:
        f = self.source.fahrenheit()
        logger.debug("DEBUGGING: temperature in Fahrenheit: %d", f)
        return Celsius(int((f - 32) / 1.8))


class CelsiusDisplayer:
    """Shows temperatures from any Celsius provider."""

    def display(self, provider: CelsiusProvider) -> str:
        message = f"temperature in celsius: {provider.celsius()}"
        logger.info("%s", message)
        return message


def main(argv: Sequence[str] | None = None) -> None:
    """Display a static and an adapted random temperature."""
    logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    displayer = CelsiusDisplayer()
    static_provider = StaticProvider()
    random_provider = RandomFahrenheitProvider()
    random_adaptor = RandomAdaptor(random_provider)

    logger.info("%d", random_provider.fahrenheit())

    displayer.display(static_provider)
    displayer.display(random_adaptor)


if __name__ == "__main__":
    main()