"""Equipment wrappers that adjust a soldier's attack and defence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Soldier(Protocol):
    """Anything with attack and defence ratings."""

    def attack(self) -> int: ...

    def defence(self) -> int: ...


@dataclass(frozen=True)
class SoldierWithSword:
    """Adds 10 attack to the wrapped soldier."""

    soldier: Soldier

    def attack(self) -> int:
        return self.soldier.attack() + 10

    def defence(self) -> int:
        return self.soldier.defence()


@dataclass(frozen=True)
class SoldierWithShield:
    """Trades 6 attack for 20 defence on the wrapped soldier."""

    soldier: Soldier

    def attack(self) -> int:
        return self.soldier.attack() - 6

    def defence(self) -> int:
        return self.soldier.defence() + 20