from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterator, Mapping, Optional


class Category(str, Enum):
    """Card type; fixes count constraints and display grouping."""
    VILLAGER = "villager"
    OUTCAST = "outcast"
    MINION = "minion"
    DEMON = "demon"


class Alignment(str, Enum):
    """Team of a role. Evil roles lie and disguise."""
    GOOD = "good"
    EVIL = "evil"


class Status(str, Enum):
    """Impairments a seat can carry in a resolved world."""
    CORRUPTED = "corrupted"
    POISONED = "poisoned"
    DRUNK = "drunk"


def default_alignment(category: Category) -> Alignment:
    if category in (Category.MINION, Category.DEMON):
        return Alignment.EVIL
    return Alignment.GOOD


@dataclass(frozen=True)
class Counts:
    """How many roles of each category are in play."""
    villagers: int = 0
    outcasts: int = 0
    minions: int = 0
    demons: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, int]) -> "Counts":
        return cls(
            villagers=int(data.get("villagers", 0)),
            outcasts=int(data.get("outcasts", 0)),
            minions=int(data.get("minions", 0)),
            demons=int(data.get("demons", 0)),
        )

    def of(self, category: Category) -> int:
        return {
            Category.VILLAGER: self.villagers,
            Category.OUTCAST: self.outcasts,
            Category.MINION: self.minions,
            Category.DEMON: self.demons,
        }[category]

    def items(self) -> Iterator[tuple[Category, int]]:
        for category in Category:
            yield category, self.of(category)

    @property
    def total(self) -> int:
        return self.villagers + self.outcasts + self.minions + self.demons


Seat = int


@dataclass(frozen=True)
class Assignment:
    """A concrete role/alignment/status bundle for a seat."""
    role: str
    alignment: Alignment
    statuses: FrozenSet[Status] = field(default_factory=frozenset)
    display: Optional[str] = None
