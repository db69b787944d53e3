"""Aggregation of surviving worlds into a result."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple

from demondeduce.roles import ROLE_REGISTRY

from .config import Distinct
from .model import Assignment, Category, Seat
from .world import World

CATEGORY_ORDER = {c: i for i, c in enumerate(Category)}


class SearchStatus(str, Enum):
    PENDING = "pending"
    SOLVED = "solved"
    CONTRADICTORY = "contradictory"
    INCOMPLETE = "incomplete"


@dataclass
class Result:
    """Everything the search kept.

    ``assignments`` maps each distinct secret-role assignment to the number
    of kept worlds supporting it. ``possible`` holds, per seat, every role
    that occurs in at least one kept world.
    """
    seats: int
    distinct: Distinct = Distinct.ASSIGNMENTS
    worlds_kept: int = 0
    worlds_explored: int = 0
    assignments: Dict[Tuple[str, ...], int] = field(default_factory=dict)
    possible: List[Set[str]] = field(default_factory=list)
    worlds: List[World] = field(default_factory=list)
    caveats: List[str] = field(default_factory=list)
    exhaustive: bool = True
    status: SearchStatus = SearchStatus.PENDING

    def __post_init__(self):
        if not self.possible:
            self.possible = [set() for _ in range(self.seats)]

    @property
    def assignment_count(self) -> int:
        return len(self.assignments)

    @property
    def solution_count(self) -> int:
        if self.distinct is Distinct.WORLDS:
            return self.worlds_kept
        return self.assignment_count

    def possible_roles(self, seat: Seat) -> List[Tuple[str, Category]]:
        """Roles still possible at ``seat``, tagged and grouped by category."""
        tagged = [(name, ROLE_REGISTRY[name].category) for name in self.possible[seat]]
        return sorted(tagged, key=lambda t: (CATEGORY_ORDER[t[1]], t[0]))

    def merge(self, other: "Result") -> "Result":
        """Combine two partial results. Associative and commutative."""
        if self.seats != other.seats:
            raise ValueError("cannot merge results for different tables")
        assignments = dict(self.assignments)
        for roles, n in other.assignments.items():
            assignments[roles] = assignments.get(roles, 0) + n
        return Result(
            seats=self.seats,
            distinct=self.distinct,
            worlds_kept=self.worlds_kept + other.worlds_kept,
            worlds_explored=self.worlds_explored + other.worlds_explored,
            assignments=assignments,
            possible=[a | b for a, b in zip(self.possible, other.possible)],
            worlds=self.worlds + other.worlds,
            caveats=self.caveats + [c for c in other.caveats if c not in self.caveats],
            exhaustive=self.exhaustive and other.exhaustive,
        )

    def finish(self, exhaustive: bool = True) -> "Result":
        self.exhaustive = self.exhaustive and exhaustive
        if not self.exhaustive:
            self.status = SearchStatus.INCOMPLETE
        elif self.worlds_kept == 0:
            self.status = SearchStatus.CONTRADICTORY
        else:
            self.status = SearchStatus.SOLVED
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "status": self.status.value,
            "exhaustive": self.exhaustive,
            "solutions": self.solution_count,
            "worlds_kept": self.worlds_kept,
            "worlds_explored": self.worlds_explored,
            "assignments": [
                {"roles": list(roles), "worlds": n}
                for roles, n in sorted(self.assignments.items())
            ],
            "possible": {
                str(seat): [
                    {"role": name, "category": category.value}
                    for name, category in self.possible_roles(seat)
                ]
                for seat in range(self.seats)
            },
            "caveats": list(self.caveats),
        }
        if self.worlds:
            data["worlds"] = [
                [_seat_dict(world.seat(seat)) for seat in range(world.seats)]
                for world in self.worlds
            ]
        return data


def _seat_dict(assignment: Assignment) -> Dict[str, Any]:
    return {
        "role": assignment.role,
        "alignment": assignment.alignment.value,
        "statuses": sorted(s.value for s in assignment.statuses),
        "shown": assignment.display,
    }


class Aggregator:
    """Accumulates kept worlds for one slice of the search."""

    def __init__(self, seats: int, distinct: Distinct = Distinct.ASSIGNMENTS,
                 keep_worlds: bool = False):
        self.keep_worlds = keep_worlds
        self._result = Result(seats=seats, distinct=distinct)

    def add(self, world: World) -> None:
        result = self._result
        result.worlds_kept += 1
        result.assignments[world.roles] = result.assignments.get(world.roles, 0) + 1
        for seat, role in enumerate(world.roles):
            result.possible[seat].add(role)
        if self.keep_worlds:
            result.worlds.append(world)

    def explored(self, count: int) -> None:
        self._result.worlds_explored += count

    def interrupted(self) -> None:
        self._result.exhaustive = False

    @property
    def worlds_kept(self) -> int:
        return self._result.worlds_kept

    def result(self, caveats: Optional[List[str]] = None) -> Result:
        if caveats:
            self._result.caveats.extend(caveats)
        return self._result
