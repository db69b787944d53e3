"""Statement model and evaluation.

Statements are frozen data. ``evaluate`` computes the truth value of a
statement made from ``seat`` under a concrete world; it never mutates the
world. Seat distances wrap around the table and clockwise means increasing
seat index.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from .errors import UnsupportedStatementError
from .model import Alignment, Seat

if TYPE_CHECKING:  # pragma: no cover
    from .world import World


class Direction(str, Enum):
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"
    EQUIDISTANT = "equidistant"


class SelfStatus(str, Enum):
    GOOD = "good"
    DIZZY = "dizzy"


class Verdict(str, Enum):
    GOOD = "good"
    EVIL = "evil"
    TRUTHY = "truthy"
    LYING = "lying"


@dataclass(frozen=True)
class Statement:
    """Base class for every parsed claim."""

    def seats(self) -> Tuple[Seat, ...]:
        """Seats this statement refers to."""
        return ()


@dataclass(frozen=True)
class DirectionalClaim(Statement):
    """Closest evil is clockwise, counterclockwise or equidistant."""
    direction: Direction
    seeks: Alignment = Alignment.EVIL


@dataclass(frozen=True)
class SelfStatusClaim(Statement):
    """I am good / I am dizzy."""
    status: SelfStatus


@dataclass(frozen=True)
class TargetedBinaryClaim(Statement):
    """#target is good/evil, or #target is truthy/lying."""
    target: Seat
    verdict: Verdict

    def seats(self) -> Tuple[Seat, ...]:
        return (self.target,)


@dataclass(frozen=True)
class CountClaim(Statement):
    """``count`` of these seats are evil.

    ``minimum`` makes ``count`` a lower bound. ``none_closer`` adds that no
    seat nearer to the claimant than the nearest target is evil.
    """
    targets: Tuple[Seat, ...]
    count: int
    minimum: bool = False
    none_closer: bool = False

    def __post_init__(self):
        object.__setattr__(self, "targets", tuple(sorted(set(self.targets))))

    def seats(self) -> Tuple[Seat, ...]:
        return self.targets


@dataclass(frozen=True)
class RoleIdentityClaim(Statement):
    """#target is a real ``role``."""
    target: Seat
    role: str

    def seats(self) -> Tuple[Seat, ...]:
        return (self.target,)


@dataclass(frozen=True)
class RoleDistanceClaim(Statement):
    """The ``role`` is ``distance`` cards away from the closest evil."""
    role: str
    distance: int


@dataclass(frozen=True)
class CorruptionDistanceClaim(Statement):
    """I am ``distance`` cards from the closest impaired seat, or none is."""
    distance: Optional[int]


@dataclass(frozen=True)
class UnparsedClaim(Statement):
    """Claim text nothing could interpret. It has no evaluation rule."""
    text: str


EVALUATED = (
    DirectionalClaim,
    SelfStatusClaim,
    TargetedBinaryClaim,
    CountClaim,
    RoleIdentityClaim,
    RoleDistanceClaim,
    CorruptionDistanceClaim,
)


def is_supported(statement: Statement) -> bool:
    return type(statement) in EVALUATED


def seat_distance(a: Seat, b: Seat, seats: int) -> int:
    d = abs(a - b) % seats
    return min(d, seats - d)


def neighbors(seat: Seat, seats: int) -> Tuple[Seat, Seat]:
    """Counterclockwise and clockwise neighbours of ``seat``."""
    return (seat - 1) % seats, (seat + 1) % seats


def nearest_direction(world: "World", seat: Seat, seeks: Alignment) -> Optional[Direction]:
    cw = None
    ccw = None
    for other in range(world.seats):
        if other == seat:
            continue
        evil = world.registers_evil(other)
        if evil != (seeks is Alignment.EVIL):
            continue
        diff = (other - seat) % world.seats
        if cw is None or diff < cw:
            cw = diff
        diff = (seat - other) % world.seats
        if ccw is None or diff < ccw:
            ccw = diff
    if cw is None:
        return None
    if cw < ccw:
        return Direction.CLOCKWISE
    if ccw < cw:
        return Direction.COUNTERCLOCKWISE
    return Direction.EQUIDISTANT


def distance_to_impaired(world: "World", seat: Seat) -> Optional[int]:
    dists = [
        seat_distance(seat, other, world.seats)
        for other in range(world.seats)
        if other != seat and world.statuses[other]
    ]
    return min(dists) if dists else None


def distance_to_evil(world: "World", seat: Seat) -> Optional[int]:
    dists = [
        seat_distance(seat, other, world.seats)
        for other in range(world.seats)
        if other != seat and world.registers_evil(other)
    ]
    return min(dists) if dists else None


def evaluate(statement: Statement, world: "World", seat: Seat) -> bool:
    """Truth value of ``statement``, made from ``seat``, under ``world``."""
    if isinstance(statement, DirectionalClaim):
        return nearest_direction(world, seat, statement.seeks) is statement.direction

    if isinstance(statement, SelfStatusClaim):
        reliable = world.is_reliable(seat)
        return reliable if statement.status is SelfStatus.GOOD else not reliable

    if isinstance(statement, TargetedBinaryClaim):
        target = statement.target
        if statement.verdict is Verdict.GOOD:
            return not world.registers_evil(target)
        if statement.verdict is Verdict.EVIL:
            return world.registers_evil(target)
        if statement.verdict is Verdict.TRUTHY:
            return world.is_reliable(target)
        return not world.is_reliable(target)

    if isinstance(statement, CountClaim):
        evil = sum(1 for t in statement.targets if world.registers_evil(t))
        ok = evil >= statement.count if statement.minimum else evil == statement.count
        if ok and statement.none_closer and statement.targets:
            reach = min(seat_distance(seat, t, world.seats) for t in statement.targets)
            ok = not any(
                world.registers_evil(other)
                for other in range(world.seats)
                if other != seat and seat_distance(seat, other, world.seats) < reach
            )
        return ok

    if isinstance(statement, RoleIdentityClaim):
        return world.roles[statement.target] == statement.role

    if isinstance(statement, RoleDistanceClaim):
        dists = [
            d
            for holder, role in enumerate(world.roles)
            if role == statement.role
            for d in (distance_to_evil(world, holder),)
            if d is not None
        ]
        return bool(dists) and min(dists) == statement.distance

    if isinstance(statement, CorruptionDistanceClaim):
        return distance_to_impaired(world, seat) == statement.distance

    raise UnsupportedStatementError(f"no evaluation rule for {type(statement).__name__}")
