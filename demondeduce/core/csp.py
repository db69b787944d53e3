"""Backtracking world generator.

Assignments are built seat by seat. A partial assignment is abandoned as
soon as a category is full, a confirmed role is contradicted or the seat's
role could never show what the table shows. Each surviving assignment is
then expanded into worlds by taking the cross product of every seat's
ability resolutions. Everything is lazy.
"""

from __future__ import annotations

import itertools
from collections import Counter
from typing import Iterator, List, NamedTuple, Optional, Sequence, Set, Tuple

from demondeduce.roles import ROLE_REGISTRY, villagers_in
from demondeduce.roles.abilities import (
    NoAbility,
    PassiveInfo,
    Pool,
    Reach,
    SelfRandom,
    StatementOnly,
    TargetedRandom,
)

from .model import Seat
from .observations import Request
from .statements import neighbors
from .world import World


class Branch(NamedTuple):
    """One resolution of a seat: what it shows and which choice it made."""
    display: Optional[str]
    choice: object = None


def reach_seats(seat: Seat, reach: Reach, seats: int) -> List[Seat]:
    if reach is Reach.NEIGHBORS:
        return sorted({s for s in neighbors(seat, seats) if s != seat})
    return [s for s in range(seats) if s != seat]


def hides_self(role) -> bool:
    """Drunk and Doppelganger never show their own name."""
    ability = role.ability
    return isinstance(ability, SelfRandom) or (isinstance(ability, TargetedRandom) and ability.copies)


def disguises(role) -> bool:
    """Whether a role may show something other than itself."""
    return role.is_evil() or hides_self(role)


class Faces(NamedTuple):
    """Roles a disguised seat can show, drawn from the deck."""
    villagers: List[str]
    good: List[str]


def deck_faces(deck: Sequence[str]) -> Faces:
    good = [
        name for name in dict.fromkeys(deck)
        if not ROLE_REGISTRY[name].is_evil() and not hides_self(ROLE_REGISTRY[name])
    ]
    return Faces(villagers_in(deck), good)


def can_show(role, shown: Optional[str], faces: Faces) -> bool:
    if shown is None:
        return True
    if shown == role.name:
        return not hides_self(role)
    if role.is_evil():
        return shown in faces.good
    return hides_self(role) and shown in faces.villagers


def _candidates(request: Request, seat: Seat, remaining: Counter, need: Counter,
                faces: Faces) -> List[str]:
    card = request.cards[seat]
    names = [card.confirmed] if card.confirmed else list(dict.fromkeys(request.deck))
    result = []
    for name in names:
        if remaining[name] <= 0:
            continue
        role = ROLE_REGISTRY[name]
        if need[role.category] <= 0:
            continue
        if not can_show(role, card.shown, faces):
            continue
        result.append(name)
    return result


def enumerate_assignments(
    request: Request, prefix: Tuple[str, ...] = (), depth: Optional[int] = None
) -> Iterator[Tuple[str, ...]]:
    """Yield every legal secret-role assignment that starts with ``prefix``.

    With ``depth`` only the first ``depth`` seats are assigned, which is how
    the solver partitions the search space.
    """
    stop = request.seats if depth is None else min(depth, request.seats)
    faces = deck_faces(request.deck)
    remaining = Counter(request.deck)
    need = Counter({category: count for category, count in request.counts.items()})
    assignment: List[str] = []

    for seat, name in enumerate(prefix):
        if name not in _candidates(request, seat, remaining, need, faces):
            return
        remaining[name] -= 1
        need[ROLE_REGISTRY[name].category] -= 1
        assignment.append(name)

    def backtrack(seat: int) -> Iterator[Tuple[str, ...]]:
        if seat == stop:
            yield tuple(assignment)
            return
        for name in _candidates(request, seat, remaining, need, faces):
            category = ROLE_REGISTRY[name].category
            remaining[name] -= 1
            need[category] -= 1
            assignment.append(name)
            yield from backtrack(seat + 1)
            assignment.pop()
            need[category] += 1
            remaining[name] += 1

    yield from backtrack(len(assignment))


def _eligible(roles: Sequence[str], seats: Sequence[Seat], categories) -> List[Seat]:
    return [s for s in seats if ROLE_REGISTRY[roles[s]].category in categories]


def seat_branches(request: Request, roles: Sequence[str], seat: Seat,
                  faces: Faces) -> List[Branch]:
    """Every way the role at ``seat`` can resolve its display and ability."""
    role = ROLE_REGISTRY[roles[seat]]
    shown = request.cards[seat].shown
    ability = role.ability
    n = len(roles)

    if isinstance(ability, TargetedRandom) and ability.copies:
        others = reach_seats(seat, ability.reach, n)
        copyable = list(dict.fromkeys(roles[s] for s in _eligible(roles, others, ability.categories)))
        if not copyable:
            return []
        if shown is None:
            return [Branch(shown)]
        return [Branch(shown, shown)] if shown in copyable else []

    if isinstance(ability, SelfRandom):
        if ability.pool is Pool.VILLAGERS_NOT_IN_PLAY:
            pool = [v for v in faces.villagers if v not in roles]
        else:
            pool = list(faces.villagers)
        if not pool:
            return []
        if shown is None:
            return [Branch(shown)]
        return [Branch(shown, shown)] if shown in pool else []

    if shown is None:
        displays: List[Optional[str]] = [None]
    elif can_show(role, shown, faces):
        displays = [shown]
    else:
        displays = []

    if isinstance(ability, TargetedRandom):
        targets = _eligible(roles, reach_seats(seat, ability.reach, n), ability.categories)
        choices: List[object] = list(targets) or [None]
    elif isinstance(ability, (NoAbility, PassiveInfo, StatementOnly)):
        choices = [None]
    else:  # pragma: no cover - every descriptor is matched above
        raise TypeError(f"unhandled ability {ability!r}")
    return [Branch(d, c) for d in displays for c in choices]


def _fixed_statuses(roles: Sequence[str]) -> List[Set]:
    n = len(roles)
    statuses: List[Set] = [set() for _ in range(n)]
    for seat, name in enumerate(roles):
        role = ROLE_REGISTRY[name]
        if role.self_status is not None:
            statuses[seat].add(role.self_status)
        ability = role.ability
        if isinstance(ability, PassiveInfo):
            for target in _eligible(roles, reach_seats(seat, ability.reach, n), ability.categories):
                statuses[target].add(ability.effect)
    return statuses


def resolve_effects(request: Request, roles: Tuple[str, ...]) -> Iterator[World]:
    """Yield one world per combination of ability resolutions for ``roles``."""
    faces = deck_faces(request.deck)
    per_seat = []
    for seat in range(len(roles)):
        branches = seat_branches(request, roles, seat, faces)
        if not branches:
            return
        per_seat.append(branches)

    fixed = _fixed_statuses(roles)
    for combo in itertools.product(*per_seat):
        statuses = [set(s) for s in fixed]
        for seat, branch in enumerate(combo):
            ability = ROLE_REGISTRY[roles[seat]].ability
            if isinstance(ability, TargetedRandom) and not ability.copies and branch.choice is not None:
                statuses[branch.choice].add(ability.effect)
        yield World(
            roles=roles,
            displays=tuple(b.display for b in combo),
            statuses=tuple(frozenset(s) for s in statuses),
            choices=tuple(b.choice for b in combo),
        )


def enumerate_worlds(request: Request, prefix: Tuple[str, ...] = ()) -> Iterator[World]:
    """Generate every candidate world for the request, lazily."""
    for roles in enumerate_assignments(request, prefix):
        yield from resolve_effects(request, roles)
