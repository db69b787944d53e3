"""Consistency filter: does a candidate world explain what the table shows?"""

from __future__ import annotations

from typing import Iterable, Iterator

from demondeduce.roles import ROLE_REGISTRY

from .model import Seat
from .observations import Card, Request
from .statements import Statement, evaluate
from .world import World


def must_tell_truth(world: World, seat: Seat) -> bool:
    """Reliable seats, and any card showing a compelled role, cannot lie."""
    display = world.displays[seat]
    if display is not None and ROLE_REGISTRY[display].compelled:
        return True
    return world.is_reliable(seat)


def statement_permitted(world: World, seat: Seat, statement: Statement,
                        liars_must_lie: bool = False) -> bool:
    display = world.displays[seat]
    if display is None:
        return False
    if not ROLE_REGISTRY[display].accepts(statement, seat, world.seats):
        return False
    truth = evaluate(statement, world, seat)
    if must_tell_truth(world, seat):
        return truth
    if liars_must_lie:
        return not truth
    return True


def seat_consistent(world: World, seat: Seat, card: Card, liars_must_lie: bool = False) -> bool:
    if card.shown is not None and world.displays[seat] != card.shown:
        return False
    if card.confirmed is not None and world.roles[seat] != card.confirmed:
        return False
    if card.says is None:
        return True
    return statement_permitted(world, seat, card.says, liars_must_lie)


def check_world(world: World, request: Request, liars_must_lie: bool = False) -> bool:
    """Every seat must agree with its observation; stops at the first miss."""
    return all(
        seat_consistent(world, seat, card, liars_must_lie)
        for seat, card in enumerate(request.cards)
    )


def apply_constraints(worlds: Iterable[World], request: Request,
                      liars_must_lie: bool = False) -> Iterator[World]:
    """Filter a world stream down to the consistent worlds."""
    for w in worlds:
        if check_world(w, request, liars_must_lie):
            yield w
