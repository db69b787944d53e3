"""Ability descriptors attached to roles.

Descriptors are plain data. The world generator and the consistency filter
match on their type; nothing here knows how to resolve itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Union

from demondeduce.core.model import Category, Status


class Reach(str, Enum):
    """Which seats an ability can touch, relative to its holder."""
    NEIGHBORS = "neighbors"
    ANYWHERE = "anywhere"


class Pool(str, Enum):
    """Where a self-random ability draws its outcome from."""
    VILLAGERS_IN_DECK = "villagers in deck"
    VILLAGERS_NOT_IN_PLAY = "villagers not in play"


VILLAGERS: FrozenSet[Category] = frozenset({Category.VILLAGER})


@dataclass(frozen=True)
class NoAbility:
    pass


@dataclass(frozen=True)
class PassiveInfo:
    """Deterministic effect on every eligible seat in reach."""
    effect: Status
    reach: Reach = Reach.NEIGHBORS
    categories: FrozenSet[Category] = VILLAGERS


@dataclass(frozen=True)
class SelfRandom:
    """The holder draws one outcome from a fixed pool of deck roles."""
    pool: Pool


@dataclass(frozen=True)
class TargetedRandom:
    """The holder picks one eligible seat in reach.

    With ``copies`` the holder takes on the target's role for display and
    statements instead of applying ``effect`` to it.
    """
    effect: Optional[Status]
    reach: Reach = Reach.NEIGHBORS
    categories: FrozenSet[Category] = VILLAGERS
    copies: bool = False


@dataclass(frozen=True)
class StatementOnly:
    """The holder produces statements of one kind and nothing else."""
    claim: type


Ability = Union[NoAbility, PassiveInfo, SelfRandom, TargetedRandom, StatementOnly]
