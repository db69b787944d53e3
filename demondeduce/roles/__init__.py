"""Role registry and base classes."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Optional, Type

from demondeduce.core.errors import UnsupportedRoleError
from demondeduce.core.model import Alignment, Category, Seat, Status, default_alignment
from demondeduce.core.statements import Statement

from .abilities import Ability, NoAbility, StatementOnly


class Role:
    """Base role adapter.

    A role is data: its category, alignment and ability descriptor. The only
    behaviour a role owns is ``statement_shape``, which says whether a
    statement of the right kind has the form this role produces from a given
    seat.
    """
    name: str = "role"
    category: Category = Category.VILLAGER
    alignment: Optional[Alignment] = None
    ability: Ability = NoAbility()
    # Statements from a card showing this role must be true, whoever holds it.
    compelled: bool = False
    registers_as_evil: Optional[bool] = None
    self_status: Optional[Status] = None
    supported: bool = True

    @classmethod
    def is_evil(cls) -> bool:
        return cls.alignment is Alignment.EVIL

    @classmethod
    def registers_evil(cls) -> bool:
        if cls.registers_as_evil is not None:
            return cls.registers_as_evil
        return cls.is_evil()

    @classmethod
    def claim(cls) -> Optional[type]:
        if isinstance(cls.ability, StatementOnly):
            return cls.ability.claim
        return None

    @classmethod
    def accepts(cls, statement: Statement, seat: Seat, seats: int) -> bool:
        """Whether a card showing this role at ``seat`` could say ``statement``."""
        claim = cls.claim()
        if claim is None or not isinstance(statement, claim):
            return False
        return cls.statement_shape(statement, seat, seats)

    @staticmethod
    def statement_shape(statement, seat, seats):
        return True


ROLE_REGISTRY: Dict[str, Type[Role]] = {}


def register_role(cls: Type[Role]) -> Type[Role]:
    if cls.alignment is None:
        cls.alignment = default_alignment(cls.category)
    ROLE_REGISTRY[cls.name] = cls
    return cls


def normalize(name: str) -> str:
    return " ".join(name.strip().lower().replace("_", " ").split())


def get_role(name: str) -> Type[Role]:
    try:
        return ROLE_REGISTRY[normalize(name)]
    except KeyError:
        raise UnsupportedRoleError(name) from None


def is_known(name: str) -> bool:
    return normalize(name) in ROLE_REGISTRY


def category_of(name: str) -> Category:
    return get_role(name).category


def category_counts(deck: Iterable[str]) -> Counter:
    return Counter(get_role(name).category for name in deck)


def villagers_in(deck: Iterable[str]) -> list[str]:
    """Distinct Villager role names of ``deck``, in deck order."""
    seen: list[str] = []
    for name in deck:
        if get_role(name).category is Category.VILLAGER and name not in seen:
            seen.append(name)
    return seen


from . import (  # noqa: E402,F401  registers every role
    alchemist,
    architect,
    baa,
    baker,
    bard,
    bombardier,
    confessor,
    doppelganger,
    dreamer,
    drunk,
    empress,
    enlightened,
    fortune_teller,
    gemcrafter,
    hunter,
    jester,
    judge,
    knight,
    lover,
    medium,
    minion,
    poisoner,
    pooka,
    scout,
    slayer,
    twin_minion,
    witch,
    wretch,
)
