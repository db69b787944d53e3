from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Hashable, Optional, Tuple

from demondeduce.roles import ROLE_REGISTRY

from .model import Alignment, Assignment, Seat, Status


@dataclass(frozen=True)
class World:
    """One fully resolved hypothesis, never mutated after construction.

    ``roles`` are the secret roles per seat. ``displays`` is what each seat
    shows (``None`` while face down). ``statuses`` are the impairments left by
    every resolved ability and ``choices`` records which branch each ability
    took (a target seat, a copied or believed role, or ``None``).
    """
    roles: Tuple[str, ...]
    displays: Tuple[Optional[str], ...]
    statuses: Tuple[FrozenSet[Status], ...]
    choices: Tuple[Hashable, ...]
    _evil: Tuple[bool, ...] = field(init=False, repr=False, compare=False)
    _reliable: Tuple[bool, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        evil = tuple(ROLE_REGISTRY[r].registers_evil() for r in self.roles)
        reliable = tuple(
            ROLE_REGISTRY[r].alignment is Alignment.GOOD and not self.statuses[i]
            for i, r in enumerate(self.roles)
        )
        object.__setattr__(self, "_evil", evil)
        object.__setattr__(self, "_reliable", reliable)

    @property
    def seats(self) -> int:
        return len(self.roles)

    def registers_evil(self, seat: Seat) -> bool:
        return self._evil[seat]

    def is_reliable(self, seat: Seat) -> bool:
        """Good and unimpaired: this seat's statements must be true."""
        return self._reliable[seat]

    def seat(self, seat: Seat) -> Assignment:
        role = ROLE_REGISTRY[self.roles[seat]]
        return Assignment(role.name, role.alignment, self.statuses[seat], self.displays[seat])
