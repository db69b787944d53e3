"""Per-seat observations and request validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from demondeduce.roles import category_counts, get_role, is_known, normalize

from .errors import ConfigurationError, UnsupportedRoleError, UnsupportedStatementError
from .model import Counts
from .statements import RoleDistanceClaim, RoleIdentityClaim, Statement, is_supported

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Card:
    """What the table shows for one seat. Constraints, not truth."""
    shown: Optional[str] = None
    confirmed: Optional[str] = None
    says: Optional[Statement] = None


@dataclass(frozen=True)
class Request:
    deck: Tuple[str, ...]
    counts: Counts
    cards: Tuple[Card, ...]

    @property
    def seats(self) -> int:
        return len(self.cards)


def _check_role(name: Optional[str], where: str, strict: bool, caveats: List[str]) -> Optional[str]:
    if name is None:
        return None
    if is_known(name):
        return normalize(name)
    if strict:
        raise UnsupportedRoleError(name)
    caveats.append(f"{where}: unknown role {name!r} ignored")
    return None


def _check_statement(
    index: int, card: Card, shown: Optional[str], seats: int, strict: bool, caveats: List[str]
) -> Optional[Statement]:
    says = card.says
    if says is None:
        return None
    if card.shown is None:
        raise ConfigurationError(f"position {index}: statement given for a face-down card")
    bad = [s for s in says.seats() if not 0 <= s < seats]
    if bad:
        raise ConfigurationError(f"position {index}: statement names seat(s) {bad} outside the table")
    where = f"position {index}"
    if not is_supported(says):
        if strict:
            raise UnsupportedStatementError(f"{where}: no evaluation rule for {says!r}")
        caveats.append(f"{where}: statement {says!r} cannot be checked")
        return None
    if isinstance(says, (RoleIdentityClaim, RoleDistanceClaim)) and not is_known(says.role):
        if strict:
            raise UnsupportedRoleError(says.role)
        caveats.append(f"{where}: statement names unknown role {says.role!r}; not checked")
        return None
    if shown is None:
        caveats.append(f"{where}: statement not checked, shown role unknown")
        return None
    role = get_role(shown)
    if not role.supported:
        if strict:
            raise UnsupportedRoleError(shown, reason="no statement rule for role")
        caveats.append(f"{where}: {shown} statements are not implemented; not checked")
        return None
    if isinstance(says, (RoleIdentityClaim, RoleDistanceClaim)):
        says = replace(says, role=normalize(says.role))
    return says


def validate_request(
    deck: Iterable[str],
    counts: Counts,
    cards: Sequence[Card],
    strict: bool = False,
) -> Tuple[Request, List[str]]:
    """Check a request before any search and normalize its role names.

    Raises ``ConfigurationError`` for requests that cannot be searched.
    Unsupported observations are dropped with a caveat, or raise when
    ``strict``.
    """
    names = []
    for name in deck:
        if not is_known(name):
            raise ConfigurationError(f"deck role {name!r} is not in the catalog")
        names.append(normalize(name))

    if any(n < 0 for _, n in counts.items()):
        raise ConfigurationError(f"negative category count in {counts}")
    if counts.total != len(cards):
        raise ConfigurationError(
            f"category counts sum to {counts.total} but {len(cards)} positions were observed"
        )
    available = category_counts(names)
    for category, needed in counts.items():
        if available[category] < needed:
            raise ConfigurationError(
                f"deck has {available[category]} {category.value} role(s), {needed} requested"
            )

    caveats: List[str] = []
    checked = []
    for i, card in enumerate(cards):
        shown = _check_role(card.shown, f"position {i} shown", strict, caveats)
        confirmed = _check_role(card.confirmed, f"position {i} confirmed", strict, caveats)
        says = _check_statement(i, card, shown, len(cards), strict, caveats)
        checked.append(Card(shown=shown, confirmed=confirmed, says=says))

    for caveat in caveats:
        logger.warning(caveat)
    return Request(tuple(names), counts, tuple(checked)), caveats
