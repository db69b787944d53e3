from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from demondeduce.core.config import SolverOptions
from demondeduce.core.errors import ConfigurationError
from demondeduce.core.model import Alignment, Counts
from demondeduce.core.observations import Card, Request, validate_request
from demondeduce.core.statements import (
    CorruptionDistanceClaim,
    CountClaim,
    Direction,
    DirectionalClaim,
    RoleDistanceClaim,
    RoleIdentityClaim,
    SelfStatus,
    SelfStatusClaim,
    Statement,
    TargetedBinaryClaim,
    UnparsedClaim,
    Verdict,
)

UNKNOWN = ("?", "unknown", "unrevealed", "")


@dataclass
class Puzzle:
    deck: List[str]
    counts: Counts
    cards: List[Card] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def seats(self) -> int:
        return len(self.cards)

    def solver_options(self, **overrides: Any) -> SolverOptions:
        return SolverOptions.from_mapping(self.options).merged(**overrides)

    def to_request(self, strict: bool = False) -> Tuple[Request, List[str]]:
        return validate_request(self.deck, self.counts, self.cards, strict=strict)


def _role(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return None if text.lower() in UNKNOWN else text


def _counts(data: Any) -> Counts:
    if isinstance(data, dict):
        return Counts.from_mapping(data)
    if isinstance(data, (list, tuple)) and len(data) == 4:
        return Counts(*(int(n) for n in data))
    raise ConfigurationError(f"counts must be a mapping or [villagers, outcasts, minions, demons], got {data!r}")


def _flag(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ConfigurationError(f"{key} must be true or false, got {value!r}")
    return value


def parse_statement(data: Any) -> Statement | None:
    """Turn a ``says`` entry into a statement.

    Mappings are keyed by ``claim``. Anything else is kept as an
    ``UnparsedClaim`` so the solver can report it.
    """
    if data is None or (isinstance(data, str) and data.strip().lower() in UNKNOWN):
        return None
    if not isinstance(data, dict) or "claim" not in data:
        return UnparsedClaim(str(data))
    kind = str(data["claim"]).lower()
    try:
        if kind == "direction":
            return DirectionalClaim(
                Direction(str(data["direction"]).lower()),
                Alignment(str(data.get("seeks", "evil")).lower()),
            )
        if kind == "self":
            return SelfStatusClaim(SelfStatus(str(data["status"]).lower()))
        if kind == "binary":
            return TargetedBinaryClaim(int(data["target"]), Verdict(str(data["verdict"]).lower()))
        if kind == "count":
            return CountClaim(
                targets=tuple(int(t) for t in data["targets"]),
                count=int(data["count"]),
                minimum=_flag(data, "minimum"),
                none_closer=_flag(data, "none_closer"),
            )
        if kind == "identity":
            return RoleIdentityClaim(int(data["target"]), str(data["role"]))
        if kind == "distance":
            return RoleDistanceClaim(str(data["role"]), int(data["distance"]))
        if kind == "corruption":
            distance = data["distance"]
            if distance is None or str(distance).lower() == "none":
                return CorruptionDistanceClaim(None)
            return CorruptionDistanceClaim(int(distance))
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"malformed {kind} claim {data!r}: {exc}") from exc
    return UnparsedClaim(str(data))


def _card(data: Any) -> Card:
    if data is None or isinstance(data, str):
        return Card(shown=_role(data))
    if not isinstance(data, dict):
        raise ConfigurationError(f"card must be a role name or a mapping, got {data!r}")
    return Card(
        shown=_role(data.get("shown")),
        confirmed=_role(data.get("confirmed")),
        says=parse_statement(data.get("says")),
    )


def parse_puzzle(data: Dict[str, Any]) -> Puzzle:
    if not isinstance(data, dict):
        raise ConfigurationError("puzzle must be a mapping")
    try:
        deck = [str(r) for r in data["deck"]]
        counts = _counts(data["counts"])
    except KeyError as exc:
        raise ConfigurationError(f"puzzle is missing {exc.args[0]!r}") from None
    cards = [_card(c) for c in data.get("cards", [])]
    options = data.get("options") or {}
    return Puzzle(deck=deck, counts=counts, cards=cards, options=dict(options))


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a YAML puzzle description into a Puzzle object."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"{path}: not valid YAML: {exc}") from exc
    return parse_puzzle(data)
