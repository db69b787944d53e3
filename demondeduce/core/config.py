from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Mapping, Optional

from .errors import ConfigurationError


class Distinct(str, Enum):
    """What the aggregator counts as one solution."""
    ASSIGNMENTS = "assignments"
    WORLDS = "worlds"


@dataclass(frozen=True)
class SolverOptions:
    """Search settings. ``max_worlds`` and ``time_limit`` bound the search."""
    strict: bool = False
    distinct: Distinct = Distinct.ASSIGNMENTS
    keep_worlds: bool = False
    max_worlds: Optional[int] = None
    time_limit: Optional[float] = None
    workers: int = 1
    liars_must_lie: bool = False

    def __post_init__(self):
        if not isinstance(self.distinct, Distinct):
            try:
                object.__setattr__(self, "distinct", Distinct(self.distinct))
            except ValueError:
                raise ConfigurationError(f"unknown distinct mode {self.distinct!r}") from None
        if self.workers < 1:
            raise ConfigurationError("workers must be at least 1")
        if self.max_worlds is not None and self.max_worlds < 0:
            raise ConfigurationError("max_worlds must not be negative")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ConfigurationError("time_limit must be positive")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "SolverOptions":
        """Build options from a puzzle file's ``options`` block."""
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"unknown option(s): {', '.join(unknown)}")
        for key in ("strict", "keep_worlds", "liars_must_lie"):
            if key in data:
                data[key] = _as_bool(key, data[key])
        try:
            for key in ("max_worlds", "workers"):
                if data.get(key) is not None:
                    data[key] = int(data[key])
            if data.get("time_limit") is not None:
                data["time_limit"] = float(data["time_limit"])
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"bad option value: {exc}") from exc
        return cls(**data)

    def merged(self, **overrides: Any) -> "SolverOptions":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigurationError(f"option {key} must be true or false, got {value!r}")
