"""Exception taxonomy for the solver."""

from __future__ import annotations


class DeduceError(Exception):
    """Base class for every error raised by demondeduce."""


class ConfigurationError(DeduceError, ValueError):
    """The request cannot be searched: bad counts, deck or seat references."""


class UnsupportedRoleError(DeduceError, LookupError):
    """A role name with no catalog entry, or one whose rules are not implemented."""

    def __init__(self, name: str, reason: str = "unknown role"):
        super().__init__(f"{reason}: {name!r}")
        self.name = name


class UnsupportedStatementError(DeduceError):
    """A statement kind with no evaluation rule."""
