"""Identity hierarchy — base types for all request subjects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Base for all request identities."""

    pass


@dataclass(frozen=True)
class Anonymous(Identity):
    """Unauthenticated request. Evaluates as Role.GUEST."""

    pass
