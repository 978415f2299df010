"""Principal — authenticated subject with a single role, resolved per-request."""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, TypeAlias

from rolegate.domain.auth.model.identity import Anonymous, Identity
from rolegate.domain.auth.model.role import Role
from rolegate.domain.shared.error import InvalidRequestError


@dataclass(frozen=True)
class Principal(Identity):
    """The authenticated identity of the current requester.

    Resolved per-request by the authentication layer. Immutable after creation.
    The role may be given as a Role or a role name; GUEST is rejected since it is
    only ever derived for anonymous requests.
    """

    user_id: Hashable
    role: Role

    def __post_init__(self) -> None:
        if self.user_id is None:
            raise InvalidRequestError("Principal requires a user_id", field="user_id")
        role = Role.parse(self.role)
        if role is Role.GUEST:
            raise InvalidRequestError(
                "Principal cannot hold the guest role; use Anonymous", field="role"
            )
        object.__setattr__(self, "role", role)

    def has_role(self, role: Role) -> bool:
        """Check if the assigned role >= the given role (hierarchy comparison)."""
        return self.role >= role


Subject: TypeAlias = Anonymous | Principal


def role_of(subject: Any) -> Role:
    """Effective role of a subject. Anonymous subjects are guests."""
    if isinstance(subject, Principal):
        return subject.role
    if isinstance(subject, Anonymous):
        return Role.GUEST
    raise InvalidRequestError(
        f"Expected Anonymous or Principal subject, got {type(subject).__name__}",
        field="subject",
    )


def describe(subject: Any) -> str:
    """Short subject label for log lines."""
    if isinstance(subject, Principal):
        return str(subject.user_id)
    return "anonymous"
