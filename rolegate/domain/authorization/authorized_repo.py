"""AuthorizedRepo — loads resources for one subject and hands them out sealed."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from rolegate.domain.authorization.guarded import Guarded
from rolegate.domain.shared.error import NotFoundError

if TYPE_CHECKING:
    from rolegate.domain.auth.model.principal import Subject
    from rolegate.domain.authorization.policy_set import PolicySet

T = TypeVar("T")
ID = TypeVar("ID")


class AuthorizedRepo(Generic[T, ID]):
    """Request-scoped view over a storage repository.

    Anything with ``async get(id) -> T | None`` works as ``inner``. Loaded
    resources come back as Guarded[T] bound to this repo's subject, so the
    caller still has to name the action (read, update, delete...) it performs.
    """

    def __init__(
        self,
        inner: Any,
        subject: "Subject",
        policy_set: "PolicySet",
    ) -> None:
        self._inner = inner
        self._subject = subject
        self._policy_set = policy_set

    async def get(self, id: ID) -> Guarded[T]:
        """Fetch by id; a missing resource is NotFoundError rather than None."""
        resource = await self._inner.get(id)
        if resource is None:
            raise NotFoundError(f"Resource not found: {id}")
        return Guarded(resource, self._subject, self._policy_set)
