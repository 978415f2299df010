"""Guarded[T] — a loaded resource that stays sealed until an action is checked."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from rolegate.domain.authorization.action import Action

if TYPE_CHECKING:
    from rolegate.domain.auth.model.principal import Subject
    from rolegate.domain.authorization.policy_set import PolicySet

T = TypeVar("T")


class Guarded(Generic[T]):
    """Pairs a resource with the subject that asked for it.

    Handlers get the resource back from `.check(action)` once the policy set
    allows that action. Attributes are not forwarded, so `guarded.owner_id`
    raises AttributeError instead of leaking an unchecked read.
    """

    __slots__ = ("_resource", "_subject", "_policy_set")

    def __init__(
        self,
        resource: T,
        subject: Subject,
        policy_set: PolicySet,
    ) -> None:
        self._resource = resource
        self._subject = subject
        self._policy_set = policy_set

    def check(self, action: Action | str) -> T:
        """Guard ``action`` for the bound subject, then hand back the resource."""
        self._policy_set.guard(self._subject, action, self._resource)
        return self._resource

    def allows(self, action: Action | str) -> bool:
        """Whether ``check(action)`` would succeed, without unwrapping."""
        return self._policy_set.can(self._subject, action, self._resource)
