"""Authorizer — a subject bound to a policy set for one unit of work."""

from dataclasses import dataclass
from typing import Any, TypeVar

from rolegate.domain.auth.model.principal import Subject, role_of
from rolegate.domain.auth.model.role import Role
from rolegate.domain.authorization.action import Action
from rolegate.domain.authorization.guarded import Guarded
from rolegate.domain.authorization.policy_set import PolicySet

T = TypeVar("T")


@dataclass(frozen=True)
class Authorizer:
    """Answers permission queries for the current request's subject."""

    subject: Subject
    policy_set: PolicySet

    def __post_init__(self) -> None:
        role_of(self.subject)  # reject non-subjects up front

    @property
    def role(self) -> Role:
        return role_of(self.subject)

    def can(self, action: Action | str, resource: Any) -> bool:
        return self.policy_set.can(self.subject, action, resource)

    def guard(self, action: Action | str, resource: Any) -> None:
        self.policy_set.guard(self.subject, action, resource)

    def guarded(self, resource: T) -> Guarded[T]:
        return Guarded(resource, self.subject, self.policy_set)
