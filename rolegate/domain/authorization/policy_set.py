"""PolicySet — declarative authorization rules and the Scope enum.

Contains PolicyRule, Scope, allow() constructor, build_policy_set() and the
POLICY_SET constant. This is the single source of truth for all "who can do
what on which resource" rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from rolegate.config import PolicyConfig
from rolegate.domain.auth.model.identity import Anonymous
from rolegate.domain.auth.model.principal import Principal, describe, role_of
from rolegate.domain.auth.model.role import Role
from rolegate.domain.authorization.action import Action
from rolegate.domain.authorization.resource import (
    owner_id_of,
    owner_role_of,
    resource_class_of,
)
from rolegate.domain.shared.error import (
    AuthorizationError,
    ConfigurationError,
    InvalidRequestError,
)

if TYPE_CHECKING:
    from rolegate.domain.auth.model.principal import Subject

logger = logging.getLogger(__name__)


class Scope(StrEnum):
    """Predicates narrowing a rule to resources related to the subject."""

    OWNER = "owner"  # resource.owner_id == subject.user_id
    OUTRANKS_OWNER = "outranks_owner"  # resource.owner_role < subject.role


@dataclass(frozen=True)
class PolicyRule:
    """A single authorization rule in the policy set.

    Applies to every role >= ``role``. ``resource_class=None`` matches any class.
    """

    action: Action
    role: Role = Role.GUEST
    resource_class: str | None = None
    scope: Scope | None = None

    def covers(self, action: Action) -> bool:
        return self.action is Action.MANAGE or self.action is action


def allow(
    action: Action,
    *,
    role: Role = Role.GUEST,
    resource_class: str | None = None,
    scope: Scope | None = None,
) -> PolicyRule:
    """Convenience constructor for a policy rule."""
    return PolicyRule(action=action, role=role, resource_class=resource_class, scope=scope)


class PolicySet:
    """Declarative set of all authorization rules.

    Evaluation: the rules covering the requested action are tried from the
    lowest role upwards, unscoped rules first. First match wins (allow).
    No match means deny. The table is never mutated after construction.
    """

    def __init__(self, rules: list[PolicyRule]) -> None:
        self._rules = tuple(rules)
        ordered = sorted(self._rules, key=lambda r: (r.scope is not None, r.role))
        self._by_action: dict[Action, tuple[PolicyRule, ...]] = {
            action: tuple(r for r in ordered if r.covers(action)) for action in Action
        }

    @property
    def rules(self) -> tuple[PolicyRule, ...]:
        return self._rules

    def can(self, subject: Subject, action: Action | str, resource: Any) -> bool:
        """Return True if any rule grants ``action`` on ``resource`` to ``subject``.

        Raises InvalidRequestError for an unknown action, a non-subject, a missing
        resource, or a resource lacking an attribute a matched scope needs.
        """
        role = role_of(subject)
        action = Action.parse(action)
        allowed = self._allows(subject, role, action, resource)
        logger.debug(
            "Permission %s: subject=%s role=%s action=%s resource=%s",
            "granted" if allowed else "refused",
            describe(subject),
            role.name,
            action,
            resource_class_of(resource),
        )
        return allowed

    def guard(self, subject: Subject, action: Action | str, resource: Any) -> None:
        """Raise AuthorizationError if no rule allows this access."""
        role = role_of(subject)
        action = Action.parse(action)
        subject_id = describe(subject)

        if self._allows(subject, role, action, resource):
            logger.info("Authorization allowed: subject=%s action=%s", subject_id, action)
            return

        logger.warning("Authorization denied: subject=%s action=%s", subject_id, action)
        if isinstance(subject, Anonymous):
            raise AuthorizationError("Authentication required", code="missing_token")
        raise AuthorizationError(f"Access denied: {action}", code="access_denied")

    def grants_for(self, role: Role) -> frozenset[PolicyRule]:
        """All rules that apply to a subject holding ``role``."""
        return frozenset(r for r in self._rules if r.role <= role)

    def _allows(self, subject: Subject, role: Role, action: Action, resource: Any) -> bool:
        if resource is None:
            raise InvalidRequestError("A resource is required", field="resource")

        resource_class = resource_class_of(resource)
        for rule in self._by_action[action]:
            if rule.role > role:
                continue
            if rule.resource_class is not None and rule.resource_class != resource_class:
                continue
            if self._in_scope(rule, subject, resource):
                return True
        return False

    def _in_scope(self, rule: PolicyRule, subject: Subject, resource: Any) -> bool:
        if rule.scope is None:
            return True
        # Scoped rules need an identity to relate to
        if not isinstance(subject, Principal):
            return False
        if rule.scope is Scope.OWNER:
            owner_id = owner_id_of(resource)
            return owner_id is not None and owner_id == subject.user_id
        if rule.scope is Scope.OUTRANKS_OWNER:
            return owner_role_of(resource) < subject.role
        raise ConfigurationError(f"Unsupported scope: {rule.scope}")

    def validate_coverage(self) -> None:
        """Startup check: every Action enum member must have at least one rule."""
        missing = {action for action in Action if not self._by_action[action]}
        if missing:
            raise ConfigurationError(
                f"Actions without policy rules: {sorted(str(a) for a in missing)}"
            )

    def validate_cascade(self) -> None:
        """Startup check: no scoped rule may apply to guests.

        Every rule applies to all roles >= its own and each scope only widens
        with rank, so the cascade itself holds by construction.
        """
        scoped_guest = [r for r in self._rules if r.role is Role.GUEST and r.scope is not None]
        if scoped_guest:
            raise ConfigurationError(f"Scoped rules cannot apply to guests: {scoped_guest}")


def build_policy_set(policy: PolicyConfig) -> PolicySet:
    """Assemble the cascading rule table for the configured moderation policy."""
    rules = [
        # Guests read everything
        allow(Action.READ),
        # Normal users create, and update what they own
        allow(Action.CREATE, role=Role.NORMAL),
        allow(Action.UPDATE, role=Role.NORMAL, scope=Scope.OWNER),
        # Moderators update anything
        allow(Action.UPDATE, role=Role.MODERATOR),
    ]

    if policy.moderator_delete == "lower_roles":
        rules += [
            allow(Action.DELETE, role=Role.MODERATOR, scope=Scope.OWNER),
            allow(Action.DELETE, role=Role.MODERATOR, scope=Scope.OUTRANKS_OWNER),
        ]
    else:
        rules.append(allow(Action.DELETE, role=Role.MODERATOR))

    # Admins manage everything
    rules.append(allow(Action.MANAGE, role=Role.ADMIN))
    return PolicySet(rules)


POLICY_SET = build_policy_set(PolicyConfig())
