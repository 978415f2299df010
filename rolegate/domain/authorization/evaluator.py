"""Module-level permission queries against the default POLICY_SET."""

from typing import Any

from rolegate.domain.auth.model.principal import Subject
from rolegate.domain.authorization.action import Action
from rolegate.domain.authorization.policy_set import POLICY_SET


def can(subject: Subject, action: Action | str, resource: Any) -> bool:
    """Return True if ``subject`` may perform ``action`` on ``resource``.

    Pure query. Deny is a False result, not an error; malformed input raises
    InvalidRequestError.
    """
    return POLICY_SET.can(subject, action, resource)


def cannot(subject: Subject, action: Action | str, resource: Any) -> bool:
    """Negation of can()."""
    return not POLICY_SET.can(subject, action, resource)
