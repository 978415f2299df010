"""rolegate — cascading role-based permission checks."""

from rolegate.domain.auth.model import Anonymous, Principal, Role, Subject, role_of
from rolegate.domain.authorization.action import Action
from rolegate.domain.authorization.evaluator import can, cannot
from rolegate.domain.shared.error import AuthorizationError, InvalidRequestError

__all__ = [
    "Action",
    "Anonymous",
    "AuthorizationError",
    "InvalidRequestError",
    "Principal",
    "Role",
    "Subject",
    "can",
    "cannot",
    "role_of",
]
