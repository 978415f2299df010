"""Auth domain models."""

from .identity import Anonymous, Identity
from .principal import Principal, Subject, role_of
from .role import Role

__all__ = [
    "Anonymous",
    "Identity",
    "Principal",
    "Role",
    "Subject",
    "role_of",
]
