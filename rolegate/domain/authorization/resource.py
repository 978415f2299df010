"""Resource introspection used by policy rules.

A resource is any object. Its resource class comes from an optional
``__resource__`` class attribute, falling back to the lower-cased class name.
A class may be passed in place of an instance (e.g. for ``create``).
"""

from typing import Any

from rolegate.domain.auth.model.role import Role
from rolegate.domain.shared.error import InvalidRequestError

_MISSING = object()


def resource_class_of(resource: Any) -> str:
    """Name of the resource class a rule's ``resource_class`` is matched against."""
    cls = resource if isinstance(resource, type) else type(resource)
    name = getattr(cls, "__resource__", None)
    return name if name is not None else cls.__name__.lower()


def owner_id_of(resource: Any) -> Any:
    """Return ``resource.owner_id``; raise InvalidRequestError if the attribute is absent."""
    owner_id = getattr(resource, "owner_id", _MISSING)
    if owner_id is _MISSING:
        raise InvalidRequestError(
            f"Resource {resource_class_of(resource)!r} has no owner_id",
            field="owner_id",
        )
    return owner_id


def owner_role_of(resource: Any) -> Role:
    """Return the owner's role; raise InvalidRequestError if absent or unknown."""
    owner_role = getattr(resource, "owner_role", _MISSING)
    if owner_role is _MISSING:
        raise InvalidRequestError(
            f"Resource {resource_class_of(resource)!r} has no owner_role",
            field="owner_role",
        )
    return Role.parse(owner_role)
