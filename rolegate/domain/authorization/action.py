"""Authorization actions — all operations subject to access control."""

from enum import StrEnum

from rolegate.domain.shared.error import InvalidRequestError


class Action(StrEnum):
    """Operations a subject may request on a resource.

    In a policy rule MANAGE is a wildcard covering every action. As a requested
    action it is only satisfied by a MANAGE rule.
    """

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE = "manage"

    @classmethod
    def parse(cls, value: "Action | str") -> "Action":
        """Resolve an Action from an Action or its (case-insensitive) value."""
        if isinstance(value, Action):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidRequestError(f"Unknown action: {value!r}", field="action")
