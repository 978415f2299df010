"""Role hierarchy for authorization."""

from enum import IntEnum

from rolegate.domain.shared.error import InvalidRequestError


class Role(IntEnum):
    """Hierarchical roles with numeric ordering.

    Higher values inherit all permissions of lower values.
    GUEST is never stored; it is what an anonymous subject evaluates as.
    Gaps allow future role insertion without renumbering.
    """

    GUEST = 0
    NORMAL = 10
    MODERATOR = 20
    ADMIN = 30

    @classmethod
    def parse(cls, value: "Role | str") -> "Role":
        """Resolve a Role from a Role or a case-insensitive role name."""
        if isinstance(value, Role):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidRequestError(f"Unknown role: {value!r}", field="role")
