"""Error hierarchy for rolegate.

Error layers:
- RoleGateError: Base class for all rolegate errors
- DomainError: Malformed requests and authorization denials raised to the caller
- InfrastructureError: Misconfiguration detected while building the policy set

Callers decide how these map onto their own responses (e.g. 401/403 in an HTTP layer).
"""


class RoleGateError(Exception):
    """Base class for all rolegate errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(RoleGateError):
    """Base class for domain errors."""


class InvalidRequestError(DomainError):
    """The permission query itself is malformed (unknown action, bad subject, missing attribute)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="invalid_request")
        self.field = field


class AuthorizationError(DomainError):
    """Subject not authorized for this operation."""


class NotFoundError(DomainError):
    """Resource not found."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(RoleGateError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
