"""Custom Dishka scopes for rolegate."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (config, the validated policy set)
    - UOW: Unit of Work (one request and its subject)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
