"""Action guards for repository methods.

A repository that carries ``_subject`` and ``_policy_set`` can declare which
action each method performs: ``@reads()`` checks what a lookup returned,
``@writes(Action.UPDATE)`` or ``@writes(Action.DELETE)`` checks the resource
before it is persisted or removed.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

from rolegate.domain.authorization.action import Action


def reads(action: Action = Action.READ) -> Callable:
    """Guard ``action`` on the returned resource; lookups that find nothing pass through."""

    def decorator(fn: Callable) -> Callable:
        @wraps(fn)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            result = await fn(self, *args, **kwargs)
            if result is not None:
                self._policy_set.guard(self._subject, action, result)
            return result

        return wrapper

    return decorator


def writes(action: Action) -> Callable:
    """Guard ``action`` on the resource argument before the write happens."""

    def decorator(fn: Callable) -> Callable:
        @wraps(fn)
        async def wrapper(self: Any, resource: Any, *args: Any, **kwargs: Any) -> Any:
            self._policy_set.guard(self._subject, action, resource)
            return await fn(self, resource, *args, **kwargs)

        return wrapper

    return decorator
