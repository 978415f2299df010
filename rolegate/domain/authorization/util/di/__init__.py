from .provider import AuthorizationProvider

__all__ = ["AuthorizationProvider"]
