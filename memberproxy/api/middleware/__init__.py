"""HTTP middleware."""

from memberproxy.api.middleware.context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
