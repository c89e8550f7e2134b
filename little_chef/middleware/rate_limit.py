"""Rate limiting using slowapi."""

from fastapi import Request
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address

from little_chef.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.rate_limit_per_hour}/hour"],
    storage_uri="memory://",
)


def get_rate_limit_exceeded_handler():
    """Get rate limit exceeded handler."""
    return _rate_limit_exceeded_handler


def rate_limit_dependency(request: Request) -> None:
    """
    Apply the default per-client limit to a route.

    Raises:
        RateLimitExceeded: If rate limit is exceeded
    """
    # slowapi only applies default limits through its middleware; evaluate them here instead.
    limiter._check_request_limit(request, endpoint_func=None)
