"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Each application gets its own limiter (and in-memory counter storage),
so separately built apps never share counters.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from users_api.core.config import Settings

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter applying ``settings.rate_limit_default`` to all routes.

    Args:
        settings: Application settings.

    Returns:
        A Limiter keyed on the client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Kept synchronous: SlowAPIMiddleware calls it directly, outside
    Starlette's exception handling.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the common error shape.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"Error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
