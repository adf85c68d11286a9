"""Admission gate: per-client rate limiting in front of every route.

This module wires the rate limiting adapter into the HTTP layer as a
middleware, so it runs before routing and also guards unknown paths.

Rate limiting strategy:
- Key = value of the client address header (``CF-Connecting-IP`` by
  default), or a fixed fallback literal when the header is absent.
- One ``check`` per request; a failed check answers 429 immediately.
- Errors raised by the limiter backend are not handled here.
"""

from __future__ import annotations

import hashlib
import logging

from fastapi import Request, Response, status
from fastapi.responses import PlainTextResponse

from app.adapters.rate_limit.base import AbstractRateLimiter
from app.adapters.rate_limit.in_memory import InMemoryFixedWindowRateLimiter
from app.core.config import settings

logger = logging.getLogger(__name__)


_limiter: AbstractRateLimiter | None = None
_limiter_config: tuple[int, int] | None = None


def get_rate_limiter() -> AbstractRateLimiter:
    """Return a process-wide rate limiter instance.

    The instance is cached in-module to preserve state across requests.
    If configuration changes (primarily in tests), the limiter is rebuilt.

    Returns:
        AbstractRateLimiter: Configured limiter instance.
    """

    global _limiter, _limiter_config

    config = (
        settings.app.rate_limit_requests,
        settings.app.rate_limit_window_seconds,
    )

    if _limiter is None or _limiter_config != config:
        _limiter = InMemoryFixedWindowRateLimiter(
            limit=settings.app.rate_limit_requests,
            window_seconds=settings.app.rate_limit_window_seconds,
        )
        _limiter_config = config

    return _limiter


def build_rate_limit_key(request: Request) -> str:
    """Return the client identifier used as the rate limit key."""
    return request.headers.get(settings.app.client_ip_header) or settings.app.client_ip_fallback


def _hash_limiter_key(key: str) -> str:
    """Hash the rate limit key for logging without exposing client addresses."""
    return hashlib.sha256(key.encode()).hexdigest()[:16]


async def rate_limit_middleware(request: Request, call_next) -> Response:
    """HTTP middleware enforcing the per-client rate limit.

    Args:
        request: The incoming HTTP request.
        call_next: The next middleware/route handler in the stack.

    Returns:
        429 plain-text response when the client's budget is exhausted,
        otherwise whatever the rest of the stack returns.
    """

    if not settings.app.rate_limit_enabled:
        return await call_next(request)

    key = build_rate_limit_key(request)
    result = await get_rate_limiter().check(key)

    if result.success:
        logger.debug("rate_limit.allowed", extra={"key_hash": _hash_limiter_key(key)})
        return await call_next(request)

    logger.warning(
        "rate_limit.exceeded",
        extra={
            "key_hash": _hash_limiter_key(key),
            "request_path": request.url.path,
        },
    )
    return PlainTextResponse(
        "Too Many Requests",
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
    )
