"""Rate limiting adapters.

The admission gate only needs a ``check(key)`` capability answering
"may this client proceed?". The in-memory backend is the default; a shared
store can be plugged in behind the same interface.
"""

from app.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult
from app.adapters.rate_limit.in_memory import InMemoryFixedWindowRateLimiter

__all__ = [
    "AbstractRateLimiter",
    "InMemoryFixedWindowRateLimiter",
    "RateLimitResult",
]
