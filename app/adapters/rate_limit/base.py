"""Rate limiter interfaces.

The admission gate depends on this abstraction (not the concrete
implementation) so the storage backend can be swapped with minimal changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of a rate limit check.

    Attributes:
        success: Whether the request may proceed.
    """

    success: bool


class AbstractRateLimiter(ABC):
    """Interface for rate limiters."""

    @abstractmethod
    async def check(self, key: str) -> RateLimitResult:
        """Consume one unit of budget for ``key``.

        Args:
            key: Unique identifier of the client (e.g., IP address).

        Returns:
            RateLimitResult telling whether the request is allowed.
        """
        raise NotImplementedError
