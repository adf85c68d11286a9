"""Unit tests for in-memory rate limiter adapter."""

from unittest.mock import Mock

import pytest

from app.adapters.rate_limit.in_memory import InMemoryFixedWindowRateLimiter


@pytest.mark.asyncio
async def test_allows_up_to_limit_in_same_window() -> None:
    clock = Mock(return_value=1000.0)
    limiter = InMemoryFixedWindowRateLimiter(limit=3, window_seconds=60, clock=clock)

    assert (await limiter.check("k")).success is True
    assert (await limiter.check("k")).success is True
    assert (await limiter.check("k")).success is True


@pytest.mark.asyncio
async def test_blocks_when_over_limit() -> None:
    clock = Mock(return_value=1000.0)
    limiter = InMemoryFixedWindowRateLimiter(limit=2, window_seconds=60, clock=clock)

    assert (await limiter.check("k")).success is True
    assert (await limiter.check("k")).success is True
    assert (await limiter.check("k")).success is False


@pytest.mark.asyncio
async def test_resets_on_new_window() -> None:
    clock = Mock(return_value=1000.0)
    limiter = InMemoryFixedWindowRateLimiter(limit=1, window_seconds=10, clock=clock)

    assert (await limiter.check("k")).success is True
    assert (await limiter.check("k")).success is False

    clock.return_value = 1010.0
    assert (await limiter.check("k")).success is True


@pytest.mark.asyncio
async def test_isolated_by_key() -> None:
    clock = Mock(return_value=1000.0)
    limiter = InMemoryFixedWindowRateLimiter(limit=1, window_seconds=60, clock=clock)

    assert (await limiter.check("10.0.0.1")).success is True
    assert (await limiter.check("10.0.0.1")).success is False

    assert (await limiter.check("10.0.0.2")).success is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"limit": 0, "window_seconds": 60},
        {"limit": 1, "window_seconds": 0},
    ],
)
def test_invalid_constructor_args(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        InMemoryFixedWindowRateLimiter(**kwargs)


@pytest.mark.asyncio
async def test_empty_key_rejected() -> None:
    limiter = InMemoryFixedWindowRateLimiter(limit=1, window_seconds=60)

    with pytest.raises(ValueError):
        await limiter.check("")


@pytest.mark.asyncio
async def test_counters_from_past_windows_are_dropped() -> None:
    clock = Mock(return_value=1000.0)
    limiter = InMemoryFixedWindowRateLimiter(limit=1, window_seconds=10, clock=clock)

    for window in range(100):
        clock.return_value = 1000.0 + window * 10
        for client in range(100):
            await limiter.check(f"203.0.113.{window}-{client}")

    assert len(limiter._state_by_key) == 100

    clock.return_value = 5000.0
    assert (await limiter.check("198.51.100.1")).success is True
    assert list(limiter._state_by_key) == ["198.51.100.1"]


@pytest.mark.asyncio
async def test_pruning_keeps_current_window_counts() -> None:
    clock = Mock(return_value=1000.0)
    limiter = InMemoryFixedWindowRateLimiter(limit=1, window_seconds=10, clock=clock)
    assert (await limiter.check("old")).success is True

    clock.return_value = 1010.0
    assert (await limiter.check("a")).success is True
    assert (await limiter.check("b")).success is True
    assert (await limiter.check("a")).success is False
    assert set(limiter._state_by_key) == {"a", "b"}
