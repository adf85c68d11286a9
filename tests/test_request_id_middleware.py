from __future__ import annotations

from fastapi.testclient import TestClient


def test_preserves_incoming_request_id_header(client: TestClient):
    incoming_id = "test-request-id-123"
    resp = client.get("/not-a-route", headers={"X-Request-ID": incoming_id})

    assert resp.status_code == 404
    assert resp.headers.get("X-Request-ID") == incoming_id


def test_generates_request_id_when_missing(client: TestClient):
    resp = client.get("/not-a-route")

    generated = resp.headers.get("X-Request-ID")
    assert generated
    assert isinstance(generated, str)

    duration = resp.headers.get("X-Request-Duration-ms")
    assert duration is not None


def test_rate_limited_response_carries_request_id(client: TestClient, monkeypatch):
    from app.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult
    from app.core import rate_limit as rate_limit_module

    class DenyAll(AbstractRateLimiter):
        async def check(self, key: str) -> RateLimitResult:
            return RateLimitResult(success=False)

    monkeypatch.setattr(rate_limit_module, "get_rate_limiter", lambda: DenyAll())

    resp = client.get("/utils/list-articles", headers={"X-Request-ID": "req-429"})

    assert resp.status_code == 429
    assert resp.headers.get("X-Request-ID") == "req-429"
