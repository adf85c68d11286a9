"""Pytest configuration and fixtures shared across all test modules.

This file is automatically loaded by pytest before running any tests.
It sets the TESTING environment variable so no .env file is loaded and
pins the configuration the tests rely on.
"""

import os

# CRITICAL: Set this before any imports that might load settings
os.environ["TESTING"] = "true"
os.environ.setdefault("APP_ENV", "testing")
os.environ.pop("GITHUB_TOKEN", None)
os.environ.setdefault("GITHUB_OWNER", "xyt6151")
os.environ.setdefault("GITHUB_REPO", "whio-digital-site")
os.environ.setdefault("GITHUB_BRANCH", "main")
os.environ.setdefault("APP_RATE_LIMIT_ENABLED", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.core import rate_limit as rate_limit_module
from app.core.app_factory import create_app


@pytest.fixture(autouse=True)
def fresh_rate_limiter(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test an empty limiter so budgets don't leak between tests."""
    monkeypatch.setattr(rate_limit_module, "_limiter", None)
    monkeypatch.setattr(rate_limit_module, "_limiter_config", None)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client."""
    return TestClient(create_app())
