"""Fixtures for HTTP-level tests"""
import time

import jwt
import pytest
from fastapi.testclient import TestClient

from catalog.core.config import config
from main import app

TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


def _encode(claims: dict = None, secret: str = TEST_JWT_SECRET, expires_in: int = 3600) -> str:
    payload = {"user_id": "user-123", "exp": int(time.time()) + expires_in}
    payload.update(claims or {})
    return jwt.encode(payload, secret, algorithm=config.auth_jwt_algorithm)


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch):
    monkeypatch.setattr(config, "auth_jwt_secret", TEST_JWT_SECRET)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    app.state.limiter.reset()
    yield
    app.state.limiter.reset()


@pytest.fixture
def client(product_service):
    """Client without lifespan; the service is wired to in-memory collaborators"""
    app.state.product_service = product_service
    yield TestClient(app)
    del app.state.product_service


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {_encode()}"}


@pytest.fixture
def make_token():
    """Factory for signed tokens; pass `secret` or `expires_in` to forge bad ones"""
    return _encode
