"""
Conference Portal - Test Configuration and Fixtures
"""
import json
import os
from typing import Any, Dict, Optional

# Set testing environment before the app reads its settings
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["BACKEND_URL"] = "http://backend.test"

import pytest
from fastapi.testclient import TestClient

from portal.core.config import settings
from portal.core.security import create_session_token
from portal.core.session import Role, SessionContext, Status
from portal.main import app


class FakeResponse:
    def __init__(
        self,
        status_code: int = 200,
        json_data: Any = None,
        content_type: str = "application/json",
        url: str = "",
    ):
        self.status_code = status_code
        self._json = json_data
        self.headers = {"content-type": content_type}
        self.url = url

    def json(self):
        if self._json is None:
            raise ValueError("No JSON body")
        return self._json


class FakeBackend:
    """Stands in for requests.request and records every backend call."""

    def __init__(self):
        self.routes: Dict[tuple, FakeResponse] = {}
        self.calls = []
        self.error: Optional[Exception] = None

    def add(self, method: str, path: str, status_code: int = 200,
            json_data: Any = None, content_type: str = "application/json"):
        self.routes[(method, path)] = FakeResponse(
            status_code, json_data, content_type, url=path
        )

    def __call__(self, method, url, params=None, data=None, headers=None, timeout=None):
        path = url[len(settings.BACKEND_URL.rstrip("/")):]
        self.calls.append({
            "method": method,
            "path": path,
            "params": params,
            "body": json.loads(data) if data else None,
            "headers": headers or {},
        })
        if self.error is not None:
            raise self.error
        return self.routes.get(
            (method, path),
            FakeResponse(404, {"success": False, "status": 404, "message": "Not found", "data": None}),
        )

    @property
    def last_call(self):
        return self.calls[-1]


@pytest.fixture
def backend(monkeypatch) -> FakeBackend:
    fake = FakeBackend()
    monkeypatch.setattr("portal.services.backend_client.requests.request", fake)
    return fake


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_session():
    def _make(role=Role.GENERAL, status=Status.APPROVED, **fields) -> SessionContext:
        defaults = {
            "user_id": "user-1",
            "access_token": "backend-token",
            "name": "Test User",
            "email": "test@example.com",
        }
        defaults.update(fields)
        return SessionContext(role=role, status=status, **defaults)

    return _make


@pytest.fixture
def login_as(client):
    """Put a signed session cookie for `session` into the client."""
    def _login(session: SessionContext) -> TestClient:
        client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(session))
        return client

    return _login
