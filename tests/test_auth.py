import requests

from portal.core.config import settings
from portal.core.session import Role, Status

USER_RECORD = {
    "id": "u-42",
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "role": "DONOR",
    "status": "APPROVED",
    "phone": "555-0100",
}


def test_user_login_sets_session_cookie(client, backend):
    backend.add("POST", "/api/auth/login", 200, {"user": USER_RECORD, "token": "backend-jwt"})

    response = client.post("/auth/login", json={"email": "ada@example.com", "password": "secret"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["redirect"] == "/user/dashboard"
    assert data["user"]["role"] == "DONOR"
    assert data["accessToken"] == "backend-jwt"
    assert settings.SESSION_COOKIE_NAME in response.cookies
    assert backend.last_call["body"] == {"email": "ada@example.com", "password": "secret"}


def test_pending_user_login_redirects_to_waiting(client, backend):
    record = dict(USER_RECORD, status="PENDING")
    backend.add("POST", "/api/auth/login", 200, {"user": record, "token": "backend-jwt"})

    response = client.post("/auth/login", json={"email": "ada@example.com", "password": "secret"})

    assert response.json()["data"]["redirect"] == "/waiting"


def test_user_login_rejected_by_backend(client, backend):
    backend.add("POST", "/api/auth/login", 401, {"success": False, "message": "Invalid email or password"})

    response = client.post("/auth/login", json={"email": "ada@example.com", "password": "wrong"})

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "status": 401,
        "message": "Invalid credentials",
        "data": None,
    }
    assert settings.SESSION_COOKIE_NAME not in response.cookies


def test_user_login_with_non_json_backend_answer(client, backend):
    backend.add("POST", "/api/auth/login", 200, None, content_type="text/html")

    response = client.post("/auth/login", json={"email": "ada@example.com", "password": "secret"})

    assert response.status_code == 401


def test_user_login_without_token_fails(client, backend):
    backend.add("POST", "/api/auth/login", 200, {"user": USER_RECORD})

    response = client.post("/auth/login", json={"email": "ada@example.com", "password": "secret"})

    assert response.status_code == 401


def test_user_login_backend_down(client, backend):
    backend.error = requests.ConnectionError("connection refused")

    response = client.post("/auth/login", json={"email": "ada@example.com", "password": "secret"})

    assert response.status_code == 502
    assert response.json()["success"] is False


def test_user_login_requires_password(client, backend):
    response = client.post("/auth/login", json={"email": "ada@example.com", "password": ""})

    assert response.status_code == 422
    assert backend.calls == []


def test_admin_login(client, backend):
    backend.add("POST", "/api/auth/admin/login", 200, {"success": True, "token": "admin-token"})

    response = client.post("/auth/admin/login", json={"username": "root", "password": "secret"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["redirect"] == "/admin/dashboard"
    assert data["user"]["role"] == "ADMIN"
    assert data["user"]["status"] == "APPROVED"
    assert data["accessToken"] == "admin-token"
    assert backend.last_call["body"] == {"username": "root", "password": "secret"}


def test_admin_login_failure(client, backend):
    backend.add("POST", "/api/auth/admin/login", 401, {"success": False, "message": "nope"})

    response = client.post("/auth/admin/login", json={"username": "root", "password": "bad"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid admin credentials"


def test_logout_clears_cookie(login_as, make_session):
    client = login_as(make_session())

    response = client.post("/auth/logout")

    assert response.status_code == 200
    assert response.json()["data"]["redirect"] == "/auth/login"
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=")
    assert "Max-Age=0" in set_cookie


def test_session_endpoint_without_cookie(client):
    response = client.get("/auth/session")

    assert response.status_code == 200
    assert response.json() is None


def test_session_endpoint_with_cookie(login_as, make_session):
    client = login_as(make_session(Role.VOLUNTEER, Status.PENDING, organization="SSC"))

    body = client.get("/auth/session").json()

    assert body["user"]["role"] == "VOLUNTEER"
    assert body["user"]["status"] == "PENDING"
    assert body["user"]["organization"] == "SSC"
    assert body["accessToken"] == "backend-token"


def test_session_endpoint_ignores_garbage_cookie(client):
    client.cookies.set(settings.SESSION_COOKIE_NAME, "not-a-jwt")

    assert client.get("/auth/session").json() is None


def test_refresh_picks_up_approval(login_as, make_session, backend):
    backend.add("GET", "/api/user/profile", 200, {
        "success": True,
        "user": {"status": "APPROVED", "role": "DONOR"},
    })
    client = login_as(make_session(Role.GENERAL, Status.PENDING))

    response = client.post("/auth/session/refresh")

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["status"] == "APPROVED"
    assert body["user"]["role"] == "DONOR"
    assert body["redirect"] == "/user/dashboard"
    assert settings.SESSION_COOKIE_NAME in response.cookies
    assert backend.last_call["headers"]["Authorization"] == "Bearer backend-token"


def test_refresh_keeps_session_when_backend_fails(login_as, make_session, backend):
    backend.add("GET", "/api/user/profile", 500, {"success": False, "message": "boom"})
    client = login_as(make_session(Role.GENERAL, Status.PENDING))

    body = client.post("/auth/session/refresh").json()

    assert body["user"]["status"] == "PENDING"
    assert body["redirect"] == "/waiting"


def test_refresh_to_rejected_sends_to_login(login_as, make_session, backend):
    backend.add("GET", "/api/user/profile", 200, {"success": True, "user": {"status": "REJECTED"}})
    client = login_as(make_session(Role.GENERAL, Status.PENDING))

    body = client.post("/auth/session/refresh").json()

    assert body["user"]["status"] == "REJECTED"
    assert body["user"]["role"] == "GENERAL"
    assert body["redirect"] == "/auth/login"


def test_refresh_for_admin_skips_backend(login_as, make_session, backend):
    client = login_as(make_session(Role.ADMIN, Status.APPROVED))

    body = client.post("/auth/session/refresh").json()

    assert body["redirect"] == "/admin/dashboard"
    assert backend.calls == []


def test_refresh_without_session(client):
    response = client.post("/auth/session/refresh")

    assert response.status_code == 401
    assert response.json()["message"] == "Not authenticated"


def test_login_page_for_anonymous_user(client):
    response = client.get("/auth/login")

    assert response.status_code == 200
    assert response.json()["page"] == "login"


def test_login_page_redirects_approved_user(login_as, make_session):
    client = login_as(make_session(Role.COLLABORATOR, Status.APPROVED))

    response = client.get("/auth/login", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "/user/dashboard"


def test_login_page_for_rejected_user(login_as, make_session):
    client = login_as(make_session(Role.GENERAL, Status.REJECTED))

    response = client.get("/auth/login")

    assert response.status_code == 200
    assert response.json()["status"] == "REJECTED"
