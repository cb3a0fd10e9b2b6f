"""
Credential exchange with the backend API.

A successful exchange yields a SessionContext; a rejected one yields None.
Transport failures surface as HTTPException(502) from call_backend.
"""
from typing import Optional

from portal.core.logger import logger
from portal.core.session import Role, SessionContext, Status
from portal.services.backend_client import call_backend


def authenticate_user(email: str, password: str) -> Optional[SessionContext]:
    if not email or not password:
        return None

    status_code, data = call_backend(
        "POST",
        "/api/auth/login",
        body={"email": email, "password": password},
    )

    user = data.get("user") if isinstance(data, dict) else None
    token = data.get("token") if isinstance(data, dict) else None

    if status_code >= 400 or not isinstance(user, dict) or not token:
        logger.warning(f"LOGIN FAILED | email={email} | status={status_code}")
        return None

    session = SessionContext.from_user_record(user, access_token=token)
    logger.info(
        f"LOGIN SUCCESS | user_id={session.user_id} | role={session.role} | status={session.status}"
    )
    return session


def authenticate_admin(username: str, password: str) -> Optional[SessionContext]:
    if not username or not password:
        return None

    status_code, data = call_backend(
        "POST",
        "/api/auth/admin/login",
        body={"username": username, "password": password},
    )

    if status_code >= 400 or not isinstance(data, dict) or not data.get("success") or not data.get("token"):
        logger.warning(f"ADMIN LOGIN FAILED | username={username} | status={status_code}")
        return None

    admin = data.get("admin") or data.get("user") or {}
    session = SessionContext(
        user_id=str(admin.get("id") or username),
        role=Role.ADMIN,
        status=Status.APPROVED,
        access_token=data["token"],
        name=admin.get("name") or username,
        email=admin.get("email"),
    )
    logger.info(f"ADMIN LOGIN SUCCESS | user_id={session.user_id}")
    return session


def refresh_session(session: SessionContext) -> SessionContext:
    """
    Re-read the user record so a PENDING user sees an admin's decision.
    Any failure keeps the current session unchanged.
    """
    if session.role is Role.ADMIN:
        return session

    status_code, data = call_backend(
        "GET",
        "/api/user/profile",
        token=session.access_token,
    )

    if not isinstance(data, dict):
        data = {}
    user = data.get("user") or data.get("data")
    if status_code >= 400 or not data.get("success") or not isinstance(user, dict):
        logger.warning(
            f"SESSION REFRESH FAILED | user_id={session.user_id} | status={status_code}"
        )
        return session

    refreshed = session.with_user_record(user)
    if refreshed.status != session.status:
        logger.info(
            f"SESSION STATUS CHANGED | user_id={session.user_id} | {session.status} -> {refreshed.status}"
        )
    return refreshed
