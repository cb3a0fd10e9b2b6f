from typing import Optional

from fastapi import HTTPException, Request

from portal.core.config import settings
from portal.core.security import decode_session_token
from portal.core.session import SessionContext


def get_bearer_token(request: Request) -> Optional[str]:
    auth = request.headers.get("Authorization")
    if auth and auth.startswith("Bearer "):
        return auth.split(" ", 1)[1].strip() or None
    return None


def get_cookie_session(request: Request) -> Optional[SessionContext]:
    """
    Session cookie (WEB). Invalid or expired cookies count as no session.
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    try:
        return decode_session_token(token)
    except HTTPException:
        return None


def get_current_token(request: Request) -> str:
    # Authorization header (API clients)
    token = get_bearer_token(request)

    # cookie (WEB)
    if not token:
        session = get_cookie_session(request)
        if session is not None:
            token = session.access_token or None

    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")

    return token
