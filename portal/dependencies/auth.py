from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from portal.core.access import (
    ADMIN_DASHBOARD_PATH,
    LOGIN_PATH,
    USER_DASHBOARD_PATH,
    WAITING_PATH,
    redirect_for,
)
from portal.core.auth_context import get_cookie_session
from portal.core.session import SessionContext


class AccessRedirect(Exception):
    """Raised by page guards; rendered as a redirect by the app."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(location)


def get_optional_session(request: Request) -> Optional[SessionContext]:
    return get_cookie_session(request)


def get_current_session(
    session: Optional[SessionContext] = Depends(get_optional_session)
) -> SessionContext:
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return session


def page_guard(expected_path: str):
    """
    Page-level guard: lets the request through only when the access
    router would send this session to `expected_path`.
    """
    def _guard(
        session: Optional[SessionContext] = Depends(get_optional_session)
    ) -> Optional[SessionContext]:
        target = redirect_for(session, expected_path)
        if target is not None:
            raise AccessRedirect(target)
        return session

    return _guard


require_admin_page = page_guard(ADMIN_DASHBOARD_PATH)
require_member_page = page_guard(USER_DASHBOARD_PATH)
require_waiting_page = page_guard(WAITING_PATH)
require_login_page = page_guard(LOGIN_PATH)
