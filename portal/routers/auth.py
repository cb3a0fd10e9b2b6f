from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse

from portal.core.access import resolve_route
from portal.core.config import settings
from portal.core.logger import logger
from portal.core.security import create_session_token
from portal.core.session import SessionContext
from portal.dependencies.auth import (
    get_current_session,
    get_optional_session,
    require_login_page,
)
from portal.schemas.auth import AdminLoginSchema, UserLoginSchema
from portal.services.auth_service import (
    authenticate_admin,
    authenticate_user,
    refresh_session,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _set_session_cookie(response: Response, session: SessionContext) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(session),
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        samesite="lax",
        secure=settings.COOKIE_SECURE
    )


def _login_response(session: SessionContext) -> JSONResponse:
    response = JSONResponse({
        "success": True,
        "status": 200,
        "message": "Login successful",
        "data": {
            **session.public_dict(),
            "redirect": resolve_route(session),
        },
    })
    _set_session_cookie(response, session)
    return response


@router.get("/login")
def login_page(session: Optional[SessionContext] = Depends(require_login_page)):
    # REJECTED kullanıcılar da buraya düşer
    return {
        "page": "login",
        "status": session.status.value if session and session.status else None,
        "user_login_url": "/auth/login",
        "admin_login_url": "/auth/admin/login",
    }


@router.post("/login")
def user_login(credentials: UserLoginSchema):
    session = authenticate_user(credentials.email, credentials.password)
    if session is None:
        raise HTTPException(401, "Invalid credentials")
    return _login_response(session)


@router.post("/admin/login")
def admin_login(credentials: AdminLoginSchema):
    session = authenticate_admin(credentials.username, credentials.password)
    if session is None:
        raise HTTPException(401, "Invalid admin credentials")
    return _login_response(session)


@router.post("/logout")
def logout(session: Optional[SessionContext] = Depends(get_optional_session)):
    if session is not None:
        logger.info(f"LOGOUT | user_id={session.user_id}")

    response = JSONResponse({
        "success": True,
        "status": 200,
        "message": "Logged out",
        "data": {"redirect": resolve_route(None)},
    })
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


@router.get("/session")
def get_session(session: Optional[SessionContext] = Depends(get_optional_session)):
    if session is None:
        return None
    return session.public_dict()


@router.post("/session/refresh")
def refresh(session: SessionContext = Depends(get_current_session)):
    refreshed = refresh_session(session)

    response = JSONResponse({
        **refreshed.public_dict(),
        "redirect": resolve_route(refreshed),
    })
    _set_session_cookie(response, refreshed)
    return response
