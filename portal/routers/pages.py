from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from portal.core.access import resolve_route
from portal.core.config import settings
from portal.core.session import SessionContext
from portal.dependencies.auth import (
    get_optional_session,
    require_admin_page,
    require_member_page,
    require_waiting_page,
)
from portal.services.backend_client import call_backend

router = APIRouter(tags=["Pages"])


@router.get("/")
def home(session: Optional[SessionContext] = Depends(get_optional_session)):
    return RedirectResponse(resolve_route(session), status_code=302)


@router.get("/waiting")
def waiting_page(session: SessionContext = Depends(require_waiting_page)):
    # client bu aralıkla /auth/session/refresh çağırır
    return {
        "page": "waiting",
        "user": session.public_dict()["user"],
        "recheck_after": settings.STATUS_RECHECK_SECONDS,
        "refresh_url": "/auth/session/refresh",
    }


@router.get("/admin/dashboard")
def admin_dashboard(session: SessionContext = Depends(require_admin_page)):
    status_code, data = call_backend(
        "GET", "/api/admin/dashboard", token=session.access_token
    )
    return {
        "page": "admin_dashboard",
        "user": session.public_dict()["user"],
        "backend_status": status_code,
        "dashboard": data,
    }


@router.get("/user/dashboard")
def user_dashboard(session: SessionContext = Depends(require_member_page)):
    status_code, data = call_backend(
        "GET", "/api/user/dashboard", token=session.access_token
    )
    return {
        "page": "user_dashboard",
        "user": session.public_dict()["user"],
        "backend_status": status_code,
        "dashboard": data,
    }
