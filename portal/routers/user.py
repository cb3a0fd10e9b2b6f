from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from portal.core.auth_context import get_current_token
from portal.services.backend_client import forward

router = APIRouter(prefix="/api/user", tags=["User Proxy"])


@router.get("/dashboard")
def user_dashboard(token: str = Depends(get_current_token)):
    return forward("GET", "/api/user/dashboard", token=token)


# =====================================================
# PROFILE
# =====================================================

@router.get("/profile")
def get_profile(token: str = Depends(get_current_token)):
    return forward("GET", "/api/user/profile", token=token)


@router.put("/profile")
def update_profile(
    body: Dict[str, Any] = Body(...),
    token: str = Depends(get_current_token)
):
    return forward("PUT", "/api/user/profile", token=token, body=body)


# =====================================================
# DONATIONS / MEMBERSHIP
# =====================================================

@router.get("/donations")
def list_donations(token: str = Depends(get_current_token)):
    return forward("GET", "/api/user/donations", token=token)


@router.post("/donations/create")
def create_donation(
    body: Dict[str, Any] = Body(...),
    token: str = Depends(get_current_token)
):
    # ödeme akışı backend'de
    return forward("POST", "/api/user/donations/create", token=token, body=body)


@router.get("/membership")
def get_membership(token: str = Depends(get_current_token)):
    return forward("GET", "/api/user/membership", token=token)


@router.post("/membership")
def request_membership(
    body: Dict[str, Any] = Body(...),
    token: str = Depends(get_current_token)
):
    return forward("POST", "/api/user/membership", token=token, body=body)


# =====================================================
# INTERVIEWS
# =====================================================

@router.get("/interviews")
def list_interviews(token: str = Depends(get_current_token)):
    return forward("GET", "/api/user/interviews", token=token)


@router.post("/interviews/request")
def request_interview(
    body: Dict[str, Any] = Body(...),
    token: str = Depends(get_current_token)
):
    return forward("POST", "/api/user/interviews/request", token=token, body=body)


# =====================================================
# VOLUNTEER / COLLABORATION
# =====================================================

@router.get("/volunteer")
def get_volunteer_application(token: str = Depends(get_current_token)):
    return forward("GET", "/api/user/volunteer", token=token)


@router.get("/volunteer/opportunities")
def volunteer_opportunities(token: str = Depends(get_current_token)):
    return forward("GET", "/api/user/volunteer/opportunities", token=token)


@router.post("/volunteers/apply")
def apply_volunteer(
    body: Dict[str, Any] = Body(...),
    token: str = Depends(get_current_token)
):
    return forward("POST", "/api/user/volunteers/apply", token=token, body=body)


@router.get("/collaboration")
def get_collaboration_application(token: str = Depends(get_current_token)):
    return forward("GET", "/api/user/collaboration", token=token)


@router.get("/collaboration/opportunities")
def collaboration_opportunities(token: str = Depends(get_current_token)):
    return forward("GET", "/api/user/collaboration/opportunities", token=token)


@router.post("/collaborations/apply")
def apply_collaboration(
    body: Dict[str, Any] = Body(...),
    token: str = Depends(get_current_token)
):
    return forward("POST", "/api/user/collaborations/apply", token=token, body=body)
