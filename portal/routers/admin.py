from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from portal.core.auth_context import get_current_token
from portal.schemas.proxy import ReasonSchema
from portal.services.backend_client import forward

router = APIRouter(prefix="/api/admin", tags=["Admin Proxy"])


def _page_params(page: str, limit: str, **filters) -> Dict[str, Any]:
    params = {"page": page, "limit": limit}
    params.update(filters)
    return params


def _reason(payload: Optional[ReasonSchema]) -> str:
    return payload.reason if payload else ""


# =====================================================
# DASHBOARD
# =====================================================

@router.get("/dashboard")
def admin_dashboard(token: str = Depends(get_current_token)):
    return forward("GET", "/api/admin/dashboard", token=token)


# =====================================================
# USERS (kayıt onayı)
# =====================================================

@router.get("/users")
def list_users(
    page: str = Query("1"),
    limit: str = Query("10"),
    status: Optional[str] = Query(None),
    token: str = Depends(get_current_token)
):
    return forward(
        "GET", "/api/admin/users",
        token=token, params=_page_params(page, limit, status=status)
    )


@router.put("/users/{user_id}/approve")
def approve_user(user_id: str, token: str = Depends(get_current_token)):
    return forward("PUT", f"/api/admin/users/{user_id}/approve", token=token, body={})


@router.put("/users/{user_id}/reject")
def reject_user(
    user_id: str,
    payload: Optional[ReasonSchema] = None,
    token: str = Depends(get_current_token)
):
    return forward(
        "PUT", f"/api/admin/users/{user_id}/reject",
        token=token, body={"reason": _reason(payload)}
    )


# =====================================================
# DONATIONS
# =====================================================

@router.get("/donations")
def list_donations(
    page: str = Query("1"),
    limit: str = Query("10"),
    status: Optional[str] = Query(None),
    token: str = Depends(get_current_token)
):
    return forward(
        "GET", "/api/admin/donations",
        token=token, params=_page_params(page, limit, status=status)
    )


@router.put("/donations/{donation_id}/verify")
def verify_donation(donation_id: str, token: str = Depends(get_current_token)):
    return forward("PUT", f"/api/admin/donations/{donation_id}/verify", token=token, body={})


@router.put("/donations/{donation_id}/refund")
def refund_donation(
    donation_id: str,
    payload: Optional[ReasonSchema] = None,
    token: str = Depends(get_current_token)
):
    return forward(
        "PUT", f"/api/admin/donations/{donation_id}/refund",
        token=token, body={"reason": _reason(payload)}
    )


# =====================================================
# INTERVIEWS
# =====================================================

@router.get("/interviews")
def list_interviews(
    page: str = Query("1"),
    limit: str = Query("10"),
    status: Optional[str] = Query(None),
    token: str = Depends(get_current_token)
):
    return forward(
        "GET", "/api/admin/interviews",
        token=token, params=_page_params(page, limit, status=status)
    )


@router.put("/interviews/{interview_id}/schedule")
def schedule_interview(
    interview_id: str,
    body: Optional[Dict[str, Any]] = Body(None),
    token: str = Depends(get_current_token)
):
    return forward(
        "PUT", f"/api/admin/interviews/{interview_id}/schedule",
        token=token, body=body or {}
    )


@router.put("/interviews/{interview_id}/complete")
def complete_interview(
    interview_id: str,
    body: Optional[Dict[str, Any]] = Body(None),
    token: str = Depends(get_current_token)
):
    return forward(
        "PUT", f"/api/admin/interviews/{interview_id}/complete",
        token=token, body=body or {}
    )


# =====================================================
# VOLUNTEERS
# =====================================================

@router.get("/volunteers")
def list_volunteers(
    page: str = Query("1"),
    limit: str = Query("10"),
    approvalStatus: Optional[str] = Query(None),
    token: str = Depends(get_current_token)
):
    return forward(
        "GET", "/api/admin/volunteers",
        token=token, params=_page_params(page, limit, approvalStatus=approvalStatus)
    )


@router.put("/volunteers/{volunteer_id}/approve")
def approve_volunteer(volunteer_id: str, token: str = Depends(get_current_token)):
    return forward("PUT", f"/api/admin/volunteers/{volunteer_id}/approve", token=token, body={})


@router.put("/volunteers/{volunteer_id}/disapprove")
def disapprove_volunteer(
    volunteer_id: str,
    payload: Optional[ReasonSchema] = None,
    token: str = Depends(get_current_token)
):
    return forward(
        "PUT", f"/api/admin/volunteers/{volunteer_id}/disapprove",
        token=token, body={"reason": _reason(payload)}
    )


# =====================================================
# MEMBERSHIPS
# =====================================================

@router.get("/memberships")
def list_memberships(
    page: str = Query("1"),
    limit: str = Query("10"),
    status: Optional[str] = Query(None),
    token: str = Depends(get_current_token)
):
    return forward(
        "GET", "/api/admin/memberships",
        token=token, params=_page_params(page, limit, status=status)
    )


@router.put("/memberships/{membership_id}/approve")
def approve_membership(membership_id: str, token: str = Depends(get_current_token)):
    return forward("PUT", f"/api/admin/memberships/{membership_id}/approve", token=token, body={})


@router.put("/memberships/{membership_id}/disapprove")
def disapprove_membership(
    membership_id: str,
    payload: Optional[ReasonSchema] = None,
    token: str = Depends(get_current_token)
):
    return forward(
        "PUT", f"/api/admin/memberships/{membership_id}/disapprove",
        token=token, body={"reason": _reason(payload)}
    )


# =====================================================
# COLLABORATIONS
# =====================================================

@router.get("/collaborations")
def list_collaborations(
    page: str = Query("1"),
    limit: str = Query("10"),
    status: Optional[str] = Query(None),
    token: str = Depends(get_current_token)
):
    return forward(
        "GET", "/api/admin/collaborations",
        token=token, params=_page_params(page, limit, status=status)
    )


@router.put("/collaborations/{collaboration_id}/approve")
def approve_collaboration(collaboration_id: str, token: str = Depends(get_current_token)):
    return forward(
        "PUT", f"/api/admin/collaborations/{collaboration_id}/approve", token=token, body={}
    )


@router.put("/collaborations/{collaboration_id}/reject")
def reject_collaboration(
    collaboration_id: str,
    payload: Optional[ReasonSchema] = None,
    token: str = Depends(get_current_token)
):
    return forward(
        "PUT", f"/api/admin/collaborations/{collaboration_id}/reject",
        token=token, body={"reason": _reason(payload)}
    )
