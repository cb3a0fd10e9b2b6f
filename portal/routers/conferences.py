from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from portal.core.auth_context import get_current_token
from portal.services.backend_client import forward

router = APIRouter(prefix="/api/conferences", tags=["Conferences Proxy"])


@router.get("/active")
def active_conferences():
    return forward("GET", "/api/conferences/active")


@router.get("/user/submissions")
def user_submissions(token: str = Depends(get_current_token)):
    return forward("GET", "/api/conferences/user/submissions", token=token)


@router.post("/submit")
def submit_to_conference(
    body: Dict[str, Any] = Body(...),
    token: str = Depends(get_current_token)
):
    return forward("POST", "/api/conferences/submit", token=token, body=body)


@router.get("")
def list_conferences(token: str = Depends(get_current_token)):
    return forward("GET", "/api/conferences", token=token)


@router.post("")
def create_conference(
    body: Dict[str, Any] = Body(...),
    token: str = Depends(get_current_token)
):
    return forward("POST", "/api/conferences", token=token, body=body)


@router.get("/{conference_id}")
def get_conference(conference_id: str, token: str = Depends(get_current_token)):
    return forward("GET", f"/api/conferences/{conference_id}", token=token)


@router.put("/{conference_id}")
def update_conference(
    conference_id: str,
    body: Dict[str, Any] = Body(...),
    token: str = Depends(get_current_token)
):
    return forward("PUT", f"/api/conferences/{conference_id}", token=token, body=body)


@router.delete("/{conference_id}")
def delete_conference(conference_id: str, token: str = Depends(get_current_token)):
    return forward("DELETE", f"/api/conferences/{conference_id}", token=token)
