"""
Access router.

Maps the current session (or its absence) to the single page the user
belongs on. Every function here is pure and total: any input, including
partially populated or malformed session objects, yields an answer.
"""
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Tuple, Union

from portal.core.session import MEMBER_ROLES, Role, SessionContext, Status

LOGIN_PATH = "/auth/login"
WAITING_PATH = "/waiting"
ADMIN_DASHBOARD_PATH = "/admin/dashboard"
USER_DASHBOARD_PATH = "/user/dashboard"

SessionLike = Union[SessionContext, Mapping, None]


def _read(session: Any, field: str) -> Any:
    if isinstance(session, Mapping):
        return session.get(field)
    return getattr(session, field, None)


def _identity(session: SessionLike) -> Any:
    """
    Returns None when there is no usable session at all.
    NextAuth-style payloads keep the identity under "user".
    """
    if isinstance(session, Mapping) and "user" in session:
        return session["user"]
    return session


def _role_name(identity: Any) -> Any:
    if isinstance(identity, SessionContext):
        return identity.role_label
    return _read(identity, "role")


def _role_and_status(session: SessionLike) -> Optional[Tuple[Optional[Role], Optional[Status]]]:
    session = _identity(session)
    if session is None:
        return None
    return Role.parse(_read(session, "role")), Status.parse(_read(session, "status"))


def resolve_route(session: SessionLike) -> str:
    fields = _role_and_status(session)
    if fields is None:
        return LOGIN_PATH

    role, status = fields

    if status is Status.PENDING:
        return WAITING_PATH
    if status is Status.REJECTED:
        return LOGIN_PATH
    if status is Status.APPROVED:
        if role is Role.ADMIN:
            return ADMIN_DASHBOARD_PATH
        if role in MEMBER_ROLES:
            return USER_DASHBOARD_PATH
        # unknown / missing role: fail open to the member dashboard
        return USER_DASHBOARD_PATH

    # missing or unrecognized status
    return LOGIN_PATH


def redirect_for(session: SessionLike, current_path: str) -> Optional[str]:
    """Where to send the user, or None when they are already there."""
    target = resolve_route(session)
    if current_path.rstrip("/") == target:
        return None
    return target


def has_role(session: SessionLike, role: Union[Role, str]) -> bool:
    identity = _identity(session)
    required = Role.parse(role)
    if identity is None or required is None:
        return False
    if required is Role.UNKNOWN and not isinstance(role, Role):
        # roles outside the enum compare by the backend's own string
        return _role_name(identity) == role
    return Role.parse(_read(identity, "role")) is required


def has_any_role(session: SessionLike, roles: Iterable) -> bool:
    if isinstance(roles, (str, Role)):
        roles = [roles]
    try:
        return any(has_role(session, role) for role in roles)
    except TypeError:
        return False


def _has_status(session: SessionLike, status: Status) -> bool:
    fields = _role_and_status(session)
    return fields is not None and fields[1] is status


def is_approved(session: SessionLike) -> bool:
    return _has_status(session, Status.APPROVED)


def is_pending(session: SessionLike) -> bool:
    return _has_status(session, Status.PENDING)


def is_rejected(session: SessionLike) -> bool:
    return _has_status(session, Status.REJECTED)


def dashboard_path(session: SessionLike) -> str:
    """
    Dashboard for an approved user; everyone else waits.
    Unlike resolve_route this never returns the login page.
    """
    if not is_approved(session):
        return WAITING_PATH
    if has_any_role(session, [Role.ADMIN]):
        return ADMIN_DASHBOARD_PATH
    return USER_DASHBOARD_PATH
