from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import HTTPException, status
from jose import JWTError, jwt

from portal.core.config import settings
from portal.core.session import SessionContext

ALGORITHM = "HS256"

# token claim -> SessionContext attribute
_PROFILE_CLAIMS = {
    "name": "name",
    "email": "email",
    "address": "address",
    "phone": "phone",
    "organization": "organization",
    "image": "image",
}


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(days=settings.SESSION_MAX_AGE_DAYS)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[ALGORITHM]
        )
        return payload

    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token"
        )


def create_session_token(session: SessionContext) -> str:
    claims = {
        "sub": session.user_id,
        "role": session.role_label,
        "status": session.status.value if session.status else None,
        "jwt": session.access_token,
    }
    for claim, attr in _PROFILE_CLAIMS.items():
        claims[claim] = getattr(session, attr)
    return create_access_token(claims)


def session_from_payload(payload: dict) -> SessionContext:
    user = {claim: payload.get(claim) for claim in _PROFILE_CLAIMS}
    user.update(
        id=payload.get("sub"),
        role=payload.get("role"),
        status=payload.get("status"),
    )
    return SessionContext.from_user_record(user, access_token=payload.get("jwt") or "")


def decode_session_token(token: str) -> SessionContext:
    return session_from_payload(decode_access_token(token))
