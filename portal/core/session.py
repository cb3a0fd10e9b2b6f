from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class _ParsableEnum(str, Enum):
    """
    Backend'den gelen serbest string'i kapalı enum'a çevirir.
    Tanınmayan her değer UNKNOWN olur, None ise None kalır.
    """

    @classmethod
    def parse(cls, value: Any):
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.UNKNOWN
        return cls._value2member_map_.get(value, cls.UNKNOWN)


class Role(_ParsableEnum):
    ADMIN = "ADMIN"
    GENERAL = "GENERAL"
    DONOR = "DONOR"
    VOLUNTEER = "VOLUNTEER"
    COLLABORATOR = "COLLABORATOR"
    UNKNOWN = "UNKNOWN"


class Status(_ParsableEnum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    UNKNOWN = "UNKNOWN"


MEMBER_ROLES = frozenset(
    {Role.GENERAL, Role.DONOR, Role.VOLUNTEER, Role.COLLABORATOR}
)


def unlisted_role_name(value: Any) -> Optional[str]:
    """The backend's role string when Role has no member for it."""
    if isinstance(value, str) and value not in Role._value2member_map_:
        return value
    return None


@dataclass(frozen=True)
class SessionContext:
    user_id: str
    role: Optional[Role]
    status: Optional[Status]
    access_token: str          # backend bearer token
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    organization: Optional[str] = None
    image: Optional[str] = None
    role_name: Optional[str] = None   # only for roles outside Role

    @property
    def role_label(self) -> Optional[str]:
        if self.role_name:
            return self.role_name
        return self.role.value if self.role else None

    @classmethod
    def from_user_record(cls, user: dict, access_token: str) -> "SessionContext":
        """Build a session from the backend's user record."""
        return cls(
            user_id=str(user.get("id") or user.get("_id") or ""),
            role=Role.parse(user.get("role")),
            status=Status.parse(user.get("status")),
            access_token=access_token,
            name=user.get("name"),
            email=user.get("email"),
            address=user.get("address"),
            phone=user.get("phone"),
            organization=user.get("organization"),
            image=user.get("image") or None,
            role_name=unlisted_role_name(user.get("role")),
        )

    def with_user_record(self, user: dict) -> "SessionContext":
        # role ve status birlikte değişir
        role_fields = {}
        if "role" in user:
            role_fields = {
                "role": Role.parse(user["role"]),
                "role_name": unlisted_role_name(user["role"]),
            }
        return replace(
            self,
            **role_fields,
            status=Status.parse(user.get("status", self.status)),
            name=user.get("name") or self.name,
            email=user.get("email") or self.email,
            address=user.get("address") or self.address,
            phone=user.get("phone") or self.phone,
            organization=user.get("organization") or self.organization,
        )

    def public_dict(self) -> dict:
        return {
            "user": {
                "id": self.user_id,
                "role": self.role_label,
                "status": self.status.value if self.status else None,
                "name": self.name,
                "email": self.email,
                "address": self.address,
                "phone": self.phone,
                "organization": self.organization,
                "image": self.image,
            },
            "accessToken": self.access_token,
        }
