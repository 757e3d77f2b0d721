"""User domain entity."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.domain.entities.identifiers import new_id
from app.domain.exceptions import ValidationError

ROLE_USER = "User"
ROLE_ADMIN = "Admin"


@dataclass
class User:
    """Domain entity representing an account linked to an external identity."""

    external_id: str
    email: Optional[str]
    full_name: Optional[str]
    role: str = ROLE_USER
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Validate user entity."""
        if not self.external_id or not str(self.external_id).strip():
            raise ValidationError("external_id is required", field="external_id")
        if not self.role:
            raise ValidationError("role is required", field="role")

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "external_id": self.external_id,
            "email": self.email,
            "full_name": self.full_name,
            "role": self.role,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        created_at = datetime.fromisoformat(data["created_at"])
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(
            id=data["id"],
            external_id=data["external_id"],
            email=data.get("email"),
            full_name=data.get("full_name"),
            role=data.get("role") or ROLE_USER,
            created_at=created_at,
        )
