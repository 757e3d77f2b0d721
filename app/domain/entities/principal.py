"""Caller identity values passed into the domain services."""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from app.domain.entities.user import ROLE_ADMIN, User


@dataclass(frozen=True)
class CurrentPrincipal:
    """
    The authenticated caller of the in-flight request.

    Resolved once per request by the HTTP layer and handed to every
    authorization-sensitive service call.
    """

    user_id: str
    roles: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, user_id: str, roles: Iterable[str] = ()) -> "CurrentPrincipal":
        return cls(user_id=user_id, roles=frozenset(roles))

    @classmethod
    def for_user(cls, user: User) -> "CurrentPrincipal":
        return cls.of(user.id, [user.role])

    @property
    def is_admin(self) -> bool:
        return ROLE_ADMIN in self.roles


@dataclass(frozen=True)
class IdentityClaims:
    """Identity assertion received from the external identity provider."""

    external_id: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = None
