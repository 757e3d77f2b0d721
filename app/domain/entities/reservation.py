"""Reservation domain entity and its state machine."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from app.domain.entities.identifiers import is_empty_id, new_id
from app.domain.exceptions import InvalidReservationStateError, ValidationError


class ReservationStatus(str, Enum):
    """Reservation lifecycle states. ``Cancelled`` is terminal."""

    ACTIVE = "Active"
    CANCELLED = "Cancelled"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Reservation:
    """
    Domain entity representing a user's claim on a book.

    A reservation starts ``Active`` and can only move to ``Cancelled``.
    It is never deleted.
    """

    book_id: str
    user_id: str
    id: str = field(default_factory=new_id)
    reserved_at: datetime = field(default_factory=_utcnow)
    status: ReservationStatus = ReservationStatus.ACTIVE

    def __post_init__(self):
        """Validate reservation entity."""
        if is_empty_id(self.book_id):
            raise ValidationError("Book ID cannot be empty.", field="book_id")
        if is_empty_id(self.user_id):
            raise ValidationError("User ID cannot be empty.", field="user_id")
        self.status = ReservationStatus(self.status)

    @property
    def is_active(self) -> bool:
        return self.status == ReservationStatus.ACTIVE

    def cancel(self) -> None:
        """
        Move the reservation from Active to Cancelled.

        Raises:
            InvalidReservationStateError: If the reservation is not active
        """
        if self.status != ReservationStatus.ACTIVE:
            raise InvalidReservationStateError()
        self.status = ReservationStatus.CANCELLED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "book_id": self.book_id,
            "user_id": self.user_id,
            "reserved_at": self.reserved_at.isoformat(),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Reservation":
        reserved_at = datetime.fromisoformat(data["reserved_at"])
        if reserved_at.tzinfo is None:
            reserved_at = reserved_at.replace(tzinfo=timezone.utc)
        return cls(
            id=data["id"],
            book_id=data["book_id"],
            user_id=data["user_id"],
            reserved_at=reserved_at,
            status=ReservationStatus(data["status"]),
        )
