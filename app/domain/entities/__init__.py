"""Domain entities - core business objects."""
from app.domain.entities.book import Book
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.entities.user import User, ROLE_USER, ROLE_ADMIN
from app.domain.entities.principal import CurrentPrincipal, IdentityClaims

__all__ = [
    "Book",
    "Reservation",
    "ReservationStatus",
    "User",
    "ROLE_USER",
    "ROLE_ADMIN",
    "CurrentPrincipal",
    "IdentityClaims",
]
