"""Domain interfaces following Dependency Inversion Principle."""

from app.domain.interfaces.book_repository import IBookRepository
from app.domain.interfaces.reservation_repository import IReservationRepository
from app.domain.interfaces.user_repository import IUserRepository

__all__ = [
    "IBookRepository",
    "IReservationRepository",
    "IUserRepository",
]
