"""Repository implementations (Infrastructure Layer).

Redis-backed implementations of the interfaces in app.domain.interfaces.
"""
from app.infrastructure.repositories.book_repository import RedisBookRepository
from app.infrastructure.repositories.reservation_repository import RedisReservationRepository
from app.infrastructure.repositories.user_repository import RedisUserRepository

__all__ = [
    "RedisBookRepository",
    "RedisReservationRepository",
    "RedisUserRepository",
]
