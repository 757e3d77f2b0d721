"""Application services module.

Business logic services that are independent of the storage backend and
the HTTP layer.
"""
from app.application.services.book_service import BookService, BookInput
from app.application.services.reservation_service import ReservationService
from app.application.services.user_service import UserService

__all__ = [
    "BookService",
    "BookInput",
    "ReservationService",
    "UserService",
]
