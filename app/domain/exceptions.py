"""Domain error taxonomy.

Services raise these; the HTTP layer translates them to responses in
``app.middleware.error_handler``. Ownership denial is reported as
``ReservationNotFoundError`` so callers cannot tell it apart from absence.
"""
from typing import Optional


class LibraryError(Exception):
    """Base class for all domain errors."""


class NotFoundError(LibraryError):
    """A requested resource does not exist or is not visible to the caller."""

    def __init__(self, resource_id: str, message: str):
        super().__init__(message)
        self.resource_id = resource_id


class BookNotFoundError(NotFoundError):
    def __init__(self, book_id: str):
        super().__init__(book_id, f"Book not found with id: {book_id}")


class ReservationNotFoundError(NotFoundError):
    def __init__(self, reservation_id: str):
        super().__init__(reservation_id, f"Reservation not found with id: {reservation_id}")


class ValidationError(LibraryError, ValueError):
    """An entity invariant was violated."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConflictError(LibraryError):
    """The operation conflicts with the current state of a resource."""


class InvalidReservationStateError(ConflictError):
    def __init__(self, message: str = "Only an active reservation can be cancelled."):
        super().__init__(message)


class BookHasReservationsError(ConflictError):
    def __init__(self, book_id: str):
        super().__init__(f"Book with id: {book_id} has reservations and cannot be deleted.")
        self.book_id = book_id


class OperationFailureError(LibraryError):
    """A store round trip did not produce the expected post-condition."""


class AuthenticationDataError(LibraryError):
    """Required identity claims are missing."""

    def __init__(self, message: str = "User claims are missing required information."):
        super().__init__(message)
