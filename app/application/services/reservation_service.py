"""Reservation lifecycle service (Service Layer Pattern).

Owns the reservation state transitions and the authorization rules that
decide which reservations a caller may see.
"""
import logging
from typing import List, Optional, Tuple

from app.domain.entities.principal import CurrentPrincipal
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.exceptions import (
    BookNotFoundError,
    OperationFailureError,
    ReservationNotFoundError,
)
from app.domain.interfaces.book_repository import IBookRepository
from app.domain.interfaces.reservation_repository import IReservationRepository


logger = logging.getLogger(__name__)


class ReservationService:
    """
    Service for creating, reading, cancelling and listing reservations.

    Visibility rules:
    - A reservation is visible to its owner and to admins.
    - A reservation that exists but is not visible is reported exactly like
      a missing one (``ReservationNotFoundError``).
    - Non-admin listings are always restricted to the caller's own
      reservations, whatever filter was requested.
    """

    def __init__(
        self,
        book_repository: IBookRepository,
        reservation_repository: IReservationRepository
    ):
        """
        Initialize reservation service.

        Args:
            book_repository: Book storage, used to check that books exist
            reservation_repository: Reservation storage (Dependency Injection)
        """
        self.book_repository = book_repository
        self.reservation_repository = reservation_repository
        self._logger = logging.getLogger(__name__)

    def create(self, book_id: str, user_id: str) -> Reservation:
        """
        Reserve a book for a user.

        A user may hold several active reservations on the same book.

        Args:
            book_id: Book to reserve
            user_id: Owner of the reservation

        Returns:
            The new, active reservation

        Raises:
            BookNotFoundError: If the book does not exist
            ValidationError: If either id is empty
        """
        if self.book_repository.get_by_id(book_id) is None:
            raise BookNotFoundError(book_id)

        reservation = Reservation(book_id=book_id, user_id=user_id)
        self.reservation_repository.add(reservation)

        self._logger.info(
            f"Created reservation {reservation.id} on book {book_id} for user {user_id}"
        )
        return reservation

    def get_by_id(
        self,
        principal: CurrentPrincipal,
        book_id: str,
        reservation_id: str
    ) -> Reservation:
        """
        Get a reservation of a book, as seen by the caller.

        Args:
            principal: The caller
            book_id: Book the reservation must belong to
            reservation_id: Reservation identifier

        Raises:
            ReservationNotFoundError: If the reservation does not exist,
                belongs to another book, or is not visible to the caller
        """
        reservation = self.reservation_repository.get_by_id(reservation_id)
        if reservation is None or reservation.book_id != book_id:
            raise ReservationNotFoundError(reservation_id)

        if not self._is_visible_to(principal, reservation):
            self._logger.warning(
                f"User {principal.user_id} denied access to reservation {reservation_id}"
            )
            raise ReservationNotFoundError(reservation_id)

        return reservation

    def cancel(
        self,
        principal: CurrentPrincipal,
        book_id: str,
        reservation_id: str
    ) -> Reservation:
        """
        Cancel an active reservation.

        Args:
            principal: The caller
            book_id: Book the reservation must belong to
            reservation_id: Reservation identifier

        Returns:
            The reservation as stored after the cancellation

        Raises:
            ReservationNotFoundError: See ``get_by_id``
            InvalidReservationStateError: If the reservation is already cancelled
            OperationFailureError: If the store did not return a cancelled reservation
        """
        reservation = self.get_by_id(principal, book_id, reservation_id)
        reservation.cancel()

        updated = self.reservation_repository.update(reservation)
        if updated is None or updated.status != ReservationStatus.CANCELLED:
            self._logger.error(
                f"Store did not confirm cancellation of reservation {reservation_id}"
            )
            raise OperationFailureError(
                f"Failed to update and retrieve reservation with ID {reservation_id}"
            )

        self._logger.info(f"Cancelled reservation {reservation_id} by user {principal.user_id}")
        return updated

    def list_paged(
        self,
        principal: CurrentPrincipal,
        offset: int,
        limit: int,
        user_id: Optional[str] = None
    ) -> Tuple[List[Reservation], int]:
        """
        List reservations visible to the caller.

        Admins get ``user_id`` honored as requested (None lists everyone).
        Other callers always get their own reservations.

        Returns:
            Tuple of (reservations on the page, total matching reservations)
        """
        effective_user_id = user_id if principal.is_admin else principal.user_id
        if effective_user_id != user_id:
            self._logger.debug(
                f"Listing filter {user_id!r} replaced by caller {principal.user_id}"
            )
        return self.reservation_repository.list_paged(offset, limit, effective_user_id)

    @staticmethod
    def _is_visible_to(principal: CurrentPrincipal, reservation: Reservation) -> bool:
        return principal.is_admin or reservation.user_id == principal.user_id
