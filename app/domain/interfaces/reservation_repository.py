"""Interface for reservation repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.domain.entities.reservation import Reservation


class IReservationRepository(ABC):
    """
    Interface for reservation storage following Repository Pattern.

    Implementations must compute ``list_paged`` in a single atomic
    operation against the store: the total and the page have to describe
    the same point in time even while other requests insert or cancel.
    """

    @abstractmethod
    def add(self, reservation: Reservation) -> None:
        """
        Store a new reservation.

        Args:
            reservation: Reservation to store
        """
        pass

    @abstractmethod
    def get_by_id(self, reservation_id: str) -> Optional[Reservation]:
        """
        Retrieve a reservation.

        Args:
            reservation_id: Reservation identifier

        Returns:
            Reservation if it exists, None otherwise
        """
        pass

    @abstractmethod
    def update(self, reservation: Reservation) -> Optional[Reservation]:
        """
        Atomically replace a stored reservation, keyed by its id.

        Args:
            reservation: Reservation carrying the new state

        Returns:
            The reservation as stored after the replace, or None if no
            document was replaced
        """
        pass

    @abstractmethod
    def list_paged(
        self,
        offset: int,
        limit: int,
        user_id: Optional[str] = None
    ) -> Tuple[List[Reservation], int]:
        """
        Retrieve one page of reservations, optionally for a single user.

        Args:
            offset: Number of reservations to skip
            limit: Maximum number of reservations to return
            user_id: Only include reservations owned by this user (None = all)

        Returns:
            Tuple of (reservations on the page, total matching reservations)
        """
        pass

    @abstractmethod
    def has_reservations_for_book(self, book_id: str) -> bool:
        """
        Check whether any reservation (active or cancelled) references a book.

        Args:
            book_id: Book identifier

        Returns:
            True if at least one reservation exists for the book
        """
        pass
