"""Book catalog service (Service Layer Pattern)."""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from app.domain.entities.book import Book
from app.domain.exceptions import BookHasReservationsError, BookNotFoundError
from app.domain.interfaces.book_repository import IBookRepository
from app.domain.interfaces.reservation_repository import IReservationRepository


logger = logging.getLogger(__name__)


@dataclass
class BookInput:
    """Values supplied when creating or updating a book."""
    title: str
    author: str
    synopsis: Optional[str] = None


class BookService:
    """
    Service enforcing the book catalog invariants.

    Title and author validation lives in the ``Book`` entity; this service
    adds existence checks and refuses to delete books that are still
    referenced by reservations.
    """

    def __init__(
        self,
        book_repository: IBookRepository,
        reservation_repository: IReservationRepository
    ):
        """
        Initialize book service.

        Args:
            book_repository: Book storage (Dependency Injection)
            reservation_repository: Reservation storage, used for delete checks
        """
        self.book_repository = book_repository
        self.reservation_repository = reservation_repository
        self._logger = logging.getLogger(__name__)

    def get_by_id(self, book_id: str) -> Book:
        """
        Get a book by id.

        Raises:
            BookNotFoundError: If the book does not exist
        """
        book = self.book_repository.get_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def create(self, book_input: BookInput) -> Book:
        """
        Create and store a new book.

        Args:
            book_input: Title, author and optional synopsis

        Returns:
            The new book with a freshly generated id

        Raises:
            ValidationError: If title or author is blank
        """
        book = Book(
            title=book_input.title,
            author=book_input.author,
            synopsis=book_input.synopsis,
        )
        self.book_repository.create(book)
        self._logger.info(f"Created book {book.id}")
        return book

    def update(self, book_input: BookInput, book_id: str) -> Book:
        """
        Overwrite the mutable fields of an existing book.

        Raises:
            BookNotFoundError: If the book does not exist
            ValidationError: If title or author is blank
        """
        book = self.get_by_id(book_id)
        book.apply_changes(book_input.title, book_input.author, book_input.synopsis)
        if not self.book_repository.update(book):
            # Removed by a concurrent request between the fetch and the write
            raise BookNotFoundError(book_id)
        self._logger.info(f"Updated book {book_id}")
        return book

    def delete(self, book_id: str) -> None:
        """
        Delete a book that no reservation references.

        Raises:
            BookNotFoundError: If the book does not exist
            BookHasReservationsError: If any reservation references the book
        """
        self.get_by_id(book_id)

        if self.reservation_repository.has_reservations_for_book(book_id):
            self._logger.warning(f"Refused to delete book {book_id}: reservations exist")
            raise BookHasReservationsError(book_id)

        if not self.book_repository.delete(book_id):
            # Removed by a concurrent request between the fetch and the delete
            raise BookNotFoundError(book_id)

        self._logger.info(f"Deleted book {book_id}")

    def list_paged(self, offset: int, limit: int) -> Tuple[List[Book], int]:
        """Return one page of books and the total number of books."""
        return self.book_repository.list_paged(offset, limit)
