"""Interface for book repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.domain.entities.book import Book


class IBookRepository(ABC):
    """
    Interface for book storage following Repository Pattern.

    Allows switching storage backends without changing business logic.
    """

    @abstractmethod
    def get_by_id(self, book_id: str) -> Optional[Book]:
        """
        Retrieve a book.

        Args:
            book_id: Book identifier

        Returns:
            Book if it exists, None otherwise
        """
        pass

    @abstractmethod
    def create(self, book: Book) -> None:
        """
        Store a new book.

        Args:
            book: Book to store
        """
        pass

    @abstractmethod
    def update(self, book: Book) -> bool:
        """
        Overwrite the stored title, author and synopsis of a book.

        Args:
            book: Book carrying the new values

        Returns:
            True if a stored book was replaced, False if it no longer exists
        """
        pass

    @abstractmethod
    def delete(self, book_id: str) -> bool:
        """
        Delete a book.

        Args:
            book_id: Book identifier

        Returns:
            True if a document was removed, False otherwise
        """
        pass

    @abstractmethod
    def list_paged(self, offset: int, limit: int) -> Tuple[List[Book], int]:
        """
        Retrieve one page of books.

        Args:
            offset: Number of books to skip
            limit: Maximum number of books to return

        Returns:
            Tuple of (books on the page, total number of books)
        """
        pass
