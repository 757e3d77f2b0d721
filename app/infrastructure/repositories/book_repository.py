"""Redis-backed book repository."""
import time
from typing import List, Optional, Tuple
import redis

from app.domain.entities.book import Book
from app.domain.interfaces.book_repository import IBookRepository
from app.infrastructure.repositories.document_store import RedisDocumentRepository


class RedisBookRepository(RedisDocumentRepository, IBookRepository):
    """
    Book repository storing one JSON document per book.

    Books are listed in creation order through the ``books`` sorted set.
    """

    def _doc_key(self, book_id: str) -> str:
        return self._key("book", book_id)

    def _index_key(self) -> str:
        return self._key("books")

    def get_by_id(self, book_id: str) -> Optional[Book]:
        try:
            document = self._load(self.redis.get(self._doc_key(book_id)))
        except redis.RedisError as e:
            self._logger.error(f"Error retrieving book {book_id}: {e}")
            raise
        return Book.from_dict(document) if document else None

    def create(self, book: Book) -> None:
        try:
            pipe = self.redis.pipeline(transaction=True)
            pipe.set(self._doc_key(book.id), self._dump(book.to_dict()))
            pipe.zadd(self._index_key(), {book.id: time.time()})
            pipe.execute()
        except redis.RedisError as e:
            self._logger.error(f"Error storing book {book.id}: {e}")
            raise
        self._logger.debug(f"Stored book {book.id}")

    def update(self, book: Book) -> bool:
        try:
            # XX: an update never resurrects a deleted book
            updated = self.redis.set(self._doc_key(book.id), self._dump(book.to_dict()), xx=True)
        except redis.RedisError as e:
            self._logger.error(f"Error updating book {book.id}: {e}")
            raise
        if not updated:
            self._logger.warning(f"Update skipped, book {book.id} no longer exists")
        return bool(updated)

    def delete(self, book_id: str) -> bool:
        try:
            pipe = self.redis.pipeline(transaction=True)
            pipe.delete(self._doc_key(book_id))
            pipe.zrem(self._index_key(), book_id)
            deleted, _ = pipe.execute()
        except redis.RedisError as e:
            self._logger.error(f"Error deleting book {book_id}: {e}")
            raise
        return deleted == 1

    def list_paged(self, offset: int, limit: int) -> Tuple[List[Book], int]:
        try:
            documents, total = self._fetch_page(
                self._index_key(), self._key("book", ""), offset, limit
            )
        except redis.RedisError as e:
            self._logger.error(f"Error listing books: {e}")
            raise
        return [Book.from_dict(document) for document in documents], total
