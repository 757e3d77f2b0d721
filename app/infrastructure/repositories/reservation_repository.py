"""Redis-backed reservation repository."""
from typing import List, Optional, Tuple
import redis

from app.domain.entities.reservation import Reservation
from app.domain.interfaces.reservation_repository import IReservationRepository
from app.infrastructure.repositories.document_store import RedisDocumentRepository


class RedisReservationRepository(RedisDocumentRepository, IReservationRepository):
    """
    Reservation repository storing one JSON document per reservation.

    Keys (under the configured prefix):
    - ``reservation:<id>``: the document
    - ``reservations``: every reservation id, scored by ``reserved_at``
    - ``reservations:user:<user_id>``: ids owned by a user
    - ``reservations:book:<book_id>``: ids referencing a book

    A document and its index entries are written in one MULTI/EXEC
    transaction. Reservations are never deleted, so the indexes only grow.
    """

    def _doc_key(self, reservation_id: str) -> str:
        return self._key("reservation", reservation_id)

    def _all_index_key(self) -> str:
        return self._key("reservations")

    def _user_index_key(self, user_id: str) -> str:
        return self._key("reservations", "user", user_id)

    def _book_index_key(self, book_id: str) -> str:
        return self._key("reservations", "book", book_id)

    def add(self, reservation: Reservation) -> None:
        score = reservation.reserved_at.timestamp()
        try:
            pipe = self.redis.pipeline(transaction=True)
            pipe.set(self._doc_key(reservation.id), self._dump(reservation.to_dict()))
            pipe.zadd(self._all_index_key(), {reservation.id: score})
            pipe.zadd(self._user_index_key(reservation.user_id), {reservation.id: score})
            pipe.zadd(self._book_index_key(reservation.book_id), {reservation.id: score})
            pipe.execute()
        except redis.RedisError as e:
            self._logger.error(f"Error storing reservation {reservation.id}: {e}")
            raise
        self._logger.debug(f"Stored reservation {reservation.id}")

    def get_by_id(self, reservation_id: str) -> Optional[Reservation]:
        try:
            document = self._load(self.redis.get(self._doc_key(reservation_id)))
        except redis.RedisError as e:
            self._logger.error(f"Error retrieving reservation {reservation_id}: {e}")
            raise
        return Reservation.from_dict(document) if document else None

    def update(self, reservation: Reservation) -> Optional[Reservation]:
        """
        Replace the stored document and read it back in one transaction.

        The write is keyed by id only (``SET ... XX``); it does not compare
        the previous status.
        """
        key = self._doc_key(reservation.id)
        try:
            pipe = self.redis.pipeline(transaction=True)
            pipe.set(key, self._dump(reservation.to_dict()), xx=True)
            pipe.get(key)
            replaced, raw = pipe.execute()
        except redis.RedisError as e:
            self._logger.error(f"Error updating reservation {reservation.id}: {e}")
            raise

        if not replaced:
            self._logger.warning(f"Reservation {reservation.id} not found for update")
            return None
        return Reservation.from_dict(self._load(raw))

    def list_paged(
        self,
        offset: int,
        limit: int,
        user_id: Optional[str] = None
    ) -> Tuple[List[Reservation], int]:
        index_key = self._user_index_key(user_id) if user_id else self._all_index_key()
        try:
            documents, total = self._fetch_page(
                index_key, self._key("reservation", ""), offset, limit
            )
        except redis.RedisError as e:
            self._logger.error(f"Error listing reservations: {e}")
            raise
        return [Reservation.from_dict(document) for document in documents], total

    def has_reservations_for_book(self, book_id: str) -> bool:
        try:
            return self.redis.zcard(self._book_index_key(book_id)) > 0
        except redis.RedisError as e:
            self._logger.error(f"Error checking reservations for book {book_id}: {e}")
            raise
