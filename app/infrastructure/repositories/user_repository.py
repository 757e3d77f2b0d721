"""Redis-backed user repository."""
from typing import Optional
import redis

from app.domain.entities.user import User
from app.domain.interfaces.user_repository import IUserRepository
from app.infrastructure.repositories.document_store import RedisDocumentRepository


class RedisUserRepository(RedisDocumentRepository, IUserRepository):
    """
    User repository keyed by internal id, with a unique external-id lookup.

    ``user:external:<external_id>`` points at the internal id and is claimed
    with ``SET NX`` so two logins racing on the same identity end up with a
    single record.
    """

    def _doc_key(self, user_id: str) -> str:
        return self._key("user", user_id)

    def _external_key(self, external_id: str) -> str:
        return self._key("user", "external", external_id)

    def _read(self, user_id: str) -> Optional[User]:
        document = self._load(self.redis.get(self._doc_key(user_id)))
        return User.from_dict(document) if document else None

    def get_by_id(self, user_id: str) -> Optional[User]:
        try:
            return self._read(user_id)
        except redis.RedisError as e:
            self._logger.error(f"Error retrieving user {user_id}: {e}")
            raise

    def get_by_external_id(self, external_id: str) -> Optional[User]:
        try:
            user_id = self.redis.get(self._external_key(external_id))
            if user_id is None:
                return None
            return self._read(user_id)
        except redis.RedisError as e:
            self._logger.error(f"Error retrieving user for external id {external_id}: {e}")
            raise

    def create(self, user: User) -> User:
        try:
            self.redis.set(self._doc_key(user.id), self._dump(user.to_dict()))
            claimed = self.redis.set(self._external_key(user.external_id), user.id, nx=True)
            if not claimed:
                # Another request created this identity first; keep its record
                self.redis.delete(self._doc_key(user.id))
                self._logger.warning(
                    f"External id {user.external_id} already registered, returning existing user"
                )
                existing = self.get_by_external_id(user.external_id)
                if existing is not None:
                    return existing
                raise redis.RedisError(
                    f"User for external id {user.external_id} vanished during create"
                )
            stored = self._read(user.id)
        except redis.RedisError as e:
            self._logger.error(f"Error storing user {user.id}: {e}")
            raise
        if stored is None:
            raise redis.RedisError(f"User {user.id} missing right after create")
        return stored
