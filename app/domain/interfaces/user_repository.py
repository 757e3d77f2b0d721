"""Interface for user repository (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.user import User


class IUserRepository(ABC):
    """Interface for user account storage."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by internal id.

        Args:
            user_id: Internal user identifier

        Returns:
            User if it exists, None otherwise
        """
        pass

    @abstractmethod
    def get_by_external_id(self, external_id: str) -> Optional[User]:
        """
        Retrieve a user by the identity provider's subject id.

        Args:
            external_id: External identity identifier

        Returns:
            User if it exists, None otherwise
        """
        pass

    @abstractmethod
    def create(self, user: User) -> User:
        """
        Store a new user.

        Args:
            user: User to store

        Returns:
            The user record as stored
        """
        pass
