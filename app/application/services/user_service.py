"""User account service (find-or-create on login)."""
import logging
from typing import Optional

from app.domain.entities.principal import CurrentPrincipal, IdentityClaims
from app.domain.entities.user import User
from app.domain.exceptions import AuthenticationDataError
from app.domain.interfaces.user_repository import IUserRepository


logger = logging.getLogger(__name__)


class UserService:
    """Maps external identities onto internal user records."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository
        self._logger = logging.getLogger(__name__)

    def find_or_create(self, claims: IdentityClaims) -> User:
        """
        Return the user for an identity assertion, creating it on first login.

        An existing record is returned as stored; email and name are not
        refreshed from later assertions.

        Args:
            claims: Identity assertion from the identity provider

        Returns:
            Existing or newly created user

        Raises:
            AuthenticationDataError: If external id, email or full name is missing or blank
        """
        required = (claims.external_id, claims.email, claims.full_name)
        if any(not (value and value.strip()) for value in required):
            self._logger.warning("Identity assertion is missing required claims")
            raise AuthenticationDataError()

        existing = self.user_repository.get_by_external_id(claims.external_id)
        if existing is not None:
            return existing

        user = User(
            external_id=claims.external_id,
            email=claims.email,
            full_name=claims.full_name,
        )
        created = self.user_repository.create(user)
        self._logger.info(f"Created user {created.id} for external id {claims.external_id}")
        return created

    def resolve_principal(self, user_id: str) -> Optional[CurrentPrincipal]:
        """
        Build the caller's principal from the stored user record.

        Roles are read from the store on every call, so a role change takes
        effect on sessions that already exist.

        Args:
            user_id: Internal user id kept in the session

        Returns:
            CurrentPrincipal, or None if the user no longer exists
        """
        user = self.user_repository.get_by_id(user_id)
        if user is None:
            self._logger.warning(f"Session refers to unknown user {user_id}")
            return None
        return CurrentPrincipal.for_user(user)
