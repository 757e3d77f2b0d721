"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional
import redis

from app.application.services.book_service import BookService
from app.application.services.reservation_service import ReservationService
from app.application.services.user_service import UserService
from app.config.settings import Config
from app.domain.interfaces.book_repository import IBookRepository
from app.domain.interfaces.reservation_repository import IReservationRepository
from app.domain.interfaces.user_repository import IUserRepository
from app.infrastructure.redis_client import RedisClientFactory
from app.infrastructure.repositories.book_repository import RedisBookRepository
from app.infrastructure.repositories.reservation_repository import RedisReservationRepository
from app.infrastructure.repositories.user_repository import RedisUserRepository


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    One container lives in ``app.config['service_container']``. Repositories
    and services are created lazily and shared by every request of that app.
    """

    def __init__(
        self,
        redis_client: Optional[redis.Redis] = None,
        redis_url: Optional[str] = None,
        key_prefix: Optional[str] = None
    ):
        """
        Initialize service container.

        Args:
            redis_client: Redis client to use instead of the pooled default (tests)
            redis_url: Redis URL used when no client is injected
            key_prefix: Namespace for every Redis key
        """
        self._redis = redis_client
        self._redis_url = redis_url or Config.REDIS_URL
        self._key_prefix = key_prefix or Config.REDIS_KEY_PREFIX
        self._book_repository: Optional[IBookRepository] = None
        self._reservation_repository: Optional[IReservationRepository] = None
        self._user_repository: Optional[IUserRepository] = None
        self._book_service: Optional[BookService] = None
        self._reservation_service: Optional[ReservationService] = None
        self._user_service: Optional[UserService] = None
        self._logger = logging.getLogger(__name__)

    def get_redis(self) -> redis.Redis:
        """Get the Redis client, connecting through the factory on first use."""
        if self._redis is None:
            self._redis = RedisClientFactory.get_client(self._redis_url)
        return self._redis

    def get_book_repository(self) -> IBookRepository:
        """Get or create book repository instance."""
        if self._book_repository is None:
            self._book_repository = RedisBookRepository(self.get_redis(), self._key_prefix)
            self._logger.info("BookRepository created")
        return self._book_repository

    def get_reservation_repository(self) -> IReservationRepository:
        """Get or create reservation repository instance."""
        if self._reservation_repository is None:
            self._reservation_repository = RedisReservationRepository(
                self.get_redis(), self._key_prefix
            )
            self._logger.info("ReservationRepository created")
        return self._reservation_repository

    def get_user_repository(self) -> IUserRepository:
        """Get or create user repository instance."""
        if self._user_repository is None:
            self._user_repository = RedisUserRepository(self.get_redis(), self._key_prefix)
            self._logger.info("UserRepository created")
        return self._user_repository

    def get_book_service(self) -> BookService:
        """Get or create book service instance."""
        if self._book_service is None:
            self._book_service = BookService(
                book_repository=self.get_book_repository(),
                reservation_repository=self.get_reservation_repository()
            )
        return self._book_service

    def get_reservation_service(self) -> ReservationService:
        """Get or create reservation service instance."""
        if self._reservation_service is None:
            self._reservation_service = ReservationService(
                book_repository=self.get_book_repository(),
                reservation_repository=self.get_reservation_repository()
            )
        return self._reservation_service

    def get_user_service(self) -> UserService:
        """Get or create user service instance."""
        if self._user_service is None:
            self._user_service = UserService(user_repository=self.get_user_repository())
        return self._user_service
