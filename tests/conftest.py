"""Shared fixtures: in-memory Redis, app, logged-in clients."""
import uuid
from unittest.mock import MagicMock

import fakeredis
import pytest

from app import create_app
from app.application.services.book_service import BookService
from app.application.services.reservation_service import ReservationService
from app.application.services.user_service import UserService
from app.config.settings import TestingConfig
from app.domain.entities.principal import CurrentPrincipal
from app.domain.entities.user import ROLE_ADMIN, ROLE_USER, User
from app.domain.interfaces.book_repository import IBookRepository
from app.domain.interfaces.reservation_repository import IReservationRepository
from app.domain.interfaces.user_repository import IUserRepository
from app.infrastructure.repositories.book_repository import RedisBookRepository
from app.infrastructure.repositories.reservation_repository import RedisReservationRepository
from app.infrastructure.repositories.user_repository import RedisUserRepository

ADMIN_ID = str(uuid.uuid4())
USER1_ID = str(uuid.uuid4())
USER2_ID = str(uuid.uuid4())


# --- Unit-level fixtures (mocked repositories) ---

@pytest.fixture
def book_repository():
    return MagicMock(spec=IBookRepository)


@pytest.fixture
def reservation_repository():
    return MagicMock(spec=IReservationRepository)


@pytest.fixture
def user_repository():
    return MagicMock(spec=IUserRepository)


@pytest.fixture
def book_service(book_repository, reservation_repository):
    return BookService(book_repository, reservation_repository)


@pytest.fixture
def reservation_service(book_repository, reservation_repository):
    return ReservationService(book_repository, reservation_repository)


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.fixture
def admin():
    return CurrentPrincipal.of(ADMIN_ID, [ROLE_ADMIN])


@pytest.fixture
def user1():
    return CurrentPrincipal.of(USER1_ID, [ROLE_USER])


@pytest.fixture
def user2():
    return CurrentPrincipal.of(USER2_ID, [ROLE_USER])


# --- Store-level fixtures (fakeredis) ---

@pytest.fixture
def redis_server():
    return fakeredis.FakeServer()


@pytest.fixture
def redis_client(redis_server):
    return fakeredis.FakeRedis(server=redis_server, decode_responses=True)


@pytest.fixture
def redis_book_repository(redis_client):
    return RedisBookRepository(redis_client, key_prefix="test")


@pytest.fixture
def redis_reservation_repository(redis_client):
    return RedisReservationRepository(redis_client, key_prefix="test")


@pytest.fixture
def redis_user_repository(redis_client):
    return RedisUserRepository(redis_client, key_prefix="test")


# --- HTTP-level fixtures ---

@pytest.fixture
def app(redis_client):
    application = create_app(TestingConfig, redis_client=redis_client)
    return application


def _client_for(app, user_id=None, role=ROLE_USER):
    client = app.test_client()
    if user_id:
        app.config["service_container"].get_user_repository().create(User(
            id=user_id,
            external_id=f"ext-{user_id}",
            email=f"{user_id}@example.com",
            full_name=f"User {user_id}",
            role=role,
        ))
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
    return client


@pytest.fixture
def anonymous_client(app):
    return _client_for(app)


@pytest.fixture
def admin_client(app):
    return _client_for(app, ADMIN_ID, ROLE_ADMIN)


@pytest.fixture
def user1_client(app):
    return _client_for(app, USER1_ID)


@pytest.fixture
def user2_client(app):
    return _client_for(app, USER2_ID)
