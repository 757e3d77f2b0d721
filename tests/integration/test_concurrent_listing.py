"""Listing while writers are adding: every page must agree with its total."""
import threading

from app.domain.entities.reservation import Reservation
from app.infrastructure.repositories.reservation_repository import RedisReservationRepository
from tests.conftest import USER1_ID

WRITES = 200


def test_count_and_page_are_read_together(redis_client):
    writer_repository = RedisReservationRepository(redis_client, key_prefix="test")
    reader_repository = RedisReservationRepository(redis_client, key_prefix="test")
    done = threading.Event()
    errors = []

    def writer():
        try:
            for _ in range(WRITES):
                writer_repository.add(Reservation(book_id="book-1", user_id=USER1_ID))
        except Exception as e:  # surfaced by the assertion below
            errors.append(e)
        finally:
            done.set()

    thread = threading.Thread(target=writer)
    thread.start()

    observed = []
    while not done.is_set():
        items, total = reader_repository.list_paged(0, WRITES * 2)
        assert len(items) == total
        observed.append(total)
    thread.join()

    assert not errors
    assert observed == sorted(observed)
    items, total = reader_repository.list_paged(0, WRITES * 2)
    assert total == WRITES
    assert len(items) == WRITES
