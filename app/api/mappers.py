"""Response shapes for the API."""
from typing import Any, Callable, Dict, Iterable, TypeVar
from flask import url_for

from app.domain.entities.book import Book
from app.domain.entities.reservation import Reservation
from app.domain.entities.user import User

T = TypeVar("T")


def book_output(book: Book) -> Dict[str, Any]:
    return {
        "id": book.id,
        "title": book.title,
        "author": book.author,
        "synopsis": book.synopsis,
        "links": {
            "self": url_for("books.get_book", book_id=book.id, _external=True),
            "reservations": url_for(
                "reservations.create_reservation", book_id=book.id, _external=True
            ),
        },
    }


def reservation_output(reservation: Reservation) -> Dict[str, Any]:
    return {
        "id": reservation.id,
        "book_id": reservation.book_id,
        "user_id": reservation.user_id,
        "reserved_at": reservation.reserved_at.isoformat(),
        "state": reservation.status.value,
    }


def user_output(user: User) -> Dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "full_name": user.full_name,
        "role": user.role,
    }


def list_response(
    items: Iterable[T],
    total_count: int,
    offset: int,
    limit: int,
    to_output: Callable[[T], Dict[str, Any]]
) -> Dict[str, Any]:
    """Wrap one page of entities with its paging metadata."""
    return {
        "items": [to_output(item) for item in items],
        "total_count": total_count,
        "offset": offset,
        "limit": limit,
    }
