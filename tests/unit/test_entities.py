"""Tests for the Book, Reservation and User entities."""
from datetime import timezone

import pytest

from app.domain.entities.book import Book
from app.domain.entities.identifiers import NIL_ID
from app.domain.entities.principal import CurrentPrincipal
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.entities.user import ROLE_ADMIN, ROLE_USER, User
from app.domain.exceptions import InvalidReservationStateError, ValidationError


class TestReservation:
    def test_new_reservation_is_active(self):
        reservation = Reservation(book_id="book-1", user_id="user-1")

        assert reservation.status == ReservationStatus.ACTIVE
        assert reservation.is_active
        assert reservation.id
        assert reservation.reserved_at.tzinfo == timezone.utc

    def test_cancel_active_reservation(self):
        reservation = Reservation(book_id="book-1", user_id="user-1")

        reservation.cancel()

        assert reservation.status == ReservationStatus.CANCELLED
        assert not reservation.is_active

    def test_cancel_twice_is_refused(self):
        reservation = Reservation(book_id="book-1", user_id="user-1")
        reservation.cancel()

        with pytest.raises(InvalidReservationStateError) as exc_info:
            reservation.cancel()

        assert str(exc_info.value) == "Only an active reservation can be cancelled."
        assert reservation.status == ReservationStatus.CANCELLED

    @pytest.mark.parametrize("book_id", ["", "   ", None, NIL_ID])
    def test_empty_book_id_is_rejected(self, book_id):
        with pytest.raises(ValidationError) as exc_info:
            Reservation(book_id=book_id, user_id="user-1")
        assert exc_info.value.field == "book_id"

    @pytest.mark.parametrize("user_id", ["", None, NIL_ID])
    def test_empty_user_id_is_rejected(self, user_id):
        with pytest.raises(ValidationError) as exc_info:
            Reservation(book_id="book-1", user_id=user_id)
        assert exc_info.value.field == "user_id"

    def test_each_reservation_gets_its_own_id(self):
        first = Reservation(book_id="book-1", user_id="user-1")
        second = Reservation(book_id="book-1", user_id="user-1")
        assert first.id != second.id

    def test_document_round_trip_keeps_cancelled_state(self):
        reservation = Reservation(book_id="book-1", user_id="user-1")
        reservation.cancel()

        restored = Reservation.from_dict(reservation.to_dict())

        assert restored == reservation
        assert restored.status is ReservationStatus.CANCELLED


class TestBook:
    def test_construction_generates_id_and_defaults_synopsis(self):
        book = Book(title="T", author="A", synopsis=None)

        assert book.id
        assert book.title == "T"
        assert book.author == "A"
        assert book.synopsis == ""

    @pytest.mark.parametrize("field_name,kwargs", [
        ("title", {"title": "", "author": "A"}),
        ("title", {"title": "   ", "author": "A"}),
        ("title", {"title": None, "author": "A"}),
        ("author", {"title": "T", "author": "\t"}),
        ("author", {"title": "T", "author": None}),
    ])
    def test_blank_title_or_author_is_rejected(self, field_name, kwargs):
        with pytest.raises(ValidationError) as exc_info:
            Book(**kwargs)
        assert exc_info.value.field == field_name

    def test_apply_changes_overwrites_fields(self):
        book = Book(title="Old", author="Someone", synopsis="old")

        book.apply_changes("New", "Else", None)

        assert (book.title, book.author, book.synopsis) == ("New", "Else", "")

    def test_rejected_change_leaves_book_untouched(self):
        book = Book(title="Old", author="Someone", synopsis="keep")

        with pytest.raises(ValidationError):
            book.apply_changes("New", " ", "changed")

        assert (book.title, book.author, book.synopsis) == ("Old", "Someone", "keep")


class TestUser:
    def test_new_user_has_user_role(self):
        user = User(external_id="google-123", email="a@b.c", full_name="A B")

        assert user.role == ROLE_USER
        assert not user.is_admin
        assert user.created_at.tzinfo == timezone.utc

    def test_external_id_is_required(self):
        with pytest.raises(ValidationError):
            User(external_id="", email="a@b.c", full_name="A B")

    def test_principal_for_admin_user(self):
        user = User(external_id="google-1", email="a@b.c", full_name="A", role=ROLE_ADMIN)

        principal = CurrentPrincipal.for_user(user)

        assert principal.user_id == user.id
        assert principal.is_admin
