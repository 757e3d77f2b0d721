"""Book catalog endpoints."""
from uuid import UUID
from flask import Blueprint, jsonify

from app.api.dependencies import get_book_service, get_json_body
from app.api.mappers import book_output, list_response
from app.api.pagination import parse_page_params
from app.api.security import admin_required
from app.application.services.book_service import BookInput
from app.middleware.monitoring import track_request


books_blueprint = Blueprint("books", __name__)


def _book_input() -> BookInput:
    body = get_json_body()
    return BookInput(
        title=body.get("title"),
        author=body.get("author"),
        synopsis=body.get("synopsis"),
    )


@books_blueprint.route("/books", methods=["GET"])
@track_request("list_books")
def list_books():
    """
    List books, one page at a time. Open to anonymous callers.

    Query parameters:
        offset: Books to skip (default 0)
        limit: Page size (default DEFAULT_PAGE_LIMIT)
    """
    offset, limit = parse_page_params()
    books, total_count = get_book_service().list_paged(offset, limit)
    return jsonify(list_response(books, total_count, offset, limit, book_output)), 200


@books_blueprint.route("/books/<uuid:book_id>", methods=["GET"])
@track_request("get_book")
def get_book(book_id: UUID):
    book = get_book_service().get_by_id(str(book_id))
    return jsonify(book_output(book)), 200


@books_blueprint.route("/books", methods=["POST"])
@track_request("create_book")
@admin_required
def create_book():
    """
    Create a book (Admin only).

    Expected payload:
    {
        "title": "Dune",           # Required, non-blank
        "author": "Frank Herbert", # Required, non-blank
        "synopsis": "..."          # Optional
    }
    """
    book = get_book_service().create(_book_input())
    output = book_output(book)
    return jsonify(output), 201, {"Location": output["links"]["self"]}


@books_blueprint.route("/books/<uuid:book_id>", methods=["PUT"])
@track_request("update_book")
@admin_required
def update_book(book_id: UUID):
    book = get_book_service().update(_book_input(), str(book_id))
    return jsonify(book_output(book)), 200


@books_blueprint.route("/books/<uuid:book_id>", methods=["DELETE"])
@track_request("delete_book")
@admin_required
def delete_book(book_id: UUID):
    """Delete a book (Admin only). Refused with 409 while reservations reference it."""
    get_book_service().delete(str(book_id))
    return "", 204
