"""Reservation endpoints."""
from uuid import UUID
from flask import Blueprint, jsonify, request, url_for

from app.api.dependencies import get_reservation_service
from app.api.mappers import list_response, reservation_output
from app.api.pagination import parse_page_params
from app.api.security import login_required, require_principal
from app.domain.exceptions import ValidationError
from app.middleware.monitoring import track_request, track_reservation_event


reservations_blueprint = Blueprint("reservations", __name__)


def _user_id_filter():
    raw = request.args.get("user_id")
    if not raw:
        return None
    try:
        return str(UUID(raw))
    except ValueError:
        raise ValidationError("user_id must be a UUID", field="user_id")


@reservations_blueprint.route("/books/<uuid:book_id>/reservations", methods=["POST"])
@track_request("create_reservation")
@login_required
def create_reservation(book_id: UUID):
    """Reserve a book for the logged-in user."""
    principal = require_principal()
    reservation = get_reservation_service().create(str(book_id), principal.user_id)
    track_reservation_event("created")

    location = url_for(
        "reservations.get_reservation",
        book_id=reservation.book_id,
        reservation_id=reservation.id,
        _external=True,
    )
    return jsonify(reservation_output(reservation)), 201, {"Location": location}


@reservations_blueprint.route(
    "/books/<uuid:book_id>/reservations/<uuid:reservation_id>", methods=["GET"]
)
@track_request("get_reservation")
@login_required
def get_reservation(book_id: UUID, reservation_id: UUID):
    """Get a reservation. Answers 404 when it belongs to someone else (unless Admin)."""
    reservation = get_reservation_service().get_by_id(
        require_principal(), str(book_id), str(reservation_id)
    )
    return jsonify(reservation_output(reservation)), 200


@reservations_blueprint.route(
    "/books/<uuid:book_id>/reservations/<uuid:reservation_id>", methods=["DELETE"]
)
@track_request("cancel_reservation")
@login_required
def cancel_reservation(book_id: UUID, reservation_id: UUID):
    """Cancel a reservation and return it in its cancelled state."""
    reservation = get_reservation_service().cancel(
        require_principal(), str(book_id), str(reservation_id)
    )
    track_reservation_event("cancelled")
    return jsonify(reservation_output(reservation)), 200


@reservations_blueprint.route("/reservations", methods=["GET"])
@track_request("list_reservations")
@login_required
def list_reservations():
    """
    List reservations visible to the caller.

    Query parameters:
        offset: Reservations to skip (default 0)
        limit: Page size (default DEFAULT_PAGE_LIMIT)
        user_id: Owner filter; only honored for admins
    """
    offset, limit = parse_page_params()
    reservations, total_count = get_reservation_service().list_paged(
        require_principal(), offset, limit, _user_id_filter()
    )
    return jsonify(
        list_response(reservations, total_count, offset, limit, reservation_output)
    ), 200
