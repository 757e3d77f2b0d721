"""Access to the services held by the app's service container."""
from typing import Any, Dict
from flask import current_app, request

from app.application.services.book_service import BookService
from app.application.services.reservation_service import ReservationService
from app.application.services.user_service import UserService
from app.domain.exceptions import ValidationError
from app.infrastructure.service_container import ServiceContainer


def _get_container() -> ServiceContainer:
    """
    Get service container from the current app.

    Raises:
        RuntimeError: If service container is not available
    """
    container = current_app.config.get('service_container')
    if not container:
        raise RuntimeError("Service container not available")
    return container


def get_book_service() -> BookService:
    return _get_container().get_book_service()


def get_reservation_service() -> ReservationService:
    return _get_container().get_reservation_service()


def get_user_service() -> UserService:
    return _get_container().get_user_service()


def get_json_body() -> Dict[str, Any]:
    """
    Return the request's JSON object.

    Raises:
        ValidationError: If the body is missing or not a JSON object
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
