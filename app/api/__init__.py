"""API endpoints module.

HTTP endpoints organized by resource. Views resolve the caller, parse
parameters and hand off to the application services.
"""

from app.api.auth import auth_blueprint
from app.api.books import books_blueprint
from app.api.health import health_blueprint
from app.api.reservations import reservations_blueprint

__all__ = [
    "auth_blueprint",
    "books_blueprint",
    "health_blueprint",
    "reservations_blueprint",
]
