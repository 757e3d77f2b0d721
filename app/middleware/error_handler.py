"""Error handling middleware with Sentry integration."""
import logging
from typing import Tuple
import redis
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from app.domain.exceptions import (
    AuthenticationDataError,
    ConflictError,
    LibraryError,
    NotFoundError,
    OperationFailureError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first
_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (ValidationError, 400),
    (ConflictError, 409),
    (AuthenticationDataError, 401),
    (OperationFailureError, 500),
    (redis.RedisError, 503),
)


def status_for(error: BaseException) -> int:
    """
    Map an exception to the HTTP status it is reported with.

    Args:
        error: Raised exception

    Returns:
        HTTP status code (500 for anything unknown)
    """
    if isinstance(error, HTTPException):
        return error.code or 500
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def _error_response(message: str, status: int) -> Tuple:
    return jsonify({"status": "error", "message": message}), status


def init_error_handlers(app: Flask) -> None:
    """
    Initialize error handlers for the application.

    Args:
        app: Flask application instance
    """
    sentry_dsn = app.config.get("SENTRY_DSN")
    if sentry_dsn:
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[FlaskIntegration()],
            traces_sample_rate=0.1,
            environment=app.config["ENV_NAME"],
        )
        logger.info("Sentry error tracking initialized")

    @app.errorhandler(LibraryError)
    def domain_error(error: LibraryError):
        """Translate domain errors."""
        status = status_for(error)
        if status >= 500:
            logger.error(f"Operation failed: {error}", exc_info=True)
            return _error_response("Internal server error", status)
        return _error_response(str(error), status)

    @app.errorhandler(redis.RedisError)
    def store_unavailable(error: redis.RedisError):
        """Handle document store failures."""
        logger.error(f"Document store error: {error}", exc_info=True)
        return _error_response("Storage temporarily unavailable", 503)

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        """Handle werkzeug HTTP errors (401, 403, 404, 405, 429, ...)."""
        return _error_response(error.description or error.name, error.code or 500)

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Internal server error: {error}", exc_info=True)
        return _error_response("Internal server error", 500)
