"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask import Flask, session
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


def get_limiter_key() -> str:
    """
    Get rate limit key based on the logged-in user or IP address.

    Returns:
        String key for rate limiting
    """
    user_id = session.get("user_id")
    if user_id:
        return f"rate_limit:user:{user_id}"
    return get_remote_address()


def create_rate_limiter(app: Flask) -> Limiter:
    """
    Create and configure Flask-Limiter instance.

    Args:
        app: Flask application instance

    Returns:
        Configured Limiter instance
    """
    if not app.config.get("RATELIMIT_ENABLED", True):
        # Limiter stays registered but enforces nothing
        return Limiter(
            app=app,
            key_func=get_remote_address,
            default_limits=[],
            storage_uri="memory://",
            enabled=False
        )

    default_limits = [
        limit.strip()
        for limit in app.config.get("RATELIMIT_DEFAULT", "").split(";")
        if limit.strip()
    ]

    limiter = Limiter(
        app=app,
        key_func=get_limiter_key,
        default_limits=default_limits,
        storage_uri=app.config["RATELIMIT_STORAGE_URL"],
        strategy="fixed-window",
        headers_enabled=True
    )
    logging.info(f"Rate limiting enabled: {default_limits}")
    return limiter
