"""Flask application factory with dependency injection."""
import logging
import sys
from typing import Optional
import redis
from flask import Flask, jsonify

from app.api import auth_blueprint, books_blueprint, health_blueprint, reservations_blueprint
from app.config.settings import get_config
from app.infrastructure.service_container import ServiceContainer
from app.middleware.error_handler import init_error_handlers
from app.middleware.monitoring import register_metrics_middleware
from app.middleware.rate_limiter import create_rate_limiter


def create_app(
    config_class: Optional[type] = None,
    redis_client: Optional[redis.Redis] = None
) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Args:
        config_class: Optional configuration class (for testing)
        redis_client: Optional Redis client replacing the pooled default (for testing)

    Returns:
        Configured Flask application

    Raises:
        ValueError: If the configuration is invalid
    """
    config = config_class or get_config()
    config.validate()

    app = Flask(__name__)
    app.config.from_object(config)

    _configure_logging(app.config.get("DEBUG", False))
    _logger = logging.getLogger(__name__)

    app.register_blueprint(health_blueprint)
    app.register_blueprint(auth_blueprint)
    app.register_blueprint(books_blueprint)
    app.register_blueprint(reservations_blueprint)

    @app.route("/", methods=["GET"])
    def root():
        """Root endpoint for testing."""
        return jsonify({
            "status": "ok",
            "service": "library-api",
            "message": "Service is running"
        }), 200

    _initialize_middleware(app)

    # Redis is connected lazily on the first request that needs it
    app.config['service_container'] = ServiceContainer(
        redis_client=redis_client,
        redis_url=app.config["REDIS_URL"],
        key_prefix=app.config["REDIS_KEY_PREFIX"]
    )

    _logger.info(f"Application ready - registered blueprints: {[bp.name for bp in app.blueprints.values()]}")
    return app


def _configure_logging(debug: bool) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )


def _initialize_middleware(app: Flask) -> None:
    """
    Initialize middleware (rate limiting, monitoring, error handling).

    Args:
        app: Flask application instance
    """
    app.config['limiter'] = create_rate_limiter(app)
    register_metrics_middleware(app)
    init_error_handlers(app)
