"""Health check endpoints."""
import logging
import redis
from flask import Blueprint, current_app, jsonify

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Basic health check endpoint.

    Returns:
        JSON response with health status
    """
    return jsonify({
        "status": "healthy",
        "service": "library-api"
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks the document store).

    Returns:
        JSON response with readiness status
    """
    checks = {
        "redis": False,
        "overall": False
    }

    try:
        container = current_app.config["service_container"]
        container.get_redis().ping()
        checks["redis"] = True
    except (redis.RedisError, ValueError) as e:
        _logger.error(f"Redis health check failed: {e}")

    checks["overall"] = checks["redis"]
    status_code = 200 if checks["overall"] else 503

    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """
    Liveness check endpoint (for Kubernetes).

    Returns:
        JSON response with liveness status
    """
    return jsonify({
        "status": "alive",
        "service": "library-api"
    }), 200
