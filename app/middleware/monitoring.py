"""Monitoring and metrics middleware using Prometheus."""
import functools
import logging
import time
from typing import Callable
from flask import Flask, request
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from app.middleware.error_handler import status_for

logger = logging.getLogger(__name__)

# Prometheus metrics
http_requests_total = Counter(
    'library_http_requests_total',
    'Total number of API requests',
    ['method', 'endpoint', 'status']
)

http_request_duration = Histogram(
    'library_http_request_duration_seconds',
    'Time spent processing API requests',
    ['endpoint'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
)

reservation_events_total = Counter(
    'library_reservation_events_total',
    'Reservation lifecycle events',
    ['event']
)


def register_metrics_middleware(app: Flask) -> None:
    """
    Register the Prometheus metrics endpoint.

    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS"):
        return

    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}

    logger.info("Prometheus metrics enabled at /metrics")


def track_request(endpoint: str):
    """
    Decorator to track request count and latency for an endpoint.

    Errors raised by the view are counted with the status the error
    handler will answer with, then re-raised.

    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                response = f(*args, **kwargs)
            except Exception as e:
                http_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=status_for(e)
                ).inc()
                raise
            finally:
                http_request_duration.labels(endpoint=endpoint).observe(time.time() - start_time)

            status_code = response[1] if isinstance(response, tuple) else 200
            http_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code
            ).inc()
            return response
        return wrapper
    return decorator


def track_reservation_event(event: str) -> None:
    """
    Count a reservation lifecycle event.

    Args:
        event: Event name ('created', 'cancelled')
    """
    reservation_events_total.labels(event=event).inc()
