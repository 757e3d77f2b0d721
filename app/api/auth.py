"""Session login/logout endpoints.

Authentication itself happens upstream: an authenticating reverse proxy
(oauth2-proxy or similar) completes the OAuth flow and forwards the
asserted identity in request headers, along with a shared secret
(``AUTH_PROXY_SECRET``) so clients cannot assert identities themselves.
``/auth/login`` turns that assertion into an internal user and a session
cookie.
"""
import hmac
import logging
from flask import Blueprint, abort, current_app, jsonify, request

from app.api.dependencies import get_user_service
from app.api.mappers import user_output
from app.api.security import end_session, login_required, start_session
from app.domain.entities.principal import IdentityClaims
from app.middleware.monitoring import track_request


auth_blueprint = Blueprint("auth", __name__, url_prefix="/auth")
_logger = logging.getLogger(__name__)


def _require_trusted_proxy() -> None:
    """
    Accept identity headers only from the proxy holding the shared secret.

    Raises:
        werkzeug.exceptions.Forbidden: If no proxy secret is configured
        werkzeug.exceptions.Unauthorized: If the request does not carry it
    """
    expected = current_app.config.get("AUTH_PROXY_SECRET")
    if not expected:
        abort(403, description="Header login is not enabled")

    supplied = request.headers.get(current_app.config["AUTH_PROXY_SECRET_HEADER"], "")
    if not hmac.compare_digest(supplied.encode(), expected.encode()):
        _logger.warning(f"Rejected login from {request.remote_addr}: bad proxy secret")
        abort(401, description="Untrusted identity assertion")


def _claims_from_headers() -> IdentityClaims:
    config = current_app.config
    return IdentityClaims(
        external_id=request.headers.get(config["AUTH_HEADER_EXTERNAL_ID"]),
        email=request.headers.get(config["AUTH_HEADER_EMAIL"]),
        full_name=request.headers.get(config["AUTH_HEADER_NAME"]),
    )


@auth_blueprint.route("/login", methods=["POST"])
@track_request("login")
def login():
    """
    Start a session for the identity asserted by the proxy.

    Returns:
        The internal user record; 401 when required claims or the proxy
        secret are missing, 403 when header login is disabled
    """
    _require_trusted_proxy()
    user = get_user_service().find_or_create(_claims_from_headers())
    start_session(user)
    _logger.info(f"User {user.id} logged in")
    return jsonify(user_output(user)), 200


@auth_blueprint.route("/logout", methods=["POST"])
@track_request("logout")
@login_required
def logout():
    end_session()
    return "", 204
