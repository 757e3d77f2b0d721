"""Current-principal resolution and access decorators.

The login endpoint stores ``user_id`` in Flask's signed session cookie.
Each request loads that user from the store and turns it into a
``CurrentPrincipal`` which views pass explicitly to the services, so role
changes apply to existing sessions.
"""
import functools
from typing import Callable, Optional
from flask import abort, g, session

from app.api.dependencies import get_user_service
from app.domain.entities.principal import CurrentPrincipal
from app.domain.entities.user import User

SESSION_USER_ID = "user_id"


def start_session(user: User) -> CurrentPrincipal:
    """Store the user's identity in the session cookie."""
    session.clear()
    session[SESSION_USER_ID] = user.id
    g.principal = CurrentPrincipal.for_user(user)
    return g.principal


def end_session() -> None:
    session.clear()
    g.pop("principal", None)


def get_current_principal() -> Optional[CurrentPrincipal]:
    """
    Resolve the caller of the in-flight request.

    The lookup runs once per request and is cached on ``flask.g``.

    Returns:
        CurrentPrincipal, or None for anonymous requests and for sessions
        whose user no longer exists
    """
    if "principal" in g:
        return g.principal

    user_id = session.get(SESSION_USER_ID)
    g.principal = get_user_service().resolve_principal(user_id) if user_id else None
    return g.principal


def require_principal() -> CurrentPrincipal:
    """
    Resolve the caller or abort with 401.

    Raises:
        werkzeug.exceptions.Unauthorized: If nobody is logged in
    """
    principal = get_current_principal()
    if principal is None:
        abort(401, description="Authentication required")
    return principal


def login_required(f: Callable) -> Callable:
    """Reject anonymous requests with 401."""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        require_principal()
        return f(*args, **kwargs)
    return wrapper


def admin_required(f: Callable) -> Callable:
    """Reject anonymous requests with 401 and non-admins with 403."""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        if not require_principal().is_admin:
            abort(403, description="Admin role required")
        return f(*args, **kwargs)
    return wrapper
