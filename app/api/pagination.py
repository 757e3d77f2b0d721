"""Query-string parsing for paged listings."""
from typing import Tuple
from flask import current_app, request

from app.domain.exceptions import ValidationError


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer", field=name)


def parse_page_params() -> Tuple[int, int]:
    """
    Read ``offset`` and ``limit`` from the query string.

    Returns:
        Tuple of (offset, limit)

    Raises:
        ValidationError: If either value is not an integer or out of range
    """
    max_limit = current_app.config["MAX_PAGE_LIMIT"]
    offset = _int_arg("offset", 0)
    limit = _int_arg("limit", current_app.config["DEFAULT_PAGE_LIMIT"])

    if offset < 0:
        raise ValidationError("offset must be zero or greater", field="offset")
    if limit < 1 or limit > max_limit:
        raise ValidationError(f"limit must be between 1 and {max_limit}", field="limit")
    return offset, limit
