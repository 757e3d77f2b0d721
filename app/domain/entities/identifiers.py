"""Identifier helpers shared by the entities."""
import uuid
from typing import Optional

NIL_ID = str(uuid.UUID(int=0))


def new_id() -> str:
    """Generate a new opaque identifier."""
    return str(uuid.uuid4())


def is_empty_id(value: Optional[str]) -> bool:
    """Return True for None, blank strings and the nil UUID."""
    if value is None:
        return True
    value = str(value).strip()
    return not value or value == NIL_ID
