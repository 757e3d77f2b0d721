"""Book domain entity."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from app.domain.entities.identifiers import new_id
from app.domain.exceptions import ValidationError


def _require_text(field_name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required and cannot be blank.", field=field_name)


@dataclass
class Book:
    """Domain entity representing a catalog book."""

    title: str
    author: str
    synopsis: Optional[str] = ""
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        """Validate book entity."""
        _require_text("title", self.title)
        _require_text("author", self.author)
        if self.synopsis is None:
            self.synopsis = ""

    def apply_changes(self, title: str, author: str, synopsis: Optional[str] = None) -> None:
        """
        Overwrite the mutable fields.

        All values are validated before any of them is assigned, so a
        rejected update leaves the book untouched.

        Raises:
            ValidationError: If title or author is blank
        """
        _require_text("title", title)
        _require_text("author", author)
        self.title = title
        self.author = author
        self.synopsis = synopsis or ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "synopsis": self.synopsis,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        return cls(
            id=data["id"],
            title=data["title"],
            author=data["author"],
            synopsis=data.get("synopsis"),
        )
