"""Base record type with a declared export view."""

from typing import Any, ClassVar

from pydantic import BaseModel


class Record(BaseModel):
    """A row (or row tree) read from the corpus store.

    Subclasses declare which fields are internal (surrogate keys and
    join-only foreign keys) and which hold child collections. The export
    view is every other field, in declaration order.
    """

    internal_fields: ClassVar[frozenset[str]] = frozenset({"id"})
    child_fields: ClassVar[tuple[str, ...]] = ()

    def export_view(self) -> dict[str, Any]:
        """Return the display-relevant fields, without keys or children."""
        exclude = set(self.internal_fields) | set(self.child_fields)
        return self.model_dump(exclude=exclude)
