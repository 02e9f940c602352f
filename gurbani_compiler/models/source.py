"""Source hierarchy: source, section, subsection."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from gurbani_compiler.models.base import Record


class Subsection(Record):
    """Second-level subdivision of a source."""

    internal_fields: ClassVar[frozenset[str]] = frozenset({"id", "section_id"})

    id: int
    section_id: int
    name_gurmukhi: str = ""
    name_english: str = ""
    start_page: int | None = None
    end_page: int | None = None


class Section(Record):
    """First-level subdivision of a source (e.g. a raag)."""

    internal_fields: ClassVar[frozenset[str]] = frozenset({"id", "source_id"})
    child_fields: ClassVar[tuple[str, ...]] = ("subsections",)

    id: int
    source_id: int
    name_gurmukhi: str = ""
    name_english: str = ""
    description: str | None = None
    start_page: int | None = None
    end_page: int | None = None
    subsections: list[Subsection] = Field(default_factory=list)


class Source(Record):
    """A top-level text collection, such as Sri Guru Granth Sahib Ji."""

    child_fields: ClassVar[tuple[str, ...]] = ("sections",)

    id: int
    name_gurmukhi: str = ""
    name_english: str = ""
    length: int | None = None
    page_name_gurmukhi: str | None = None
    page_name_english: str | None = None
    sections: list[Section] = Field(default_factory=list)
