"""Shabads, lines, and the rows hanging off each line."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from gurbani_compiler.models.base import Record


class Content(Record):
    """A line's script rendering as printed by one publication."""

    internal_fields: ClassVar[frozenset[str]] = frozenset({"line_id", "publication_id"})

    line_id: str
    publication_id: int
    publication: str
    gurmukhi: str


class Translation(Record):
    """A line's meaning rendered by one translation source.

    ``additional_information`` is stored JSON-encoded and decoded at
    compile time.
    """

    internal_fields: ClassVar[frozenset[str]] = frozenset(
        {"line_id", "translation_source_id", "translation_source", "language"}
    )

    line_id: str
    translation_source_id: int
    translation_source: str
    language: str
    translation: str
    additional_information: str | None = None


class TranslationSource(Record):
    """Catalog entry for a translation, tied to a language and a source."""

    internal_fields: ClassVar[frozenset[str]] = frozenset({"id", "source_id", "language_id"})

    id: int
    source_id: int
    language_id: int
    name_gurmukhi: str = ""
    name_english: str = ""
    source: str
    language: str


class Line(Record):
    """A single line of a shabad."""

    internal_fields: ClassVar[frozenset[str]] = frozenset(
        {"shabad_id", "order_id", "first_letters", "vishraam_first_letters", "type_id", "gurmukhi"}
    )
    child_fields: ClassVar[tuple[str, ...]] = ("content", "translations")

    id: str
    shabad_id: str
    order_id: int
    source_page: int
    source_line: int | None = None
    first_letters: str = ""
    vishraam_first_letters: str | None = None
    gurmukhi: str = ""
    pronunciation: str | None = None
    pronunciation_information: str | None = None
    type_id: int | None = None
    type: str | None = None
    content: list[Content] = Field(default_factory=list)
    translations: list[Translation] = Field(default_factory=list)


class Shabad(Record):
    """A composition: an authored unit made of ordered lines."""

    internal_fields: ClassVar[frozenset[str]] = frozenset(
        {"source_id", "writer_id", "section_id", "subsection_id", "order_id"}
    )
    child_fields: ClassVar[tuple[str, ...]] = ("lines",)

    id: str
    source_id: int
    writer_id: int
    section_id: int
    subsection_id: int | None = None
    order_id: int
    sttm_id: int | None = None
    writer: str
    section: str
    subsection: str | None = None
    lines: list[Line] = Field(default_factory=list)


class LineMatch(Record):
    """A line returned by a search."""

    internal_fields: ClassVar[frozenset[str]] = frozenset()

    id: str
    shabad_id: str
    source_page: int
    gurmukhi: str
    first_letters: str
