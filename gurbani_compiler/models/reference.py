"""Flat reference tables exported verbatim minus their keys."""

from pydantic import ConfigDict

from gurbani_compiler.models.base import Record


class ReferenceRecord(Record):
    """A row of a simple lookup table.

    Unknown columns are kept so the export mirrors the table.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    name_gurmukhi: str = ""
    name_english: str = ""


class Writer(ReferenceRecord):
    """Author of a shabad."""


class Language(ReferenceRecord):
    """Language of a translation."""


class Publication(ReferenceRecord):
    """Printed edition that a line's script rendering comes from."""


class LineType(ReferenceRecord):
    """Classification of a line (e.g. rahao, manglacharan)."""


REFERENCE_MODELS: dict[str, type[ReferenceRecord]] = {
    "writers": Writer,
    "languages": Language,
    "publications": Publication,
    "line_types": LineType,
}
