"""Data models for the Gurbani JSON compiler."""

from gurbani_compiler.models.bani import Bani, BaniLine, LineRange
from gurbani_compiler.models.base import Record
from gurbani_compiler.models.reference import (
    REFERENCE_MODELS,
    Language,
    LineType,
    Publication,
    ReferenceRecord,
    Writer,
)
from gurbani_compiler.models.shabad import (
    Content,
    Line,
    LineMatch,
    Shabad,
    Translation,
    TranslationSource,
)
from gurbani_compiler.models.source import Section, Source, Subsection

__all__ = [
    "REFERENCE_MODELS",
    "Bani",
    "BaniLine",
    "Content",
    "Language",
    "Line",
    "LineMatch",
    "LineRange",
    "LineType",
    "Publication",
    "Record",
    "ReferenceRecord",
    "Section",
    "Shabad",
    "Source",
    "Subsection",
    "Translation",
    "TranslationSource",
    "Writer",
]
