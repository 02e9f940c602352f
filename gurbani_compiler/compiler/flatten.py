"""Flatten nested relational records into plain, ordered trees."""

from collections.abc import Iterable
from typing import Any

from gurbani_compiler.models import Record, Source, TranslationSource


def _sort_key(record: Record) -> Any:
    return record.id  # type: ignore[attr-defined]


def flatten(record: Record) -> dict[str, Any]:
    """Convert a record and its child collections into plain dicts.

    Internal keys and join-only foreign keys are dropped. Children are
    sorted by their key before being flattened, so the output depends only
    on the data and not on the order it was retrieved in.

    Args:
        record: Root record of the tree.

    Returns:
        The record's export view with each child collection as a list.
    """
    view = record.export_view()
    for field in record.child_fields:
        children = sorted(getattr(record, field), key=_sort_key)
        view[field] = [flatten(child) for child in children]
    return view


def flatten_all(records: Iterable[Record]) -> list[dict[str, Any]]:
    """Flatten a collection of root records, ordered by key."""
    return [flatten(record) for record in sorted(records, key=_sort_key)]


def flatten_sources(sources: Iterable[Source]) -> list[dict[str, Any]]:
    """Nest each source's sections, and each section's subsections."""
    return flatten_all(sources)


def flatten_translation_sources(
    translation_sources: Iterable[TranslationSource],
) -> list[dict[str, Any]]:
    """Export the translation source catalog with names instead of keys."""
    return flatten_all(translation_sources)
