"""Group a line's content and translations, and compile shabads."""

import json
import logging
from typing import Any

from gurbani_compiler.errors import DecodeError
from gurbani_compiler.models import Line, Shabad, Translation

logger = logging.getLogger(__name__)


def group_content(line: Line) -> dict[str, str]:
    """Map each publication name to the line's rendering in it."""
    return {content.publication: content.gurmukhi for content in line.content}


def decode_additional_information(translation: Translation) -> Any:
    """Decode a translation's JSON-encoded additional information.

    Raises:
        DecodeError: If the stored value is not valid JSON.
    """
    if translation.additional_information is None:
        return None
    try:
        return json.loads(translation.additional_information)
    except json.JSONDecodeError as e:
        raise DecodeError(
            f"Invalid additional_information for line {translation.line_id} "
            f"in translation source {translation.translation_source!r}: {e}",
            entity="translations",
            identifier=(translation.line_id, translation.translation_source),
        ) from e


def group_translations(line: Line) -> dict[str, dict[str, dict[str, Any]]]:
    """Group a line's translations by language, then translation source.

    Returns:
        ``{language: {translation source: translation fields}}``.
    """
    grouped: dict[str, dict[str, dict[str, Any]]] = {}
    for translation in line.translations:
        fields = translation.export_view()
        fields["additional_information"] = decode_additional_information(translation)
        grouped.setdefault(translation.language, {})[translation.translation_source] = fields
    return grouped


def compile_line(line: Line) -> dict[str, Any]:
    return {
        **line.export_view(),
        "gurmukhi": group_content(line),
        "translations": group_translations(line),
    }


def compile_shabad(shabad: Shabad) -> dict[str, Any]:
    """Compile a shabad and its lines into the artifact shape.

    Lines are expected in ``order_id`` order.
    """
    logger.debug("Compiling shabad %s", shabad.id)
    return {
        **shabad.export_view(),
        "lines": [compile_line(line) for line in shabad.lines],
    }
