"""Group compiled shabads into pages."""

from collections.abc import Iterable, Mapping
from typing import Any

from gurbani_compiler.errors import CompilerError


def shabad_page(shabad: Mapping[str, Any]) -> int:
    """Return the page of a compiled shabad's first line.

    Raises:
        CompilerError: If the shabad has no lines.
    """
    lines = shabad.get("lines") or []
    if not lines:
        raise CompilerError(
            f"Shabad {shabad.get('id')!r} has no lines to paginate by",
            entity="shabads",
            identifier=shabad.get("id"),
        )
    return lines[0]["source_page"]


def page_label_width(pages: Iterable[int]) -> int:
    """Number of digits in the highest page, used to zero-pad labels."""
    return len(str(max(pages, default=0)))


def group_by_page(shabads: Iterable[Mapping[str, Any]]) -> dict[int, list[Mapping[str, Any]]]:
    """Group shabads by page, keeping their order within each page."""
    pages: dict[int, list[Mapping[str, Any]]] = {}
    for shabad in shabads:
        pages.setdefault(shabad_page(shabad), []).append(shabad)
    return dict(sorted(pages.items()))


def paginate(shabads: Iterable[Mapping[str, Any]]) -> dict[str, list[Mapping[str, Any]]]:
    """Group shabads by page and label each page with a zero-padded number.

    Args:
        shabads: One source's compiled shabads, in shabad order.

    Returns:
        Mapping of page label to the shabads starting on that page, in
        ascending page order.
    """
    pages = group_by_page(shabads)
    width = page_label_width(pages)
    return {str(page).zfill(width): members for page, members in pages.items()}
