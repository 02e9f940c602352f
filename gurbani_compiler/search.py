"""Ranked substring search over line text.

Builds the filter and ordering for a partial-match query. Results are
always filtered with a contains match; when ranking is enabled they are
ordered so that exact matches come first, then prefix matches, then
matches anywhere in the text. Rows within one match class keep the
store's order.
"""

from collections.abc import Callable

from pydantic import BaseModel, Field

# Columns of the lines table that may be searched
SEARCH_COLUMNS: frozenset[str] = frozenset({"first_letters", "gurmukhi"})

LIKE_ESCAPE = "\\"

Normalizer = Callable[[str], str]


class SearchQuery(BaseModel):
    """A filter and ordering directive for an external query executor.

    ``where`` and ``order_by`` are SQL fragments with ``?`` placeholders
    bound by ``where_params`` and ``order_params``.
    """

    term: str
    column: str
    where: str
    where_params: list[str] = Field(default_factory=list)
    order_by: str | None = None
    order_params: list[str] = Field(default_factory=list)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def normalize_term(term: str, normalize: Normalizer | None = None) -> str:
    """Convert a search term into the column's ASCII encoding.

    Terms that are already ASCII are returned unchanged. Other terms go
    through ``normalize`` (a transliteration function) when one is given.
    """
    if term.isascii() or normalize is None:
        return term
    return normalize(term)


def rank_variants(term: str) -> list[str]:
    """Patterns for exact, prefix and anywhere matches, in rank order."""
    escaped = escape_like(term)
    return [escaped, f"{escaped}%", f"%{escaped}%"]


def build_search(
    term: str,
    column: str,
    rank_results: bool = True,
    normalize: Normalizer | None = None,
) -> SearchQuery:
    """Build a partial-match search against a line column.

    Args:
        term: Raw search text.
        column: Column to match against; one of ``SEARCH_COLUMNS``.
        rank_results: Order by match class. Ranking never narrows results.
        normalize: Transliteration applied to non-ASCII terms.

    Returns:
        The filter and ordering for the query.

    Raises:
        ValueError: If the column is not searchable.
    """
    if column not in SEARCH_COLUMNS:
        raise ValueError(f"Column is not searchable: {column}")

    search = normalize_term(term, normalize)
    variants = rank_variants(search)

    query = SearchQuery(
        term=search,
        column=column,
        where=f"{column} LIKE ? ESCAPE '{LIKE_ESCAPE}'",
        where_params=[variants[-1]],
    )

    if rank_results:
        cases = " ".join(
            f"WHEN {column} LIKE ? ESCAPE '{LIKE_ESCAPE}' THEN {i}" for i in range(len(variants))
        )
        query.order_by = f"CASE {cases} ELSE {len(variants)} END"
        query.order_params = variants

    return query


def search_first_letters(
    letters: str, rank_results: bool = True, normalize: Normalizer | None = None
) -> SearchQuery:
    """Search lines by the first letters of each word."""
    return build_search(letters, "first_letters", rank_results, normalize)


def search_text(
    phrase: str, rank_results: bool = True, normalize: Normalizer | None = None
) -> SearchQuery:
    """Search lines by their primary script rendering."""
    return build_search(phrase, "gurmukhi", rank_results, normalize)
