"""Read-only query functions over the corpus database.

Each method returns fully-typed records, joined and ordered the way the
compiler needs them. A connection is opened per call so that methods can
be invoked from worker threads.
"""

import logging
import sqlite3
from collections import defaultdict
from contextlib import closing
from pathlib import Path
from typing import Any

from gurbani_compiler.errors import CompilerError, RetrievalError
from gurbani_compiler.models import (
    REFERENCE_MODELS,
    Bani,
    BaniLine,
    Content,
    Line,
    LineMatch,
    ReferenceRecord,
    Section,
    Shabad,
    Source,
    Subsection,
    Translation,
    TranslationSource,
)
from gurbani_compiler.search import SearchQuery
from gurbani_compiler.storage.database import get_connection

logger = logging.getLogger(__name__)


class CorpusStore:
    """Query interface for a corpus stored in SQLite.

    Args:
        db_path: Path to the SQLite database file.
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)

    def _fetch(
        self, sql: str, params: tuple[Any, ...] = (), entity: str = "", identifier: object = None
    ) -> list[sqlite3.Row]:
        """Run a query and return all rows, wrapping store failures."""
        if not self._db_path.exists():
            raise RetrievalError(
                f"Database not found: {self._db_path}", entity=entity, identifier=identifier
            )
        try:
            with closing(get_connection(self._db_path)) as conn:
                return conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise RetrievalError(
                f"Failed to retrieve {entity or 'rows'}"
                + (f" for {identifier!r}" if identifier is not None else "")
                + f": {e}",
                entity=entity,
                identifier=identifier,
            ) from e

    def reference_table(self, name: str) -> list[ReferenceRecord]:
        """Return every row of a simple lookup table, ordered by id.

        Raises:
            CompilerError: If ``name`` is not a known reference table.
        """
        model = REFERENCE_MODELS.get(name)
        if model is None:
            raise CompilerError(f"Unknown reference table: {name}", entity=name)
        rows = self._fetch(f"SELECT * FROM {name} ORDER BY id", entity=name)
        return [model(**dict(row)) for row in rows]

    def banis(self) -> list[Bani]:
        rows = self._fetch(
            "SELECT id, name_gurmukhi, name_english FROM banis ORDER BY id", entity="banis"
        )
        return [Bani(**dict(row)) for row in rows]

    def bani_lines(self, bani_id: int) -> list[BaniLine]:
        """Return a bani's membership ordered by the lines' order_id."""
        rows = self._fetch(
            """
            SELECT lines.order_id, bani_lines.line_id, bani_lines.line_group
            FROM bani_lines
            JOIN lines ON lines.id = bani_lines.line_id
            WHERE bani_lines.bani_id = ?
            ORDER BY lines.order_id
            """,
            (bani_id,),
            entity="bani_lines",
            identifier=bani_id,
        )
        return [BaniLine(**dict(row)) for row in rows]

    def line_orders(self, start: int, end: int) -> list[int]:
        """Return the order_id of every line from ``start`` to ``end`` inclusive."""
        rows = self._fetch(
            "SELECT order_id FROM lines WHERE order_id BETWEEN ? AND ? ORDER BY order_id",
            (start, end),
            entity="lines",
            identifier=(start, end),
        )
        return [row["order_id"] for row in rows]

    def sources(self) -> list[Source]:
        """Return every source with its sections and subsections.

        Children are attached in retrieval order; callers that need a
        stable order sort them.
        """
        subsections: dict[int, list[Subsection]] = defaultdict(list)
        for row in self._fetch("SELECT * FROM subsections", entity="subsections"):
            subsection = Subsection(**dict(row))
            subsections[subsection.section_id].append(subsection)

        sections: dict[int, list[Section]] = defaultdict(list)
        for row in self._fetch("SELECT * FROM sections", entity="sections"):
            section = Section(**dict(row), subsections=subsections.get(row["id"], []))
            sections[section.source_id].append(section)

        return [
            Source(**dict(row), sections=sections.get(row["id"], []))
            for row in self._fetch("SELECT * FROM sources", entity="sources")
        ]

    def translation_sources(self) -> list[TranslationSource]:
        rows = self._fetch(
            """
            SELECT translation_sources.*,
                   sources.name_english AS source,
                   languages.name_english AS language
            FROM translation_sources
            JOIN sources ON sources.id = translation_sources.source_id
            JOIN languages ON languages.id = translation_sources.language_id
            ORDER BY translation_sources.id
            """,
            entity="translation_sources",
        )
        return [TranslationSource(**dict(row)) for row in rows]

    def shabads(self, source_id: int) -> list[Shabad]:
        """Return a source's shabads in order, without their lines."""
        rows = self._fetch(
            """
            SELECT shabads.*,
                   writers.name_english AS writer,
                   sections.name_english AS section,
                   subsections.name_english AS subsection
            FROM shabads
            JOIN writers ON writers.id = shabads.writer_id
            JOIN sections ON sections.id = shabads.section_id
            LEFT JOIN subsections ON subsections.id = shabads.subsection_id
            WHERE shabads.source_id = ?
            ORDER BY shabads.order_id
            """,
            (source_id,),
            entity="shabads",
            identifier=source_id,
        )
        return [Shabad(**dict(row)) for row in rows]

    def lines(self, shabad_id: str) -> list[Line]:
        """Return a shabad's lines in order, with content and translations."""
        content: dict[str, list[Content]] = defaultdict(list)
        for row in self._fetch(
            """
            SELECT line_content.*, publications.name_english AS publication
            FROM line_content
            JOIN lines ON lines.id = line_content.line_id
            JOIN publications ON publications.id = line_content.publication_id
            WHERE lines.shabad_id = ?
            ORDER BY line_content.publication_id
            """,
            (shabad_id,),
            entity="line_content",
            identifier=shabad_id,
        ):
            content[row["line_id"]].append(Content(**dict(row)))

        translations: dict[str, list[Translation]] = defaultdict(list)
        for row in self._fetch(
            """
            SELECT translations.*,
                   translation_sources.name_english AS translation_source,
                   languages.name_english AS language
            FROM translations
            JOIN lines ON lines.id = translations.line_id
            JOIN translation_sources
                ON translation_sources.id = translations.translation_source_id
            JOIN languages ON languages.id = translation_sources.language_id
            WHERE lines.shabad_id = ?
            ORDER BY translations.translation_source_id
            """,
            (shabad_id,),
            entity="translations",
            identifier=shabad_id,
        ):
            translations[row["line_id"]].append(Translation(**dict(row)))

        rows = self._fetch(
            """
            SELECT lines.*, line_types.name_english AS type
            FROM lines
            LEFT JOIN line_types ON line_types.id = lines.type_id
            WHERE lines.shabad_id = ?
            ORDER BY lines.order_id
            """,
            (shabad_id,),
            entity="lines",
            identifier=shabad_id,
        )
        return [
            Line(
                **dict(row),
                content=content.get(row["id"], []),
                translations=translations.get(row["id"], []),
            )
            for row in rows
        ]

    def search_lines(self, query: SearchQuery, limit: int = 50) -> list[LineMatch]:
        """Execute a search directive against the lines table.

        Args:
            query: Filter and ordering built by ``gurbani_compiler.search``.
            limit: Maximum number of lines to return.

        Returns:
            Matching lines in ranked order.
        """
        sql = (
            "SELECT id, shabad_id, source_page, gurmukhi, first_letters "
            f"FROM lines WHERE {query.where}"
        )
        params: tuple[Any, ...] = tuple(query.where_params)
        if query.order_by:
            sql += f" ORDER BY {query.order_by}"
            params += tuple(query.order_params)
        sql += " LIMIT ?"
        params += (limit,)

        logger.debug("Searching %s for %r", query.column, query.term)
        rows = self._fetch(sql, params, entity="lines", identifier=query.term)
        return [LineMatch(**dict(row)) for row in rows]
