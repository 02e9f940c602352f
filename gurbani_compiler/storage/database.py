"""SQLite database initialization and connection management."""

import sqlite3
from pathlib import Path


def get_connection(db_path: str | Path) -> sqlite3.Connection:
    """Create a connection to the SQLite database.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        A sqlite3 Connection with row_factory set to Row.
    """
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def initialize_database(db_path: str | Path) -> None:
    """Create the corpus schema if it doesn't exist.

    Args:
        db_path: Path to the SQLite database file.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(db_path)
    try:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS sources (
                id INTEGER PRIMARY KEY,
                name_gurmukhi TEXT NOT NULL DEFAULT '',
                name_english TEXT NOT NULL UNIQUE,
                length INTEGER,
                page_name_gurmukhi TEXT,
                page_name_english TEXT
            );

            CREATE TABLE IF NOT EXISTS sections (
                id INTEGER PRIMARY KEY,
                source_id INTEGER NOT NULL REFERENCES sources(id),
                name_gurmukhi TEXT NOT NULL DEFAULT '',
                name_english TEXT NOT NULL DEFAULT '',
                description TEXT,
                start_page INTEGER,
                end_page INTEGER
            );

            CREATE TABLE IF NOT EXISTS subsections (
                id INTEGER PRIMARY KEY,
                section_id INTEGER NOT NULL REFERENCES sections(id),
                name_gurmukhi TEXT NOT NULL DEFAULT '',
                name_english TEXT NOT NULL DEFAULT '',
                start_page INTEGER,
                end_page INTEGER
            );

            CREATE TABLE IF NOT EXISTS writers (
                id INTEGER PRIMARY KEY,
                name_gurmukhi TEXT NOT NULL DEFAULT '',
                name_english TEXT NOT NULL DEFAULT ''
            );

            CREATE TABLE IF NOT EXISTS languages (
                id INTEGER PRIMARY KEY,
                name_gurmukhi TEXT NOT NULL DEFAULT '',
                name_english TEXT NOT NULL DEFAULT '',
                name_international TEXT NOT NULL DEFAULT ''
            );

            CREATE TABLE IF NOT EXISTS publications (
                id INTEGER PRIMARY KEY,
                name_gurmukhi TEXT NOT NULL DEFAULT '',
                name_english TEXT NOT NULL DEFAULT ''
            );

            CREATE TABLE IF NOT EXISTS line_types (
                id INTEGER PRIMARY KEY,
                name_gurmukhi TEXT NOT NULL DEFAULT '',
                name_english TEXT NOT NULL DEFAULT ''
            );

            CREATE TABLE IF NOT EXISTS shabads (
                id TEXT PRIMARY KEY,
                source_id INTEGER NOT NULL REFERENCES sources(id),
                writer_id INTEGER NOT NULL REFERENCES writers(id),
                section_id INTEGER NOT NULL REFERENCES sections(id),
                subsection_id INTEGER REFERENCES subsections(id),
                sttm_id INTEGER,
                order_id INTEGER NOT NULL
            );

            CREATE TABLE IF NOT EXISTS lines (
                id TEXT PRIMARY KEY,
                shabad_id TEXT NOT NULL REFERENCES shabads(id),
                source_page INTEGER NOT NULL,
                source_line INTEGER,
                first_letters TEXT NOT NULL DEFAULT '',
                vishraam_first_letters TEXT,
                gurmukhi TEXT NOT NULL DEFAULT '',
                pronunciation TEXT,
                pronunciation_information TEXT,
                type_id INTEGER REFERENCES line_types(id),
                order_id INTEGER NOT NULL UNIQUE
            );

            CREATE TABLE IF NOT EXISTS line_content (
                line_id TEXT NOT NULL REFERENCES lines(id),
                publication_id INTEGER NOT NULL REFERENCES publications(id),
                gurmukhi TEXT NOT NULL,
                PRIMARY KEY (line_id, publication_id)
            );

            CREATE TABLE IF NOT EXISTS translation_sources (
                id INTEGER PRIMARY KEY,
                source_id INTEGER NOT NULL REFERENCES sources(id),
                language_id INTEGER NOT NULL REFERENCES languages(id),
                name_gurmukhi TEXT NOT NULL DEFAULT '',
                name_english TEXT NOT NULL DEFAULT ''
            );

            CREATE TABLE IF NOT EXISTS translations (
                line_id TEXT NOT NULL REFERENCES lines(id),
                translation_source_id INTEGER NOT NULL REFERENCES translation_sources(id),
                translation TEXT NOT NULL,
                additional_information TEXT DEFAULT '{}',
                PRIMARY KEY (line_id, translation_source_id)
            );

            CREATE TABLE IF NOT EXISTS banis (
                id INTEGER PRIMARY KEY,
                name_gurmukhi TEXT NOT NULL DEFAULT '',
                name_english TEXT NOT NULL DEFAULT ''
            );

            CREATE TABLE IF NOT EXISTS bani_lines (
                bani_id INTEGER NOT NULL REFERENCES banis(id),
                line_id TEXT NOT NULL REFERENCES lines(id),
                line_group INTEGER NOT NULL,
                PRIMARY KEY (bani_id, line_id)
            );
            """
        )
        conn.commit()
    finally:
        conn.close()
