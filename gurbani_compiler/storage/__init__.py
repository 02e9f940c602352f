"""Corpus storage: SQLite connection setup and query functions."""

from gurbani_compiler.storage.database import get_connection, initialize_database
from gurbani_compiler.storage.store import CorpusStore

__all__ = ["CorpusStore", "get_connection", "initialize_database"]
