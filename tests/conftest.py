"""Shared fixtures: a small seeded corpus database."""

from pathlib import Path

import pytest

from gurbani_compiler.storage import CorpusStore, get_connection, initialize_database

SEED_SQL = """
INSERT INTO sources (id, name_gurmukhi, name_english, length, page_name_gurmukhi, page_name_english)
VALUES (1, 'ਸ੍ਰੀ ਗੁਰੂ ਗ੍ਰੰਥ ਸਾਹਿਬ ਜੀ', 'Sri Guru Granth Sahib Ji', 1430, 'ਅੰਗ', 'Ang'),
       (2, 'ਦਸਮ ਗ੍ਰੰਥ', 'Sri Dasam Granth', 1428, 'ਪੰਨਾ', 'Page');

INSERT INTO writers (id, name_gurmukhi, name_english)
VALUES (1, 'ਗੁਰੂ ਨਾਨਕ ਦੇਵ ਜੀ', 'Guru Nanak Dev Ji'),
       (2, 'ਗੁਰੂ ਗੋਬਿੰਦ ਸਿੰਘ ਜੀ', 'Guru Gobind Singh Ji');

INSERT INTO languages (id, name_gurmukhi, name_english, name_international)
VALUES (1, 'ਅੰਗਰੇਜ਼ੀ', 'English', 'English'),
       (2, 'ਪੰਜਾਬੀ', 'Punjabi', 'ਪੰਜਾਬੀ');

INSERT INTO publications (id, name_gurmukhi, name_english)
VALUES (1, 'ਸੰਥਿਆ', 'Santhiya Sri Guru Granth Sahib Ji'),
       (2, 'ਦਰਪਣ', 'Sri Guru Granth Sahib Darpan');

INSERT INTO line_types (id, name_gurmukhi, name_english)
VALUES (1, 'ਮੰਗਲਾਚਰਣ', 'Manglacharan'),
       (2, 'ਰਹਾਉ', 'Rahao');

INSERT INTO sections (id, source_id, name_gurmukhi, name_english, description, start_page, end_page)
VALUES (1, 1, 'ਜਪੁ', 'Jap', 'Morning prayer', 1, 8),
       (2, 1, 'ਸਿਰੀਰਾਗੁ', 'Sri Raag', NULL, 14, 93),
       (3, 2, 'ਜਾਪੁ', 'Jaap', NULL, 1, 20);

INSERT INTO subsections (id, section_id, name_gurmukhi, name_english, start_page, end_page)
VALUES (1, 2, 'ਅਸਟਪਦੀਆ', 'Ashtapadi', 53, 71);

INSERT INTO shabads (id, source_id, writer_id, section_id, subsection_id, sttm_id, order_id)
VALUES ('AAA', 1, 1, 1, NULL, 1, 1),
       ('BBB', 1, 1, 2, 1, 2, 2),
       ('CCC', 1, 1, 2, NULL, 3, 3),
       ('DDD', 2, 2, 3, NULL, NULL, 1);

INSERT INTO lines (id, shabad_id, source_page, source_line, first_letters, gurmukhi, type_id, order_id)
VALUES ('L1', 'AAA', 1, 1, 'ikspn', 'ੴ ਸਤਿ ਨਾਮੁ ਕਰਤਾ ਪੁਰਖੁ', 1, 1),
       ('L2', 'AAA', 1, 2, 'jp', 'ਜਪੁ', NULL, 2),
       ('L3', 'BBB', 1, 3, 'ssh', 'ਸਾਚਾ ਸਾਹਿਬੁ ਸਾਚੁ ਨਾਇ', NULL, 3),
       ('L4', 'BBB', 2, 1, 'rh', 'ਰਹਾਉ', 2, 4),
       ('L5', 'CCC', 14, 1, 'mmh', 'ਮੋਤੀ ਤ ਮੰਦਰ ਊਸਰਹਿ', NULL, 5),
       ('L6', 'CCC', 14, 2, 'kkk', 'ਕਸਤੂਰਿ ਕੁੰਗੂ ਅਗਰਿ', NULL, 6),
       ('L7', 'DDD', 3, 1, 'ckc', 'ਚਕ੍ਰ ਚਿਹਨ ਅਰੁ ਬਰਨ', NULL, 7);

INSERT INTO line_content (line_id, publication_id, gurmukhi)
VALUES ('L1', 1, '<> siq nwmu krqw purKu'),
       ('L1', 2, '<> siqnwmu krqw purKu'),
       ('L2', 1, 'jpu'),
       ('L3', 1, 'swcw swihbu swcu nwie'),
       ('L4', 1, 'rhwau'),
       ('L5', 1, 'moqI q mMdr aUsrih'),
       ('L6', 1, 'ksqUir kuMgU Agir'),
       ('L7', 1, 'c`kR ichn Aru brn');

INSERT INTO translation_sources (id, source_id, language_id, name_gurmukhi, name_english)
VALUES (1, 1, 1, 'ਸੰਤ ਸਿੰਘ ਖ਼ਾਲਸਾ', 'Sant Singh Khalsa'),
       (2, 1, 2, 'ਪ੍ਰੋ. ਸਾਹਿਬ ਸਿੰਘ', 'Professor Sahib Singh');

INSERT INTO translations (line_id, translation_source_id, translation, additional_information)
VALUES ('L1', 1, 'One Universal Creator God.', '{}'),
       ('L1', 2, 'ਅਕਾਲ ਪੁਰਖ ਇੱਕ ਹੈ', '{"footnotes": ["ੴ"]}'),
       ('L3', 1, 'True is the Master, True is His Name.', NULL);

INSERT INTO banis (id, name_gurmukhi, name_english)
VALUES (1, 'ਜਪੁਜੀ ਸਾਹਿਬ', 'Japji Sahib'),
       (2, 'ਸੋ ਦਰੁ', 'So Dar');

INSERT INTO bani_lines (bani_id, line_id, line_group)
VALUES (1, 'L1', 1), (1, 'L2', 1), (1, 'L5', 2), (1, 'L6', 2),
       (2, 'L1', 1), (2, 'L3', 1);
"""


def seed_database(db_path: Path, sql: str = SEED_SQL) -> Path:
    initialize_database(db_path)
    conn = get_connection(db_path)
    try:
        conn.executescript(sql)
        conn.commit()
    finally:
        conn.close()
    return db_path


@pytest.fixture
def corpus_db(tmp_path: Path) -> Path:
    return seed_database(tmp_path / "database.sqlite")


@pytest.fixture
def store(corpus_db: Path) -> CorpusStore:
    return CorpusStore(corpus_db)
