"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager that commits on success
(``get_cursor``) and ``init_db``, which creates the lifestyle and
medical history tables when they are missing.  Table creation is
idempotent; there is no versioned migration history.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

SCHEMA = """
CREATE TABLE IF NOT EXISTS lifestyles (
    l_id INTEGER PRIMARY KEY AUTOINCREMENT,
    patient_id INTEGER,
    user_id INTEGER,
    smoking TEXT,
    alcohol_consumption TEXT,
    physical_activity TEXT,
    diet TEXT,
    sleep_pattern TEXT,
    stress_level TEXT,
    occupation TEXT
);

CREATE INDEX IF NOT EXISTS idx_lifestyles_patient_user
    ON lifestyles(patient_id, user_id);

CREATE TABLE IF NOT EXISTS medical_histories (
    record_id INTEGER PRIMARY KEY AUTOINCREMENT,
    patient_id INTEGER,
    user_id INTEGER,
    allergies TEXT,
    current_medication TEXT,
    past_medication TEXT,
    chronic_diseases TEXT,
    injuries TEXT,
    surgeries TEXT
);

CREATE INDEX IF NOT EXISTS idx_medical_histories_patient_user
    ON medical_histories(patient_id, user_id);
"""


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    ``settings.database_url`` is read on every call so tests can point
    the service at a temporary file.  Relative paths are resolved
    against the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection with rows keyed by column name."""
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit when the block succeeds and always close the connection."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Create the service tables and their indexes if they do not exist."""
    with get_cursor() as cursor:
        cursor.executescript(SCHEMA)
