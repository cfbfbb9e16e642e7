import sqlite3
import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from core.service import DatabaseOperationService  # noqa: E402

PEOPLE_SCHEMA = """
CREATE TABLE people (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    age INTEGER DEFAULT 0
);
"""


@pytest.fixture()
def db_path(tmp_path):
    """Path to a database file that doesn't exist yet."""
    return str(tmp_path / "test.db")


@pytest.fixture()
def people_db(db_path):
    """A database with a `people` table and three rows."""
    conn = sqlite3.connect(db_path)
    try:
        conn.executescript(PEOPLE_SCHEMA)
        conn.executemany(
            "INSERT INTO people (id, name, age) VALUES (?, ?, ?)",
            [(1, "Ada", 36), (2, "Grace", 45), (3, "Linus", 28)],
        )
        conn.commit()
    finally:
        conn.close()
    return db_path


@pytest.fixture()
def service(db_path):
    return DatabaseOperationService(db_path)


@pytest.fixture()
def people_service(people_db):
    return DatabaseOperationService(people_db)


@pytest.fixture()
def unreachable_service(tmp_path):
    # The parent directory doesn't exist, so SQLite can't open or create it.
    return DatabaseOperationService(str(tmp_path / "no_such_dir" / "test.db"))


@pytest.fixture()
def row_count():
    """Count rows in a table through a separate connection."""

    def _count(path: str, table: str) -> int:
        conn = sqlite3.connect(path)
        try:
            return conn.execute(f"SELECT count(*) FROM {table}").fetchone()[0]
        finally:
            conn.close()

    return _count
