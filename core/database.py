# =============================================================================
# core/database.py  —  Per-call connection handling
# =============================================================================
#
# Every operation opens its OWN connection and closes it before returning.
# There is no module-level connection and no pool: open_database() is a
# context manager, so the connection is closed on the success path AND when
# an exception unwinds through the with-block.
#
# isolation_level=None puts sqlite3 in autocommit mode: each statement is
# committed as soon as it runs, matching "one statement, no explicit
# transaction" for every operation.
# =============================================================================

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


@contextmanager
def open_database(path: str) -> Iterator[sqlite3.Connection]:
    """Open a fresh connection to the SQLite file at path.

    The engine creates the file on first use if it is missing; a path whose
    directory doesn't exist raises sqlite3.OperationalError here.
    """
    conn = sqlite3.connect(path, isolation_level=None)
    logger.debug("Opened connection to %s", path)
    try:
        yield conn
    finally:
        conn.close()
        logger.debug("Closed connection to %s", path)


def file_facts(path: str) -> tuple[bool, int]:
    """Return (exists, size_in_bytes) for the database file."""
    exists = os.path.isfile(path)
    return exists, os.path.getsize(path) if exists else 0
