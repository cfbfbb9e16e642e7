# =============================================================================
# core/identifiers.py  —  Table / column name validation
# =============================================================================
#
# SQL parameter binding can carry VALUES but not IDENTIFIERS, so table and
# column names have to be written into the statement text.  Before that
# happens every name goes through validate_identifier(): it must be a plain
# word: letters (in any script), digits and underscores, not starting with
# a digit, so "café" passes and "a-b" or "x; DROP" do not.  Accepted
# names are then double-quoted so reserved words like "order" still work.
#
# Column names double as named-parameter keys (:name), which is only valid
# for names that pass the same check.
# =============================================================================

import re

from core.errors import InvalidIdentifierError

_IDENTIFIER_RE = re.compile(r"[^\W\d]\w*")


def validate_identifier(name: str, kind: str = "identifier") -> str:
    """Return name unchanged if it is a safe identifier, else raise."""
    if not isinstance(name, str) or not _IDENTIFIER_RE.fullmatch(name):
        raise InvalidIdentifierError(str(name), kind)
    return name


def quote_identifier(name: str, kind: str = "identifier") -> str:
    """Validate and double-quote an identifier for interpolation."""
    return f'"{validate_identifier(name, kind)}"'


def quote_table(name: str) -> str:
    return quote_identifier(name, "table")


def quote_columns(names) -> list[str]:
    return [quote_identifier(name, "column") for name in names]
