# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows out of the database layer.  They carry almost no behavior: the only
# logic here is turning a result into the string an MCP caller receives.
#
# THE BOUNDARY CONTRACT:
#   A caller always gets ONE string back per tool call:
#     - a human-readable success message,
#     - a JSON array of row objects (read_records), or
#     - an error message starting with "Error".
#   Internally we keep that as a tagged OperationResult so code and tests can
#   branch on the kind before it is flattened to text.
# =============================================================================

import base64
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

# column name → value (None, int, float, str or bytes), insertion-ordered
ColumnValueMap = dict[str, Any]
Record = dict[str, Any]


# -----------------------------------------------------------------------------
# ColumnSchema — one line of PRAGMA table_info
# -----------------------------------------------------------------------------
@dataclass
class ColumnSchema:
    """One column of a table, in declaration order."""

    ordinal: int                       # "cid", 0-based declaration position
    name: str
    declared_type: str                 # may be "" for untyped columns
    not_null: bool
    default_value: Optional[str]       # the DEFAULT expression text, or None
    primary_key_position: int = 0      # 0 = not part of the PK, 1.. = position in PK

    @property
    def is_primary_key(self) -> bool:
        return self.primary_key_position > 0

    def render(self) -> str:
        default = "NULL" if self.default_value is None else str(self.default_value)
        return (
            f"{self.ordinal} | {self.name} | {self.declared_type} | "
            f"{int(self.not_null)} | {default} | {self.primary_key_position}"
        )


# -----------------------------------------------------------------------------
# TableSchema — all columns of one table
# -----------------------------------------------------------------------------
@dataclass
class TableSchema:
    """Schema of a single table as reported by the engine."""

    table_name: str
    columns: list[ColumnSchema] = field(default_factory=list)

    @property
    def exists(self) -> bool:
        # SQLite reports zero columns for a table it doesn't know.
        return len(self.columns) > 0

    def render(self) -> str:
        lines = [
            f"Schema for table '{self.table_name}':",
            "CID | Name | Type | NotNull | DefaultValue | PK",
            "-----------------------------------------------",
        ]
        lines.extend(column.render() for column in self.columns)
        return "\n".join(lines) + "\n"


# -----------------------------------------------------------------------------
# DatabaseInfo — the db_info payload
# -----------------------------------------------------------------------------
@dataclass
class DatabaseInfo:
    """File-level facts about the configured database."""

    path: str
    exists: bool
    size_bytes: int
    table_count: int

    def render(self) -> str:
        return (
            f"Database Path: {self.path}\n"
            f"Exists: {self.exists}\n"
            f"Size (bytes): {self.size_bytes}\n"
            f"Table Count: {self.table_count}"
        )


# -----------------------------------------------------------------------------
# OperationResult — what every service operation returns
# -----------------------------------------------------------------------------
class ResultKind(Enum):
    MESSAGE = "message"
    ROWS = "rows"
    ERROR = "error"


def _json_default(value: Any) -> Any:
    # BLOB columns come back as bytes; JSON has no binary type.
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_records(rows: list[Record]) -> str:
    """Serialize a RecordSet as a compact JSON array of objects."""
    return json.dumps(rows, default=_json_default, separators=(",", ":"), ensure_ascii=False)


@dataclass
class OperationResult:
    """Tagged result of one operation.

    Build it with one of the constructors:
      - OperationResult.success("3 record(s) ...")
      - OperationResult.records([{"id": 1}, ...])
      - OperationResult.failure("Error ...")

    render() flattens it into the single string sent back to the caller.
    """

    kind: ResultKind
    message: str = ""
    rows: list[Record] = field(default_factory=list)

    @classmethod
    def success(cls, message: str) -> "OperationResult":
        return cls(kind=ResultKind.MESSAGE, message=message)

    @classmethod
    def records(cls, rows: list[Record]) -> "OperationResult":
        return cls(kind=ResultKind.ROWS, rows=list(rows))

    @classmethod
    def failure(cls, message: str) -> "OperationResult":
        return cls(kind=ResultKind.ERROR, message=message)

    @property
    def ok(self) -> bool:
        return self.kind is not ResultKind.ERROR

    def render(self) -> str:
        if self.kind is ResultKind.ROWS:
            return serialize_records(self.rows)
        return self.message
