"""pgtable Errors - Exceptions raised while building statements.

Every failure is a defect in the caller's input. Nothing here is retried,
and a raised error means no statement text was produced.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Sequence, Tuple


class PgTableError(ValueError):
    """Base class for pgtable errors."""


class MissingTableNameError(PgTableError):
    """Table has an empty name."""

    def __init__(self) -> None:
        super().__init__("pgtable: missing table name")


class MissingTableColumnsError(PgTableError):
    """Table has no columns."""

    def __init__(self) -> None:
        super().__init__("pgtable: missing table columns")


class InvalidReferenceError(PgTableError):
    """Foreign key declares a table without columns, or columns without a table."""

    def __init__(self, schema: str, table: str, columns: Sequence[str]):
        self.schema = schema
        self.table = table
        self.columns: Tuple[str, ...] = tuple(columns)
        if len(self.columns) == 1:
            target = f"column: '{self.columns[0]}'"
        else:
            target = f"columns: {list(self.columns)!r}"
        super().__init__(f"pgtable: invalid foreign key schema: '{schema}', table: '{table}', {target}")


class DefinitionError(PgTableError):
    """Malformed declarative table definition."""


__all__ = [
    "PgTableError",
    "MissingTableNameError",
    "MissingTableColumnsError",
    "InvalidReferenceError",
    "DefinitionError",
]
