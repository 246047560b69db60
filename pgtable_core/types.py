"""pgtable Types - Postgres type vocabulary and host-type mapping.

Provides:
- The closed set of SQL type tokens understood by the generators
- The NOW() default token
- Mapping of a column's SQL type to a Go or Python value type, used by
  data-access-object generators (statement generation never consults it)

Type tokens are opaque strings to the statement assembler; a column may
carry any type string, including parameterised ones such as VARCHAR(255).

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from enum import Enum as PyEnum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

if TYPE_CHECKING:
    from pgtable_core.schema import Column


class DataType(str, PyEnum):
    """Supported Postgres type tokens."""

    SERIAL = "SERIAL"
    BIG_SERIAL = "BIGSERIAL"
    BOOL = "BOOL"
    DECIMAL = "DECIMAL"
    INTEGER = "INTEGER"
    SMALL_INTEGER = "SMALLINT"
    BIG_INTEGER = "BIGINT"
    TEXT = "TEXT"
    VARCHAR = "VARCHAR"
    TIMESTAMP = "TIMESTAMP"
    TIMESTAMP_TZ = "TIMESTAMPTZ"
    MONEY = "MONEY"

    def __str__(self) -> str:
        return self.value


FUNCTION_NOW = "NOW()"


def varchar(length: int) -> str:
    """Parameterised VARCHAR declaration, e.g. ``VARCHAR(255)``."""
    return f"{DataType.VARCHAR.value}({length})"


class HostTarget(PyEnum):
    """Languages the host-type mapper can target."""

    GO = "go"
    PYTHON = "python"


# (value type when the column can never be NULL, value type otherwise).
# None means the type has no mapping in that case.
_GO_TYPES: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    DataType.TEXT.value: ("string", "nilt.String"),
    DataType.BOOL.value: ("bool", "nilt.Bool"),
    DataType.SMALL_INTEGER.value: ("int16", "int16"),
    DataType.INTEGER.value: ("int32", "int32"),
    DataType.BIG_INTEGER.value: ("int64", "nilt.Int64"),
    DataType.SERIAL.value: ("uint32", None),
    DataType.BIG_SERIAL.value: ("uint64", None),
    DataType.TIMESTAMP.value: ("time.Time", "*time.Time"),
    DataType.TIMESTAMP_TZ.value: ("time.Time", "*time.Time"),
}

_PYTHON_TYPES: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    DataType.TEXT.value: ("str", "Optional[str]"),
    DataType.BOOL.value: ("bool", "Optional[bool]"),
    DataType.SMALL_INTEGER.value: ("int", "Optional[int]"),
    DataType.INTEGER.value: ("int", "Optional[int]"),
    DataType.BIG_INTEGER.value: ("int", "Optional[int]"),
    DataType.SERIAL.value: ("int", "int"),
    DataType.BIG_SERIAL.value: ("int", "int"),
    DataType.DECIMAL.value: ("Decimal", "Optional[Decimal]"),
    DataType.MONEY.value: ("Decimal", "Optional[Decimal]"),
    DataType.TIMESTAMP.value: ("datetime", "Optional[datetime]"),
    DataType.TIMESTAMP_TZ.value: ("datetime", "Optional[datetime]"),
}


class HostTypeMapper:
    """Maps column SQL types to value types of a target language.

    A column counts as never NULL when it is NOT NULL or part of the
    primary key.
    """

    def go_type(self, column: Column) -> Optional[str]:
        """Go type for the column, or None if there is no mapping.

        Every VARCHAR declaration maps to ``string`` whatever its nullability.
        """
        mapped = self._lookup(_GO_TYPES, column)
        if mapped is not None:
            return mapped
        if column.type.startswith(DataType.VARCHAR.value):
            return "string"
        return None

    def python_type(self, column: Column) -> Optional[str]:
        """Python annotation for the column, or None if there is no mapping."""
        mapped = self._lookup(_PYTHON_TYPES, column)
        if mapped is not None:
            return mapped
        if column.type.startswith(DataType.VARCHAR.value):
            return "str" if self._never_null(column) else "Optional[str]"
        return None

    def map(self, column: Column, target: HostTarget = HostTarget.GO) -> Optional[str]:
        """Map a column for the given target."""
        handlers: Dict[HostTarget, Callable[[Column], Optional[str]]] = {
            HostTarget.GO: self.go_type,
            HostTarget.PYTHON: self.python_type,
        }
        return handlers[target](column)

    @staticmethod
    def _never_null(column: Column) -> bool:
        return column.not_null or column.primary_key

    def _lookup(self, table: Dict[str, Tuple[Optional[str], Optional[str]]], column: Column) -> Optional[str]:
        pair = table.get(str(column.type))
        if pair is None:
            return None
        required, nullable = pair
        return required if self._never_null(column) else nullable


__all__ = [
    "DataType",
    "FUNCTION_NOW",
    "varchar",
    "HostTarget",
    "HostTypeMapper",
]
