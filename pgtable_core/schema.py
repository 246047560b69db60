"""pgtable Schema - Table definitions and CREATE TABLE generation.

Provides a declarative way to define a table and render it as canonical
Postgres DDL:
- Table definitions with columns and table-level constraints
- Implicit constraints derived from column flags
- Deterministic, diff-stable statement text

Architecture:
    ┌─────────────────────────────────────────────────────────────────────┐
    │                        Statement Generation                        │
    ├─────────────────────────────────────────────────────────────────────┤
    │  ┌─────────────┐  ┌─────────────┐  ┌─────────────┐                 │
    │  │   Table     │  │   Column    │  │ Constraint  │                 │
    │  │ Definition  │──│ Definition  │──│ Definition  │                 │
    │  └─────────────┘  └─────────────┘  └─────────────┘                 │
    │         │               │               │                           │
    │  ┌─────────────┐  ┌─────────────┐  ┌─────────────┐                 │
    │  │  Statement  │  │ Constraint  │  │ Constraint  │                 │
    │  │  Assembler  │──│ Derivation  │──│   Naming    │                 │
    │  └─────────────┘  └─────────────┘  └─────────────┘                 │
    └─────────────────────────────────────────────────────────────────────┘

Usage:
    from pgtable_core.schema import Column, Table, check
    from pgtable_core.types import DataType

    users = Table(
        "users",
        columns=[
            Column("id", DataType.SERIAL, primary_key=True),
            Column("email", DataType.TEXT, unique=True, not_null=True),
        ],
    )

    print(users.create_query())

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from pgtable_core import naming
from pgtable_core.constraints import derive_constraints
from pgtable_core.errors import MissingTableColumnsError, MissingTableNameError
from pgtable_core.naming import ConstraintName, NamingConvention


# =============================================================================
# Column Definition
# =============================================================================


@dataclass(frozen=True)
class Column:
    """Column definition.

    Empty strings mean "not set" for every string field.
    """

    name: str
    type: str
    collate: str = ""
    default: str = ""
    check: str = ""
    not_null: bool = False
    unique: bool = False
    primary_key: bool = False

    # Single-column foreign key
    reference_table: str = ""
    reference_column: str = ""
    reference_schema: str = ""

    def __post_init__(self):
        # DataType members are str subclasses; keep the plain token
        object.__setattr__(self, "type", str(self.type))

    def is_reference(self) -> bool:
        """Whether any reference field is set."""
        return bool(self.reference_column or self.reference_table or self.reference_schema)

    def is_valid_reference(self) -> bool:
        """Whether the reference names both a table and a column."""
        return bool(self.reference_column and self.reference_table)

    def sql(self) -> str:
        """Generate the column definition line, without indentation or comma."""
        parts = [self.name, self.type]

        if self.collate:
            parts.append(self.collate)

        if self.default:
            parts.append(f"DEFAULT {self.default}")

        if self.not_null:
            parts.append("NOT NULL")

        return " ".join(parts)

    def constraint_names(self, schema: str, table: str) -> List[ConstraintName]:
        """Names of the constraints the column's flags imply.

        Unlike derivation, unique and primary_key do not suppress each other
        here.

        Args:
            schema: Schema of the owning table
            table: Owning table name

        Returns:
            Names in flag order: unique, primary key, foreign key, check
        """
        names = []
        if self.unique:
            names.append(naming.unique(schema, table, self.name))
        if self.primary_key:
            names.append(naming.primary_key(schema, table))
        if self.is_reference():
            names.append(naming.foreign_key(schema, table, self.name))
        if self.check:
            names.append(naming.check(schema, table, self.name))
        return names


# =============================================================================
# Table Constraints
# =============================================================================


@dataclass(frozen=True)
class Constraint:
    """Table-level constraint over one or more columns.

    Used for composite unique and primary keys, composite foreign keys and
    named checks. on_delete and on_update are carried but not rendered.
    """

    name: str = ""
    check: str = ""
    default: str = ""
    on_delete: str = ""
    on_update: str = ""
    not_null: bool = False
    null: bool = False
    unique: bool = False
    primary_key: bool = False
    columns: Tuple[str, ...] = ()
    reference_schema: str = ""
    reference_table: str = ""
    reference_columns: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "reference_columns", tuple(self.reference_columns))

    @classmethod
    def check_constraint(cls, schema: str, table: str, expression: str, *columns: str) -> Constraint:
        """Build a CHECK constraint named canonically for the given columns."""
        return cls(
            name=str(naming.check(schema, table, *columns)),
            check=expression,
            columns=columns,
        )

    def is_reference(self) -> bool:
        """Whether any reference field is set."""
        return bool(self.reference_columns or self.reference_table or self.reference_schema)

    def is_valid_reference(self) -> bool:
        """Whether the reference names both a table and its columns."""
        return bool(self.reference_columns and self.reference_table)


def check(schema: str, table: str, expression: str, *columns: str) -> Constraint:
    """Shorthand for `Constraint.check_constraint`."""
    return Constraint.check_constraint(schema, table, expression, *columns)


# =============================================================================
# Table Definition
# =============================================================================


@dataclass(frozen=True)
class Table:
    """Table definition.

    collate and table_space are stored for callers but do not appear in the
    generated statement.
    """

    name: str
    schema: str = ""
    collate: str = ""
    table_space: str = ""
    if_not_exists: bool = False
    temporary: bool = False
    columns: Tuple[Column, ...] = field(default_factory=tuple)
    constraints: Tuple[Constraint, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "constraints", tuple(self.constraints))

    @property
    def full_name(self) -> str:
        """Get schema-qualified table name."""
        if self.schema:
            return f"{self.schema}.{self.name}"
        return self.name

    def get_column(self, name: str) -> Optional[Column]:
        """Get column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def constraint_fragments(self, naming_convention: Optional[NamingConvention] = None) -> List[str]:
        """Sorted constraint fragments of the table."""
        return derive_constraints(self, naming_convention)

    def create_query(self, naming_convention: Optional[NamingConvention] = None) -> str:
        """Generate the CREATE TABLE statement.

        Args:
            naming_convention: Constraint naming provider, Postgres-style by default

        Returns:
            SQL CREATE TABLE statement ending in ``);``

        Raises:
            MissingTableNameError: Table name is empty
            MissingTableColumnsError: Table has no columns
            InvalidReferenceError: A foreign key is incomplete
        """
        if not self.name:
            raise MissingTableNameError()
        if not self.columns:
            raise MissingTableColumnsError()

        constraints = self.constraint_fragments(naming_convention)

        parts = ["CREATE "]
        if self.temporary:
            parts.append("TEMPORARY ")
        parts.append("TABLE ")
        if self.if_not_exists:
            parts.append("IF NOT EXISTS ")
        parts.append(self.full_name)
        parts.append(" (\n")

        last = len(self.columns) - 1
        for i, col in enumerate(self.columns):
            parts.append("\t" + col.sql())
            if i < last or constraints:
                parts.append(",")
            parts.append("\n")

        if constraints:
            parts.append("\n")
            parts.append(",\n".join("\t" + fragment for fragment in constraints))
            parts.append("\n")

        parts.append(");")

        return "".join(parts)


def create_query(table: Table, naming_convention: Optional[NamingConvention] = None) -> str:
    """Generate the CREATE TABLE statement for a table."""
    return table.create_query(naming_convention)


def create_queries(tables: Sequence[Table], naming_convention: Optional[NamingConvention] = None) -> List[str]:
    """Generate statements for several tables, in the order given.

    Constraint names are computed per table; no collision checking is done
    across tables.
    """
    return [table.create_query(naming_convention) for table in tables]


__all__ = [
    "Table",
    "Column",
    "Constraint",
    "check",
    "create_query",
    "create_queries",
]
