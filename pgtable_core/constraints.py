"""pgtable Constraints - Constraint fragment rendering and derivation.

A fragment is one ``CONSTRAINT "<name>" ...`` clause of a CREATE TABLE body.
Fragments come from two places:

- Column flags (unique, primary_key, reference_*, check)
- Explicit table-level Constraint entries (composite keys, named checks)

Usage:
    from pgtable_core.constraints import derive_constraints

    for fragment in derive_constraints(table):
        print(fragment)

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from pgtable_core.errors import InvalidReferenceError
from pgtable_core.naming import DEFAULT_NAMING, NamingConvention

if TYPE_CHECKING:
    from pgtable_core.schema import Table


# =============================================================================
# Fragment Rendering
# =============================================================================


def _column_list(columns: Sequence[str]) -> str:
    return ", ".join(columns)


def unique_constraint_sql(
    schema: str, table: str, *columns: str, naming: NamingConvention = DEFAULT_NAMING
) -> str:
    """Render a UNIQUE fragment."""
    name = naming.unique(schema, table, *columns)
    return f'CONSTRAINT "{name}" UNIQUE ({_column_list(columns)})'


def primary_key_constraint_sql(
    schema: str, table: str, *columns: str, naming: NamingConvention = DEFAULT_NAMING
) -> str:
    """Render a PRIMARY KEY fragment."""
    name = naming.primary_key(schema, table, *columns)
    return f'CONSTRAINT "{name}" PRIMARY KEY ({_column_list(columns)})'


def foreign_key_constraint_sql(
    schema: str,
    table: str,
    columns: Sequence[str],
    reference_schema: str,
    reference_table: str,
    reference_columns: Sequence[str],
    naming: NamingConvention = DEFAULT_NAMING,
) -> str:
    """Render a FOREIGN KEY fragment.

    Args:
        schema: Schema of the referencing table
        table: Referencing table
        columns: Referencing columns
        reference_schema: Schema of the referenced table, may be empty
        reference_table: Referenced table
        reference_columns: Referenced columns

    Returns:
        SQL fragment
    """
    if reference_schema:
        reference = f"{reference_schema}.{reference_table}"
    else:
        reference = reference_table

    name = naming.foreign_key(schema, table, *columns)
    return (
        f'CONSTRAINT "{name}" FOREIGN KEY ({_column_list(columns)}) '
        f"REFERENCES {reference} ({_column_list(reference_columns)})"
    )


def check_constraint_sql(
    schema: str, table: str, expression: str, *columns: str, naming: NamingConvention = DEFAULT_NAMING
) -> str:
    """Render a CHECK fragment.

    The expression is inserted verbatim.
    """
    name = naming.check(schema, table, *columns)
    return f'CONSTRAINT "{name}" CHECK ({expression})'


# =============================================================================
# Derivation
# =============================================================================


def derive_constraints(table: Table, naming: Optional[NamingConvention] = None) -> List[str]:
    """Derive every constraint fragment of a table.

    Columns are visited first, then explicit constraints. A column or
    constraint flagged both unique and primary_key yields neither fragment.

    Args:
        table: Table definition
        naming: Naming provider, defaults to Postgres-style names

    Returns:
        Fragments sorted by their rendered text

    Raises:
        InvalidReferenceError: A foreign key names a table without columns
            or columns without a table
    """
    naming = naming or DEFAULT_NAMING
    schema, name = table.schema, table.name
    fragments: List[str] = []

    for column in table.columns:
        if column.unique and not column.primary_key:
            fragments.append(unique_constraint_sql(schema, name, column.name, naming=naming))
        if column.primary_key and not column.unique:
            fragments.append(primary_key_constraint_sql(schema, name, column.name, naming=naming))
        if column.is_reference():
            if not column.is_valid_reference():
                raise InvalidReferenceError(
                    column.reference_schema, column.reference_table, [column.reference_column]
                )
            fragments.append(
                foreign_key_constraint_sql(
                    schema,
                    name,
                    [column.name],
                    column.reference_schema,
                    column.reference_table,
                    [column.reference_column],
                    naming=naming,
                )
            )
        if column.check:
            fragments.append(check_constraint_sql(schema, name, column.check, column.name, naming=naming))

    for constraint in table.constraints:
        if constraint.unique and not constraint.primary_key:
            fragments.append(unique_constraint_sql(schema, name, *constraint.columns, naming=naming))
        if constraint.primary_key and not constraint.unique:
            fragments.append(primary_key_constraint_sql(schema, name, *constraint.columns, naming=naming))
        if constraint.is_reference():
            if not constraint.is_valid_reference():
                raise InvalidReferenceError(
                    constraint.reference_schema, constraint.reference_table, constraint.reference_columns
                )
            fragments.append(
                foreign_key_constraint_sql(
                    schema,
                    name,
                    constraint.columns,
                    constraint.reference_schema,
                    constraint.reference_table,
                    constraint.reference_columns,
                    naming=naming,
                )
            )
        if constraint.check:
            fragments.append(check_constraint_sql(schema, name, constraint.check, *constraint.columns, naming=naming))

    return sorted(fragments)


__all__ = [
    "unique_constraint_sql",
    "primary_key_constraint_sql",
    "foreign_key_constraint_sql",
    "check_constraint_sql",
    "derive_constraints",
]
