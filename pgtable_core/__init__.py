"""pgtable - Canonical CREATE TABLE statements for Postgres.

pgtable turns a declarative table description into deterministic,
diff-stable DDL for schema and code generators:
- Table, column and constraint definitions as immutable values
- Implicit constraints derived from column flags
- Postgres-style canonical constraint names
- Constraint clauses ordered by their rendered text

Architecture:
    ┌─────────────────────────────────────────────────────────────────┐
    │                            pgtable                             │
    ├─────────────────────────────────────────────────────────────────┤
    │  ┌─────────────┐  ┌─────────────┐  ┌─────────────┐             │
    │  │   Schema    │  │ Constraints │  │   Naming    │             │
    │  │  (entities) │──│ (derivation)│──│ (canonical) │             │
    │  └─────────────┘  └─────────────┘  └─────────────┘             │
    │         │                                                       │
    │  ┌─────────────┐  ┌─────────────┐  ┌─────────────┐             │
    │  │   Loader    │  │    Types    │  │   Columns   │             │
    │  │   (YAML)    │  │ (host map)  │  │  (helpers)  │             │
    │  └─────────────┘  └─────────────┘  └─────────────┘             │
    └─────────────────────────────────────────────────────────────────┘

Usage:
    from pgtable_core import Column, DataType, Table

    table = Table(
        "user",
        schema="schema",
        temporary=True,
        columns=[
            Column("username", DataType.TEXT, not_null=True),
            Column("password", DataType.TEXT),
        ],
    )
    print(table.create_query())

CLI:
    $ pgtable render tables.yaml
    $ pgtable names tables.yaml --json
    $ pgtable types tables.yaml --target python

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS, Inc."
__email__ = "engineering@blackroad.io"

# Core exports
from pgtable_core.schema import Column, Constraint, Table, check, create_queries, create_query
from pgtable_core.constraints import derive_constraints
from pgtable_core.naming import ConstraintKind, ConstraintName, NamingConvention, PostgresNaming
from pgtable_core.errors import (
    DefinitionError,
    InvalidReferenceError,
    MissingTableColumnsError,
    MissingTableNameError,
    PgTableError,
)

# Collaborator exports
from pgtable_core.types import FUNCTION_NOW, DataType, HostTarget, HostTypeMapper, varchar
from pgtable_core.columns import Columns
from pgtable_core.loader import load_tables, table_from_dict

__all__ = [
    # Version
    "__version__",

    # Schema
    "Table",
    "Column",
    "Constraint",
    "check",
    "create_query",
    "create_queries",
    "derive_constraints",

    # Naming
    "ConstraintKind",
    "ConstraintName",
    "NamingConvention",
    "PostgresNaming",

    # Errors
    "PgTableError",
    "MissingTableNameError",
    "MissingTableColumnsError",
    "InvalidReferenceError",
    "DefinitionError",

    # Types
    "DataType",
    "FUNCTION_NOW",
    "varchar",
    "HostTarget",
    "HostTypeMapper",

    # Helpers
    "Columns",
    "load_tables",
    "table_from_dict",
]
