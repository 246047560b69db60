"""pgtable Naming - Canonical constraint names.

Constraint names follow the Postgres convention for implicitly created
constraints, qualified with the schema:

    public.users_email_key            UNIQUE (email)
    public.users_pkey                 PRIMARY KEY (id)
    public.users_team_id_fkey         FOREIGN KEY (team_id)
    public.users_start_at_end_at_check

The same string is the SQL object name and, once rendered, the sort key of
the constraint, so naming decides emission order too.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# Schema used when a table does not name one (the default search path).
DEFAULT_SCHEMA = "public"


class ConstraintKind(Enum):
    """Kinds of named constraints, valued by their name suffix."""

    UNIQUE = "key"
    PRIMARY_KEY = "pkey"
    FOREIGN_KEY = "fkey"
    CHECK = "check"
    EXCLUSION = "excl"
    INDEX = "idx"

    @property
    def suffix(self) -> str:
        return self.value


@dataclass(frozen=True)
class ConstraintName:
    """Canonical name of a constraint on a table.

    Names order by their string form, the same order their fragments sort in.
    """

    kind: ConstraintKind
    schema: str
    table: str
    columns: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(self.columns))

    def __lt__(self, other: ConstraintName) -> bool:
        if not isinstance(other, ConstraintName):
            return NotImplemented
        return str(self) < str(other)

    def __str__(self) -> str:
        schema = self.schema or DEFAULT_SCHEMA
        parts = [self.table]
        if self.kind is not ConstraintKind.PRIMARY_KEY:
            parts.extend(self.columns)
        parts.append(self.kind.suffix)
        return f"{schema}." + "_".join(parts)


def unique(schema: str, table: str, *columns: str) -> ConstraintName:
    return ConstraintName(ConstraintKind.UNIQUE, schema, table, columns)


def primary_key(schema: str, table: str, *columns: str) -> ConstraintName:
    """Primary key name; columns are accepted but never part of the name."""
    return ConstraintName(ConstraintKind.PRIMARY_KEY, schema, table, columns)


def foreign_key(schema: str, table: str, *columns: str) -> ConstraintName:
    return ConstraintName(ConstraintKind.FOREIGN_KEY, schema, table, columns)


def check(schema: str, table: str, *columns: str) -> ConstraintName:
    return ConstraintName(ConstraintKind.CHECK, schema, table, columns)


def exclusion(schema: str, table: str, *columns: str) -> ConstraintName:
    return ConstraintName(ConstraintKind.EXCLUSION, schema, table, columns)


def index(schema: str, table: str, *columns: str) -> ConstraintName:
    return ConstraintName(ConstraintKind.INDEX, schema, table, columns)


# =============================================================================
# Naming Providers
# =============================================================================


class NamingConvention(ABC):
    """Supplies constraint names to the renderer.

    Implementations must be deterministic: identical arguments always give
    the identical name.
    """

    @abstractmethod
    def unique(self, schema: str, table: str, *columns: str) -> str:
        pass

    @abstractmethod
    def primary_key(self, schema: str, table: str, *columns: str) -> str:
        pass

    @abstractmethod
    def foreign_key(self, schema: str, table: str, *columns: str) -> str:
        pass

    @abstractmethod
    def check(self, schema: str, table: str, *columns: str) -> str:
        pass


class PostgresNaming(NamingConvention):
    """Postgres-style names built from `ConstraintName`."""

    def unique(self, schema: str, table: str, *columns: str) -> str:
        return str(unique(schema, table, *columns))

    def primary_key(self, schema: str, table: str, *columns: str) -> str:
        return str(primary_key(schema, table, *columns))

    def foreign_key(self, schema: str, table: str, *columns: str) -> str:
        return str(foreign_key(schema, table, *columns))

    def check(self, schema: str, table: str, *columns: str) -> str:
        return str(check(schema, table, *columns))


DEFAULT_NAMING: NamingConvention = PostgresNaming()


__all__ = [
    "DEFAULT_SCHEMA",
    "ConstraintKind",
    "ConstraintName",
    "NamingConvention",
    "PostgresNaming",
    "DEFAULT_NAMING",
    "unique",
    "primary_key",
    "foreign_key",
    "check",
    "exclusion",
    "index",
]
