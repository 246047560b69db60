"""pgtable Loader - Declarative table definitions from YAML.

A definition file holds either one table mapping or a ``tables`` list:

    tables:
      - name: users
        schema: app
        if_not_exists: true
        columns:
          - {name: id, type: SERIAL, primary_key: true}
          - {name: email, type: TEXT, not_null: true, unique: true}
          - {name: team_id, type: INTEGER, reference_table: teams, reference_column: id}
        constraints:
          - check: "char_length(email) > 3"
            columns: [email]

Field names match the Table, Column and Constraint attributes.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Type, TypeVar, Union

import yaml

from pgtable_core import naming
from pgtable_core.errors import DefinitionError
from pgtable_core.schema import Column, Constraint, Table

logger = logging.getLogger(__name__)

T = TypeVar("T", Column, Constraint, Table)

_LIST_FIELDS = {"columns", "reference_columns"}
_BOOL_FIELDS = {f.name for cls in (Column, Constraint, Table) for f in fields(cls) if f.type == "bool"}

_STR_TAG = "tag:yaml.org,2002:str"
_NULL_TAG = "tag:yaml.org,2002:null"


class DefinitionLoader(yaml.SafeLoader):
    """SafeLoader that keeps the written text of every non-flag scalar.

    SQL text such as ``default: 010`` or ``default: true`` reaches the
    statement exactly as written instead of as a resolved int or bool.
    """

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            for key_node, value_node in node.value:
                if not isinstance(key_node, yaml.ScalarNode) or key_node.value in _BOOL_FIELDS:
                    continue
                if isinstance(value_node, yaml.SequenceNode) and key_node.value in _LIST_FIELDS:
                    items = value_node.value
                else:
                    items = [value_node]
                for item in items:
                    if isinstance(item, yaml.ScalarNode) and item.tag != _NULL_TAG:
                        item.tag = _STR_TAG
        return super().construct_mapping(node, deep=deep)


# ---------------------------------------------------------------------------
# Coercion Utilities
# ---------------------------------------------------------------------------


def _ensure_list(value: Any) -> List[str]:
    """Return value coerced into a list of clean strings."""
    if value is None:
        return []
    if isinstance(value, list):
        return [str(item).strip() for item in value if str(item).strip()]
    if isinstance(value, str):
        stripped = value.strip()
        return [stripped] if stripped else []
    raise DefinitionError(f"Expected list-compatible value, received {type(value)!r}")


def _ensure_str(key: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DefinitionError(
            f"Field '{key}' must be a string, received {type(value).__name__} (quote the value to keep its text)"
        )
    return value


def _ensure_bool(key: str, value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DefinitionError(f"Field '{key}' must be true or false, received {value!r}")
    return value


def _build(cls: Type[T], data: Any, context: str) -> T:
    """Build a dataclass from a mapping of scalar fields."""
    if not isinstance(data, Mapping):
        raise DefinitionError(f"{context} must be a mapping, received {type(data).__name__}")

    known = {f.name: f for f in fields(cls)}
    unknown = sorted(set(data) - set(known), key=str)
    if unknown:
        raise DefinitionError(f"{context} has unknown fields: {', '.join(map(str, unknown))}")

    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _LIST_FIELDS:
            kwargs[key] = _ensure_list(value)
        elif known[key].type == "bool":
            kwargs[key] = _ensure_bool(key, value)
        else:
            kwargs[key] = _ensure_str(key, value)

    try:
        return cls(**kwargs)
    except TypeError as e:
        raise DefinitionError(f"{context} is incomplete: {e}") from e


# ---------------------------------------------------------------------------
# Definition Loading
# ---------------------------------------------------------------------------


def column_from_dict(data: Any) -> Column:
    """Build a Column from a mapping."""
    return _build(Column, data, "Column definition")


def constraint_from_dict(data: Any, schema: str = "", table: str = "") -> Constraint:
    """Build a Constraint from a mapping.

    A check without an explicit name gets the canonical check name.
    """
    constraint = _build(Constraint, data, "Constraint definition")
    if constraint.check and not constraint.name:
        return replace(constraint, name=str(naming.check(schema, table, *constraint.columns)))
    return constraint


def table_from_dict(data: Any) -> Table:
    """Build a Table from a mapping.

    Args:
        data: Mapping with Table fields; ``columns`` and ``constraints``
            are lists of mappings

    Returns:
        Table definition

    Raises:
        DefinitionError: Definition is malformed
    """
    if not isinstance(data, MutableMapping):
        raise DefinitionError(f"Table definition must be a mapping, received {type(data).__name__}")

    body = dict(data)
    raw_columns = body.pop("columns", None) or []
    raw_constraints = body.pop("constraints", None) or []
    if not isinstance(raw_columns, list):
        raise DefinitionError("Table field 'columns' must be a list")
    if not isinstance(raw_constraints, list):
        raise DefinitionError("Table field 'constraints' must be a list")

    table = _build(Table, body, "Table definition")
    schema, name = table.schema, table.name

    columns = [column_from_dict(item) for item in raw_columns]
    constraints = [constraint_from_dict(item, schema, name) for item in raw_constraints]

    logger.debug(f"Loaded table {table.full_name}: {len(columns)} columns, {len(constraints)} constraints")

    return Table(
        name=table.name,
        schema=table.schema,
        collate=table.collate,
        table_space=table.table_space,
        if_not_exists=table.if_not_exists,
        temporary=table.temporary,
        columns=columns,
        constraints=constraints,
    )


def tables_from_document(data: Any) -> List[Table]:
    """Build tables from a parsed YAML document."""
    if data is None:
        return []
    if not isinstance(data, MutableMapping):
        raise DefinitionError("Definition must be a mapping at the top level")

    if "tables" in data:
        items = data["tables"]
        if not isinstance(items, list):
            raise DefinitionError("Definition field 'tables' must be a list")
        return [table_from_dict(item) for item in items]

    return [table_from_dict(data)]


def load_tables(path: Union[str, Path]) -> List[Table]:
    """Load and validate table definitions from a YAML file."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.load(handle, Loader=DefinitionLoader)
        except UnicodeDecodeError as e:
            raise DefinitionError(f"Invalid encoding in {path}: {e}") from e
        except yaml.YAMLError as e:
            raise DefinitionError(f"Invalid YAML in {path}: {e}") from e

    tables = tables_from_document(data)
    logger.info(f"Loaded {len(tables)} table definitions from {path}")
    return tables


__all__ = [
    "column_from_dict",
    "constraint_from_dict",
    "table_from_dict",
    "tables_from_document",
    "load_tables",
]
