"""pgtable CLI - Render table definitions from the command line.

Provides:
- CREATE TABLE rendering of YAML table definitions
- Canonical constraint names per column
- Host-language type mapping per column

Usage:
    pgtable render tables.yaml
    pgtable render tables.yaml --json
    pgtable names tables.yaml
    pgtable types tables.yaml --target python

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, Sequence

from pgtable_core import __version__
from pgtable_core.errors import PgTableError
from pgtable_core.loader import load_tables
from pgtable_core.schema import Table
from pgtable_core.types import HostTarget, HostTypeMapper

logger = logging.getLogger(__name__)


# =============================================================================
# Output Formatting
# =============================================================================


class OutputFormatter:
    """Formats output for CLI display."""

    COLORS = {
        "reset": "\033[0m",
        "bold": "\033[1m",
        "dim": "\033[2m",
        "red": "\033[31m",
    }

    def __init__(self, color: bool = True, json_output: bool = False):
        """Initialize formatter.

        Args:
            color: Enable colored output
            json_output: Output as JSON
        """
        self.color = color and sys.stdout.isatty()
        self.json_output = json_output

    def _c(self, text: str, color: str) -> str:
        """Colorize text if color enabled."""
        if self.color:
            return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"
        return text

    def error(self, message: str) -> None:
        """Print error message."""
        if self.json_output:
            print(json.dumps({"status": "error", "message": message}))
        else:
            print(self._c("✗", "red"), message, file=sys.stderr)

    def emit(self, data: Any) -> None:
        """Print a JSON document."""
        print(json.dumps(data, indent=2))

    def table(self, headers: List[str], rows: List[List[Any]], title: Optional[str] = None) -> None:
        """Print formatted table."""
        if title:
            print(self._c(title, "bold"))
            print()

        if not rows:
            print(self._c("(empty)", "dim"))
            return

        cells = [[str(cell) for cell in row] for row in rows]
        widths = [max(len(text) for text in column) for column in zip(headers, *cells)]

        def line(values: List[str]) -> str:
            return " │ ".join(value.ljust(width) for value, width in zip(values, widths))

        print(self._c(line(headers), "bold"))
        print("─┼─".join("─" * width for width in widths))
        for row in cells:
            print(line(row))

        print()


# =============================================================================
# Command Handlers
# =============================================================================


def _load_all(paths: Sequence[str]) -> List[Table]:
    tables: List[Table] = []
    for path in paths:
        tables.extend(load_tables(path))
    return tables


def cmd_render(args: argparse.Namespace, formatter: OutputFormatter) -> int:
    """Print CREATE TABLE statements."""
    tables = _load_all(args.files)
    statements = [(table.full_name, table.create_query()) for table in tables]

    if formatter.json_output:
        formatter.emit({"tables": [{"name": name, "sql": sql} for name, sql in statements]})
    else:
        print("\n\n".join(sql for _, sql in statements))

    logger.debug(f"Rendered {len(statements)} statements")
    return 0


def cmd_names(args: argparse.Namespace, formatter: OutputFormatter) -> int:
    """Print canonical constraint names implied by column flags."""
    tables = _load_all(args.files)
    result = {}

    for table in tables:
        rows = []
        for column in table.columns:
            for name in column.constraint_names(table.schema, table.name):
                rows.append([column.name, name.kind.name, str(name)])
        result[table.full_name] = rows

    if formatter.json_output:
        keys = ("column", "kind", "name")
        formatter.emit({table: [dict(zip(keys, row)) for row in rows] for table, rows in result.items()})
    else:
        for table, rows in result.items():
            formatter.table(["Column", "Kind", "Name"], rows, table)

    return 0


def cmd_types(args: argparse.Namespace, formatter: OutputFormatter) -> int:
    """Print host-language types of every column."""
    tables = _load_all(args.files)
    target = HostTarget(args.target)
    mapper = HostTypeMapper()
    result = {}

    for table in tables:
        result[table.full_name] = [
            [column.name, column.type, mapper.map(column, target) or "-"] for column in table.columns
        ]

    if formatter.json_output:
        keys = ("column", "sql_type", "host_type")
        formatter.emit({table: [dict(zip(keys, row)) for row in rows] for table, rows in result.items()})
    else:
        for table, rows in result.items():
            formatter.table(["Column", "SQL Type", f"{target.value} type"], rows, table)

    return 0


# =============================================================================
# Main Entry Point
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="pgtable",
        description="pgtable - canonical CREATE TABLE statements from table definitions",
    )

    parser.add_argument("--version", "-V", action="version", version=f"pgtable {__version__}")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Render
    render_parser = subparsers.add_parser("render", help="Render CREATE TABLE statements")
    render_parser.add_argument("files", nargs="+", help="YAML definition files")

    # Names
    names_parser = subparsers.add_parser("names", help="List canonical constraint names")
    names_parser.add_argument("files", nargs="+", help="YAML definition files")

    # Types
    types_parser = subparsers.add_parser("types", help="Map column types to a host language")
    types_parser.add_argument("files", nargs="+", help="YAML definition files")
    types_parser.add_argument("--target", "-t", default="go", choices=[t.value for t in HostTarget])

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    formatter = OutputFormatter(color=not args.no_color, json_output=args.json)

    if not args.command:
        parser.print_help()
        return 1

    # Command dispatch
    commands = {
        "render": cmd_render,
        "names": cmd_names,
        "types": cmd_types,
    }

    handler = commands.get(args.command)
    if handler is None:
        formatter.error(f"Unknown command: {args.command}")
        return 1

    try:
        return handler(args, formatter)
    except (PgTableError, OSError) as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        formatter.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
