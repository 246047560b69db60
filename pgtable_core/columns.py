"""pgtable Columns - Column-name list helpers for query builders.

Every method returns a new Columns; the receiver is never modified.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import List


class Columns(List[str]):
    """Ordered column names, duplicates allowed."""

    def exclude(self, *names: str) -> Columns:
        """Copy without the given names."""
        excluded = set(names)
        return Columns(column for column in self if column not in excluded)

    def keep(self, *names: str) -> Columns:
        """Copy with only the given names, in receiver order.

        No match gives an empty Columns.
        """
        kept = set(names)
        return Columns(column for column in self if column in kept)

    def with_prefix(self, prefix: str) -> Columns:
        """Copy with every name qualified as ``prefix.name``."""
        return Columns(f"{prefix}.{column}" for column in self)

    def join(self, sep: str) -> str:
        return sep.join(self)

    def go_string(self) -> str:
        return "[" + self.join(", ") + "]"

    def __repr__(self) -> str:
        return f"Columns({list(self)!r})"


__all__ = ["Columns"]
