"""
Table Registry for the SWN table engine.

Provides process-wide lookup of weighted tables by ID so that an entry
action can roll, or rewrite the dice of, another table (or its own).

Content modules register their tables once at import time. Lookups of an
unregistered ID are reported explicitly: get() returns a result with
found=False, require() raises TableNotFoundError.
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from swnt.data_models import TableError
from swnt.tables.table_types import WeightedTable

logger = logging.getLogger(__name__)


class TableNotFoundError(TableError, LookupError):
    """Raised when a table ID is not registered."""

    def __init__(self, table_id: str):
        super().__init__(f"No table registered with id '{table_id}'")
        self.table_id = table_id


@dataclass
class TableLookupResult:
    """Result of a table lookup operation."""

    table: Optional[WeightedTable] = None
    found: bool = False
    error: Optional[str] = None


class TableRegistry:
    """
    In-memory registry of weighted tables keyed by table_id.

    Usage:
        registry = get_table_registry()
        registry.add(leadership_table)

        result = registry.get("religion.Leadership")
        if result.found:
            text = result.table.roll()

        # In-place rewrites hold the table's lock for their duration
        with registry.mutate("religion.Leadership") as table:
            table.set_dice("1d5")
    """

    def __init__(self):
        self._tables: dict[str, WeightedTable] = {}
        self._lock = threading.Lock()

    def add(self, table: WeightedTable) -> None:
        """
        Register a table under its table_id.

        Anonymous tables (empty table_id) are ignored. Re-adding an ID
        replaces the previous table.
        """
        if not table.table_id:
            logger.debug(f"Table '{table.name}' has no id, not registering")
            return

        with self._lock:
            previous = self._tables.get(table.table_id)
            self._tables[table.table_id] = table

        if previous is not None and previous is not table:
            logger.debug(f"Replaced table registered as '{table.table_id}'")
        else:
            logger.debug(f"Registered table '{table.table_id}'")

    def get(self, table_id: str) -> TableLookupResult:
        """Look up a table by ID."""
        with self._lock:
            table = self._tables.get(table_id)
        if table is None:
            return TableLookupResult(error=f"No table registered with id '{table_id}'")
        return TableLookupResult(table=table, found=True)

    def require(self, table_id: str) -> WeightedTable:
        """
        Look up a table that must exist.

        Raises:
            TableNotFoundError: If the ID is not registered
        """
        result = self.get(table_id)
        if not result.found:
            raise TableNotFoundError(table_id)
        return result.table

    @contextmanager
    def mutate(self, table_id: str) -> Iterator[WeightedTable]:
        """Yield a registered table while holding its lock."""
        table = self.require(table_id)
        with table.lock:
            yield table

    def ids(self) -> list[str]:
        with self._lock:
            return sorted(self._tables)

    def clear(self) -> None:
        with self._lock:
            self._tables.clear()

    def __contains__(self, table_id: object) -> bool:
        with self._lock:
            return table_id in self._tables

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)


# Global registry instance
_default_registry: Optional[TableRegistry] = None


def get_table_registry() -> TableRegistry:
    """Get the process-wide TableRegistry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TableRegistry()
    return _default_registry


def reset_table_registry() -> None:
    """Reset the process-wide registry (useful for testing)."""
    global _default_registry
    _default_registry = None
