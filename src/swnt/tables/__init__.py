"""
Table engine for the SWN generators.

This module provides:
- Weighted tables and uniform lists
- Entry actions (static text or a named dynamic behaviour)
- The process-wide table registry
- Composite tables (ThreePart, OneRoll)
"""

from swnt.tables.entry_actions import (
    ActionKind,
    EntryAction,
    ActionContext,
    resolve_action,
)

from swnt.tables.table_types import (
    Rollable,
    TableEntry,
    TableRollResult,
    WeightedTable,
    UniformList,
    UnresolvedRollError,
    validate_coverage,
)

from swnt.tables.table_registry import (
    TableRegistry,
    TableLookupResult,
    TableNotFoundError,
    get_table_registry,
    reset_table_registry,
)

from swnt.tables.composite_tables import (
    ThreePart,
    ThreePartGroup,
    ThreePartResult,
    OneRoll,
    OneRollResult,
    ONE_ROLL_SIZES,
)

__all__ = [
    # Actions
    "ActionKind",
    "EntryAction",
    "ActionContext",
    "resolve_action",
    # Table types
    "Rollable",
    "TableEntry",
    "TableRollResult",
    "WeightedTable",
    "UniformList",
    "UnresolvedRollError",
    "validate_coverage",
    # Registry
    "TableRegistry",
    "TableLookupResult",
    "TableNotFoundError",
    "get_table_registry",
    "reset_table_registry",
    # Composites
    "ThreePart",
    "ThreePartGroup",
    "ThreePartResult",
    "OneRoll",
    "OneRollResult",
    "ONE_ROLL_SIZES",
]
