"""
Table type definitions for the SWN table engine.

Implements the two leaf table kinds every content module is built from:
- WeightedTable: ranked entries claiming ranges of a dice sum
- UniformList: unweighted list, one item picked with equal probability

Both satisfy the Rollable protocol so composites can hold either.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional, Protocol, Union, runtime_checkable

from swnt.data_models import (
    DiceExpression,
    DiceRoller,
    InvalidConfigurationError,
    TableError,
    get_dice_roller,
)
from swnt.tables.entry_actions import ActionContext, EntryAction, resolve_action

if TYPE_CHECKING:
    from swnt.tables.table_registry import TableRegistry

logger = logging.getLogger(__name__)


class UnresolvedRollError(TableError):
    """Raised when a rolled total matches no entry of a table."""

    def __init__(self, table_name: str, total: int):
        super().__init__(f"Roll of {total} on table '{table_name}' matched no entry")
        self.table_name = table_name
        self.total = total


@runtime_checkable
class Rollable(Protocol):
    """Anything a composite table can roll for a line of text."""

    name: str

    def roll(self, dice: Optional[DiceRoller] = None) -> str:
        ...

    def describe(self) -> str:
        ...


@dataclass(frozen=True)
class TableEntry:
    """
    A single entry in a weighted table.

    The entry claims the inclusive range [roll_min, roll_max], or exactly
    the totals in values when an explicit set is given. When an action is
    attached it is dispatched on selection and its text becomes the
    result; otherwise the static result text is returned.
    """
    roll_min: int
    roll_max: int
    result: str = ""
    action: Optional[EntryAction] = None
    values: Optional[frozenset[int]] = None

    def __post_init__(self):
        if self.roll_min > self.roll_max:
            raise InvalidConfigurationError(
                f"Entry range {self.roll_min}-{self.roll_max} is inverted"
            )
        if self.values is not None:
            values = frozenset(self.values)
            if not values or min(values) != self.roll_min or max(values) != self.roll_max:
                raise InvalidConfigurationError(
                    f"Entry totals {sorted(values)} do not span {self.roll_min}-{self.roll_max}"
                )
            object.__setattr__(self, "values", values)

    @classmethod
    def single(cls, roll: int, result: str = "", action: Optional[EntryAction] = None) -> "TableEntry":
        """Entry claiming exactly one total."""
        return cls(roll_min=roll, roll_max=roll, result=result, action=action)

    @classmethod
    def matching(
        cls, values: Iterable[int], result: str = "", action: Optional[EntryAction] = None
    ) -> "TableEntry":
        """Entry claiming an explicit, possibly non-contiguous, set of totals."""
        values = frozenset(values)
        if not values:
            raise InvalidConfigurationError("Entry must claim at least one total")
        return cls(
            roll_min=min(values),
            roll_max=max(values),
            result=result,
            action=action,
            values=values,
        )

    @property
    def is_dynamic(self) -> bool:
        return self.action is not None

    def totals(self) -> list[int]:
        """Every total this entry claims, ascending."""
        if self.values is not None:
            return sorted(self.values)
        return list(range(self.roll_min, self.roll_max + 1))

    def matches_roll(self, roll: int) -> bool:
        """Check if a roll value falls within this entry's range."""
        if self.values is not None:
            return roll in self.values
        return self.roll_min <= roll <= self.roll_max

    def range_label(self) -> str:
        if self.values is not None and len(self.values) != self.roll_max - self.roll_min + 1:
            return ",".join(str(v) for v in sorted(self.values))
        if self.roll_min == self.roll_max:
            return str(self.roll_min)
        return f"{self.roll_min}-{self.roll_max}"


def validate_coverage(
    table_name: str,
    dice: DiceExpression,
    entries: list[TableEntry],
    allow_unreachable: bool = False,
) -> None:
    """
    Check that entries resolve every total of dice exactly once.

    Args:
        table_name: Used in error messages
        dice: The expression whose domain must be covered
        entries: Entries in table order
        allow_unreachable: Permit entries beyond the domain. Used when a
            table's dice are rewritten to a smaller expression at runtime.

    Raises:
        InvalidConfigurationError: On overlap, gap or out-of-domain entry
    """
    if not entries:
        raise InvalidConfigurationError(f"Table '{table_name}' has no entries")

    claimed: dict[int, TableEntry] = {}
    for entry in entries:
        for value in entry.totals():
            if value in claimed:
                raise InvalidConfigurationError(
                    f"Table '{table_name}': entries {claimed[value].range_label()} "
                    f"and {entry.range_label()} overlap at {value}"
                )
            claimed[value] = entry

    domain = dice.domain()
    if not allow_unreachable:
        outside = sorted(v for v in claimed if v not in domain)
        if outside:
            raise InvalidConfigurationError(
                f"Table '{table_name}': totals {outside} fall outside {dice} "
                f"({dice.min_total}-{dice.max_total})"
            )

    missing = [v for v in domain if v not in claimed]
    if missing:
        raise InvalidConfigurationError(
            f"Table '{table_name}': totals {missing} of {dice} are not covered"
        )


@dataclass
class TableRollResult:
    """Complete result of a weighted table roll."""
    table_id: str
    table_name: str
    roll_total: int
    entry: TableEntry
    result_text: str = ""


@dataclass(eq=False)
class WeightedTable:
    """
    A ranked table resolved by a dice sum.

    Entries are fixed after construction. The dice expression is the one
    mutable part: an entry action may swap it (through the registry) to
    collapse the table onto a different distribution for later rolls.
    """
    name: str
    dice: DiceExpression
    entries: list[TableEntry]
    table_id: str = ""
    description: str = ""

    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def __post_init__(self):
        if isinstance(self.dice, str):
            self.dice = DiceExpression.parse(self.dice)
        self.entries = list(self.entries)
        validate_coverage(self.name, self.dice, self.entries)

    @classmethod
    def from_list(cls, name: str, items: list[str], table_id: str = "") -> "WeightedTable":
        """A 1dN table with one entry per face, N being len(items)."""
        if len(items) < 2:
            raise InvalidConfigurationError(f"Table '{name}' needs at least 2 items for a die")
        return cls(
            name=name,
            dice=DiceExpression(count=1, faces=len(items)),
            entries=[TableEntry.single(i, text) for i, text in enumerate(items, start=1)],
            table_id=table_id,
        )

    @property
    def label(self) -> str:
        return self.name

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def get_min_roll(self) -> int:
        return self.dice.min_total

    def get_max_roll(self) -> int:
        return self.dice.max_total

    def find_entry(self, total: int) -> TableEntry:
        """Return the first entry whose range contains total."""
        for entry in self.entries:
            if entry.matches_roll(total):
                return entry
        raise UnresolvedRollError(self.name, total)

    def set_dice(self, dice: Union[DiceExpression, str]) -> None:
        """
        Rewrite this table's dice expression.

        Every total of the new expression must still resolve; entries
        beyond its domain simply become unreachable.
        """
        if isinstance(dice, str):
            dice = DiceExpression.parse(dice)
        with self._lock:
            validate_coverage(self.name, dice, self.entries, allow_unreachable=True)
            logger.debug(f"Table '{self.table_id or self.name}' dice {self.dice} -> {dice}")
            self.dice = dice

    def copy(self) -> "WeightedTable":
        """Independent table sharing entries, with its own dice and lock."""
        return WeightedTable(
            name=self.name,
            dice=self.dice,
            entries=list(self.entries),
            table_id=self.table_id,
            description=self.description,
        )

    def roll_detailed(
        self,
        dice: Optional[DiceRoller] = None,
        registry: Optional["TableRegistry"] = None,
    ) -> TableRollResult:
        """
        Roll on this table and return the full result.

        Args:
            dice: Random source, defaults to the process-wide roller
            registry: Registry handed to entry actions, defaults to the
                process-wide registry

        Returns:
            TableRollResult with the total, entry and resolved text

        Raises:
            UnresolvedRollError: If the total matches no entry
        """
        dice = dice or get_dice_roller()
        # Only the draw and match hold the lock. Actions run without it.
        with self._lock:
            total = self.dice.roll(dice, f"table roll: {self.table_id or self.name}")
            entry = self.find_entry(total)

        if entry.action is not None:
            if registry is None:
                from swnt.tables.table_registry import get_table_registry

                registry = get_table_registry()
            context = ActionContext(table=self, dice=dice, registry=registry, roll_total=total)
            text = resolve_action(entry.action, context)
        else:
            text = entry.result

        logger.debug(f"Rolled {total} on '{self.name}': {text!r}")
        return TableRollResult(
            table_id=self.table_id,
            table_name=self.name,
            roll_total=total,
            entry=entry,
            result_text=text,
        )

    def roll(
        self,
        dice: Optional[DiceRoller] = None,
        registry: Optional["TableRegistry"] = None,
    ) -> str:
        """Roll on this table and return the result text."""
        return self.roll_detailed(dice, registry).result_text

    def describe(self) -> str:
        """Full table listing, one entry per line."""
        lines = [f"{self.name} ({self.dice})"]
        for entry in self.entries:
            text = entry.result or f"<{entry.action.kind.value}>"
            lines.append(f"{entry.range_label()}\t{text}")
        return "\n".join(lines)


@dataclass
class UniformList:
    """An unweighted table: every item is equally likely."""
    name: str
    items: list[str]

    def __post_init__(self):
        self.items = list(self.items)
        if not self.items:
            raise InvalidConfigurationError(f"List '{self.name}' has no items")

    @property
    def label(self) -> str:
        return self.name

    def roll(self, dice: Optional[DiceRoller] = None) -> str:
        """Pick one item uniformly."""
        dice = dice or get_dice_roller()
        index = dice.randint(1, len(self.items), f"list roll: {self.name}") - 1
        return self.items[index]

    def random(self, dice: Optional[DiceRoller] = None) -> str:
        """Same draw as roll(), for one-off picks outside a table."""
        return self.roll(dice)

    def describe(self) -> str:
        return "\n".join([self.name] + self.items)

    def __len__(self) -> int:
        return len(self.items)
