"""
Dynamic entry behaviours for weighted tables.

An entry resolves either to fixed text or to the output of an action.
Actions are a tagged variant: an ActionKind plus parameters, dispatched
through a fixed handler table. Actions reach other tables (or their own)
only through the registry carried in the ActionContext.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Union

from swnt.data_models import DiceExpression, DiceRoller, InvalidConfigurationError, TableError

if TYPE_CHECKING:
    from swnt.tables.table_registry import TableRegistry
    from swnt.tables.table_types import WeightedTable

logger = logging.getLogger(__name__)

# Nested action dispatches allowed on one thread before giving up
MAX_ACTION_DEPTH = 32


class ActionKind(str, Enum):
    """Named behaviours an entry can carry instead of static text."""
    ROLL_TABLE = "roll_table"                    # Roll another registered table
    COLLAPSE_AND_REROLL = "collapse_and_reroll"  # Rewrite a table's dice, then roll it
    CALLABLE = "callable"                        # Embedding module supplies a function


_REQUIRED_PARAMS: dict[ActionKind, tuple[str, ...]] = {
    ActionKind.ROLL_TABLE: ("table_id",),
    ActionKind.COLLAPSE_AND_REROLL: ("table_id", "dice"),
    ActionKind.CALLABLE: ("func",),
}


@dataclass(frozen=True)
class EntryAction:
    """An action attached to a table entry."""
    kind: ActionKind
    params: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        try:
            object.__setattr__(self, "kind", ActionKind(self.kind))
        except ValueError:
            raise InvalidConfigurationError(f"Unknown action kind: {self.kind!r}") from None
        missing = [p for p in _REQUIRED_PARAMS[self.kind] if p not in self.params]
        if missing:
            raise InvalidConfigurationError(
                f"{self.kind.value} action missing parameters: {', '.join(missing)}"
            )
        if self.kind == ActionKind.COLLAPSE_AND_REROLL:
            skip_in = self.params.get("skip_in", 0)
            skip_die = self.params.get("skip_die", 6)
            if skip_die < 2 or not 0 <= skip_in <= skip_die:
                raise InvalidConfigurationError(
                    f"Skip chance {skip_in}-in-{skip_die} is not a valid X-in-Y check"
                )
        if self.kind == ActionKind.CALLABLE and not callable(self.params["func"]):
            raise InvalidConfigurationError("callable action needs a callable 'func'")

    @classmethod
    def roll_table(cls, table_id: str, prefix: str = "") -> "EntryAction":
        return cls(ActionKind.ROLL_TABLE, {"table_id": table_id, "prefix": prefix})

    @classmethod
    def collapse_and_reroll(
        cls,
        table_id: str,
        dice: Union[DiceExpression, str],
        prefix: str = "",
        skip_in: int = 0,
        skip_die: int = 6,
    ) -> "EntryAction":
        """
        Rewrite table_id's dice to dice, then roll it.

        With a skip_in-in-skip_die chance the action produces no further
        result and returns an empty string instead.
        """
        if isinstance(dice, str):
            dice = DiceExpression.parse(dice)
        return cls(
            ActionKind.COLLAPSE_AND_REROLL,
            {
                "table_id": table_id,
                "dice": dice,
                "prefix": prefix,
                "skip_in": skip_in,
                "skip_die": skip_die,
            },
        )

    @classmethod
    def call(cls, func: Callable[["ActionContext"], str]) -> "EntryAction":
        return cls(ActionKind.CALLABLE, {"func": func})


@dataclass
class ActionContext:
    """What an action can see while it runs."""
    table: "WeightedTable"
    dice: DiceRoller
    registry: "TableRegistry"
    roll_total: int


ActionHandler = Callable[[EntryAction, ActionContext], str]


def _roll_table(action: EntryAction, context: ActionContext) -> str:
    target = context.registry.require(action.params["table_id"])
    return action.params.get("prefix", "") + target.roll(context.dice, context.registry)


def _collapse_and_reroll(action: EntryAction, context: ActionContext) -> str:
    table_id = action.params["table_id"]
    with context.registry.mutate(table_id) as target:
        target.set_dice(action.params["dice"])

    skip_in = action.params.get("skip_in", 0)
    skip_die = action.params.get("skip_die", 6)
    if skip_in:
        check = context.dice.randint(1, skip_die, f"{skip_in}-in-{skip_die} check: {table_id}")
        if check > skip_die - skip_in:
            logger.debug(f"Collapse of '{table_id}' produced no further result")
            return ""

    return action.params.get("prefix", "") + target.roll(context.dice, context.registry)


def _call(action: EntryAction, context: ActionContext) -> str:
    return action.params["func"](context)


_HANDLERS: dict[ActionKind, ActionHandler] = {
    ActionKind.ROLL_TABLE: _roll_table,
    ActionKind.COLLAPSE_AND_REROLL: _collapse_and_reroll,
    ActionKind.CALLABLE: _call,
}

_depth = threading.local()


def resolve_action(action: EntryAction, context: ActionContext) -> str:
    """
    Dispatch an entry action and return its text.

    Raises:
        TableError: If actions nest deeper than MAX_ACTION_DEPTH
    """
    depth = getattr(_depth, "value", 0)
    if depth >= MAX_ACTION_DEPTH:
        raise TableError(
            f"Action nesting exceeded {MAX_ACTION_DEPTH} levels on table '{context.table.name}'"
        )

    logger.debug(f"Dispatching {action.kind.value} from '{context.table.name}' on {context.roll_total}")
    _depth.value = depth + 1
    try:
        text = _HANDLERS[action.kind](action, context)
    finally:
        _depth.value = depth

    if not isinstance(text, str):
        raise TableError(
            f"{action.kind.value} action on '{context.table.name}' returned {type(text).__name__}"
        )
    return text
