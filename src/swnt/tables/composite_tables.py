"""
Composite tables: several independent sub-rolls in one structured record.

Two shapes recur throughout SWN:
- ThreePart: pick one named group uniformly, then roll its two subtables
- OneRoll: one table per die size (d4 through d20), every one rolled
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from swnt.data_models import DiceRoller, DieType, InvalidConfigurationError, get_dice_roller
from swnt.tables.table_types import Rollable, WeightedTable

logger = logging.getLogger(__name__)


# =============================================================================
# THREE PART TABLES
# =============================================================================


@dataclass
class ThreePartGroup:
    """One named group of a ThreePart table and its two subtables."""
    name: str
    sub1: Rollable
    sub2: Rollable

    def describe(self) -> str:
        return f"{self.name}\n{self.sub1.describe()}\n{self.sub2.describe()}"


@dataclass
class ThreePartResult:
    """Result of a ThreePart roll: the chosen group and both sub-results."""
    headers: tuple[str, str, str]
    group_name: str
    result1: str
    result2: str

    def rows(self) -> list[tuple[str, str]]:
        return [
            (self.headers[0], self.group_name),
            (self.headers[1], self.result1),
            (self.headers[2], self.result2),
        ]


@dataclass
class ThreePart:
    """
    A multi-layer table: a uniform choice among named groups, each
    holding two independent subtables.
    """
    name: str
    headers: tuple[str, str, str]
    groups: list[ThreePartGroup]

    def __post_init__(self):
        self.headers = tuple(self.headers)
        if len(self.headers) != 3:
            raise InvalidConfigurationError(
                f"ThreePart '{self.name}' needs exactly 3 headers, got {len(self.headers)}"
            )
        if not self.groups:
            raise InvalidConfigurationError(f"ThreePart '{self.name}' has no groups")

    def roll(self, dice: Optional[DiceRoller] = None) -> ThreePartResult:
        """Choose a group uniformly and roll both of its subtables."""
        dice = dice or get_dice_roller()
        index = dice.randint(1, len(self.groups), f"three part group: {self.name}") - 1
        group = self.groups[index]
        return ThreePartResult(
            headers=self.headers,
            group_name=group.name,
            result1=group.sub1.roll(dice),
            result2=group.sub2.roll(dice),
        )

    def describe(self) -> str:
        return "\n".join(group.describe() for group in self.groups)


# =============================================================================
# ONE ROLL TABLES
# =============================================================================


ONE_ROLL_SIZES: tuple[DieType, ...] = (
    DieType.D4,
    DieType.D6,
    DieType.D8,
    DieType.D10,
    DieType.D12,
    DieType.D20,
)


@dataclass
class OneRollResult:
    """Every line of a OneRoll, in die-size order."""
    name: str
    lines: list[tuple[str, str]] = field(default_factory=list)

    def rows(self) -> list[tuple[str, str]]:
        return list(self.lines)


@dataclass
class OneRoll:
    """
    The one-roll tables spread through SWN: a d4, d6, d8, d10, d12 and
    d20 table, each rolled once.

    A WeightedTable member must roll a single die of its slot's size.
    UniformList members are accepted as is.
    """
    name: str
    d4: Rollable
    d6: Rollable
    d8: Rollable
    d10: Rollable
    d12: Rollable
    d20: Rollable

    def __post_init__(self):
        for size, member in zip(ONE_ROLL_SIZES, self.members()):
            if isinstance(member, WeightedTable):
                if member.dice.count != 1 or member.dice.faces != size.faces:
                    raise InvalidConfigurationError(
                        f"OneRoll '{self.name}': {size.value} slot holds "
                        f"'{member.name}' rolling {member.dice}"
                    )

    def members(self) -> list[Rollable]:
        return [self.d4, self.d6, self.d8, self.d10, self.d12, self.d20]

    def roll(self, dice: Optional[DiceRoller] = None) -> OneRollResult:
        """Roll every member table."""
        dice = dice or get_dice_roller()
        result = OneRollResult(name=self.name)
        for member in self.members():
            result.lines.append((member.name, member.roll(dice)))
        return result

    def describe(self) -> str:
        return "\n".join(member.describe() for member in self.members()) + "\n"
