"""
Core data models for the SWN table engine.

Holds the pieces every other module leans on:
- Error hierarchy shared by tables, registry and content modules
- DiceExpression, the immutable "N dice of size D" value
- DiceRoller, the single injectable random source
- DiceResult, the logged record of a single roll
"""

import logging
import random
import re
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


# =============================================================================
# ERRORS
# =============================================================================


class TableError(Exception):
    """Base class for all table engine errors."""

    pass


class InvalidConfigurationError(TableError, ValueError):
    """Raised when a table, list or dice expression is authored incorrectly."""

    pass


# =============================================================================
# ENUMERATIONS
# =============================================================================


class DieType(str, Enum):
    """Standard die sizes used by SWN tables."""
    D2 = "d2"
    D3 = "d3"
    D4 = "d4"
    D5 = "d5"    # d10/2, used by collapsed leadership rolls
    D6 = "d6"
    D8 = "d8"
    D10 = "d10"
    D12 = "d12"
    D20 = "d20"
    D100 = "d100"

    @property
    def faces(self) -> int:
        return int(self.value[1:])


# =============================================================================
# DICE AND RANDOMIZATION
# =============================================================================


_NOTATION_RE = re.compile(r"^\s*(\d*)\s*[dD]\s*(\d+)\s*$")


@dataclass(frozen=True)
class DiceExpression:
    """
    An immutable "count dice of size faces" expression.

    Produces a sum in [count, count * faces]. Tables hold one of these
    and may swap it for another at runtime, but an expression itself
    never changes.
    """
    count: int
    faces: int

    def __post_init__(self):
        if not isinstance(self.count, int) or self.count < 1:
            raise InvalidConfigurationError(
                f"Dice count must be an integer >= 1, got {self.count!r}"
            )
        if not isinstance(self.faces, int) or self.faces < 2:
            raise InvalidConfigurationError(
                f"Dice faces must be an integer >= 2, got {self.faces!r}"
            )

    @classmethod
    def parse(cls, notation: str) -> "DiceExpression":
        """
        Parse standard notation such as '2d6' or 'd8'.

        Modifiers such as '1d6+2' are not part of a table's dice and are
        rejected.
        """
        match = _NOTATION_RE.match(notation or "")
        if not match:
            raise InvalidConfigurationError(f"Invalid dice expression: {notation!r}")
        count = int(match.group(1)) if match.group(1) else 1
        return cls(count=count, faces=int(match.group(2)))

    @classmethod
    def of(cls, die_type: DieType, count: int = 1) -> "DiceExpression":
        """Build an expression from a DieType."""
        return cls(count=count, faces=die_type.faces)

    @property
    def min_total(self) -> int:
        return self.count

    @property
    def max_total(self) -> int:
        return self.count * self.faces

    def domain(self) -> range:
        """Every sum this expression can produce."""
        return range(self.min_total, self.max_total + 1)

    def roll(self, dice: Optional["DiceRoller"] = None, reason: str = "") -> int:
        """Roll the expression and return the sum."""
        dice = dice or get_dice_roller()
        return dice.roll_expression(self, reason).total

    def __str__(self) -> str:
        return f"{self.count}d{self.faces}"


@dataclass
class DiceResult:
    """Result of a dice roll with full information."""
    notation: str
    rolls: list[int]
    total: int
    reason: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.notation}: {self.rolls} = {self.total}"


class DiceRoller:
    """
    Centralized randomization interface.

    All table, list and composite rolls draw from a DiceRoller so that a
    test can inject a deterministic source. The wrapped source only needs
    a ``randint(a, b)`` method, which makes ``random.Random`` and simple
    scripted stubs interchangeable.
    """

    def __init__(self, rng: Optional[Any] = None, seed: Optional[int] = None):
        """
        Initialize the roller.

        Args:
            rng: Object exposing randint(a, b). Defaults to a new random.Random.
            seed: Seed for the default random.Random. Ignored when rng is given.
                  Defaults to the current time.
        """
        if rng is None:
            self._seed = seed if seed is not None else time.time_ns()
            rng = random.Random(self._seed)
        else:
            self._seed = seed
        self._rng = rng
        self._roll_log: list[DiceResult] = []

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Replace the random source with a freshly seeded random.Random."""
        self._seed = seed
        self._rng = random.Random(seed)

    def randint(self, a: int, b: int, reason: str = "") -> int:
        """Return a random integer in [a, b], inclusive, and log it."""
        if a > b:
            raise InvalidConfigurationError(f"Empty range [{a}, {b}]")
        value = self._rng.randint(a, b)
        notation = f"d{b - a + 1}" if a == 1 else f"range({a}-{b})"
        self._roll_log.append(DiceResult(notation=notation, rolls=[value], total=value, reason=reason))
        return value

    def roll_expression(
        self, expression: Union[DiceExpression, str], reason: str = ""
    ) -> DiceResult:
        """
        Roll a dice expression, one draw per die.

        Args:
            expression: A DiceExpression or its notation (e.g. '2d6')
            reason: Why this roll is being made (for logging)

        Returns:
            DiceResult with individual rolls and total
        """
        if isinstance(expression, str):
            expression = DiceExpression.parse(expression)
        rolls = [self._rng.randint(1, expression.faces) for _ in range(expression.count)]
        result = DiceResult(
            notation=str(expression),
            rolls=rolls,
            total=sum(rolls),
            reason=reason,
        )
        self._roll_log.append(result)
        return result

    def get_roll_log(self) -> list[DiceResult]:
        """Get the complete roll log."""
        return self._roll_log.copy()

    def clear_roll_log(self) -> None:
        """Clear the roll log."""
        self._roll_log = []


# Global dice roller instance, seeded from the clock on first use
_dice_roller: Optional[DiceRoller] = None


def get_dice_roller() -> DiceRoller:
    """Get the process-wide DiceRoller."""
    global _dice_roller
    if _dice_roller is None:
        _dice_roller = DiceRoller()
        logger.debug(f"Process dice roller seeded with {_dice_roller.seed}")
    return _dice_roller


def set_seed(seed: int) -> None:
    """Reseed the process-wide DiceRoller for reproducible output."""
    get_dice_roller().set_seed(seed)


def reset_dice_roller() -> None:
    """Reset the process-wide DiceRoller (useful for testing)."""
    global _dice_roller
    _dice_roller = None
