"""
Test helpers for the SWNT test suite.

Provides a deterministic random source so a test can force exact dice
totals, and a helper to turn a desired total into individual die faces.
"""

from typing import Iterable

from swnt.data_models import DiceExpression


class ScriptedRandom:
    """
    Stand-in for random.Random that returns scripted values in order.

    Usage:
        dice = DiceRoller(rng=ScriptedRandom([6, 3, 2]))
        table.roll(dice)  # first die shows 6, then 3, then 2
    """

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError(f"ScriptedRandom exhausted on randint({a}, {b})")
        value = self._values.pop(0)
        if not a <= value <= b:
            raise AssertionError(f"Scripted value {value} outside randint({a}, {b})")
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


def faces_for_total(expression: DiceExpression, total: int) -> list[int]:
    """Individual die faces that make expression roll exactly total."""
    faces = []
    remaining = total
    for i in range(expression.count):
        still_to_roll = expression.count - i - 1
        value = min(expression.faces, remaining - still_to_roll)
        faces.append(value)
        remaining -= value
    assert remaining == 0 and all(1 <= f <= expression.faces for f in faces)
    return faces
