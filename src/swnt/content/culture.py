"""
Cultures used to flavour generated names.

SWN draws its naming conventions from ten broad Earth cultures.
"""

from enum import Enum
from typing import Optional

from swnt.data_models import DiceRoller, TableError, get_dice_roller


class UnknownCultureError(TableError, LookupError):
    """Raised when a culture name does not match any Culture."""

    def __init__(self, name: str):
        super().__init__(f"no culture with name \"{name}\"")
        self.name = name


class Culture(str, Enum):
    """Cultures with their own name tables."""
    ARABIC = "Arabic"
    CHINESE = "Chinese"
    ENGLISH = "English"
    GREEK = "Greek"
    INDIAN = "Indian"
    JAPANESE = "Japanese"
    LATIN = "Latin"
    NIGERIAN = "Nigerian"
    RUSSIAN = "Russian"
    SPANISH = "Spanish"

    def __str__(self) -> str:
        return self.value


def random_culture(dice: Optional[DiceRoller] = None) -> Culture:
    """Pick a culture uniformly."""
    dice = dice or get_dice_roller()
    cultures = list(Culture)
    return cultures[dice.randint(1, len(cultures), "culture") - 1]


def find_culture(name: str) -> Culture:
    """
    Case-insensitive lookup by name.

    Raises:
        UnknownCultureError: If no culture matches
    """
    for culture in Culture:
        if culture.value.lower() == name.strip().lower():
            return culture
    raise UnknownCultureError(name)


def resolve_culture(name: Optional[str], dice: Optional[DiceRoller] = None) -> Culture:
    """Culture by name, or a random one for None / "any"."""
    if name is None or name.strip().lower() in ("", "any"):
        return random_culture(dice)
    return find_culture(name)
