"""
Quick NPC generator built on a one-roll table.

Roll a d4, d6, d8, d10, d12 and d20 together and read one line from each
table for a sketch of a non-player character.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from swnt.content import names
from swnt.content.culture import Culture, random_culture
from swnt.content.format import OutputType, table
from swnt.data_models import DiceRoller, get_dice_roller
from swnt.tables.composite_tables import OneRoll
from swnt.tables.table_types import WeightedTable


NPC_TABLE = OneRoll(
    name="NPC",
    d4=WeightedTable.from_list("Age", [
        "Unusually young or old for their role",
        "Young adult",
        "Mature prime",
        "Middle-aged or elderly",
    ]),
    d6=WeightedTable.from_list("Background", [
        "The local underclass or poorest natives",
        "Common laborers or cube workers",
        "Aspiring bourgeoise or upper class",
        "The elite of this society",
        "Minority or foreigners; roll again for class",
        "Offworlders or exotic",
    ]),
    d8=WeightedTable.from_list("Role in Society", [
        "Criminal, thug, thief, swindler",
        "Menial, cleaner, retail worker, servant",
        "Unskilled heavy labor, porter, construction",
        "Skilled trade, electrician, mechanic, pilot",
        "Idea worker, programmer, writer",
        "Merchant, business owner, trader, banker",
        "Official, bureaucrat, courtier, clerk",
        "Military, soldier, enforcer, law officer",
    ]),
    d10=WeightedTable.from_list("Biggest Problem", [
        "They have significant debt or money woes",
        "A loved one is in trouble",
        "Romantic failure with a desired person",
        "Drug or behavioral addiction",
        "Their superior dislikes or resents them",
        "They have a persistent sickness",
        "They hate their job or life situation",
        "Someone dangerous is targeting them",
        "They're pursuing a disastrous purpose",
        "They have no problems worth mentioning",
    ]),
    d12=WeightedTable.from_list("Greatest Desire", [
        "They want a particular romantic partner",
        "They want money for them or a loved one",
        "They want a promotion in their job",
        "They want answers about a past trauma",
        "They want revenge on an enemy",
        "They want to help a beloved friend",
        "They want an entirely different job",
        "They want protection from an enemy",
        "They want to leave their current life",
        "They want fame and glory",
        "They want power over those around them",
        "They have everything they want from life",
    ]),
    d20=WeightedTable.from_list("Most Obvious Trait", [
        "Ambition", "Avarice", "Bitterness", "Courage", "Cowardice",
        "Curiosity", "Deceitfulness", "Determination", "Devotion to a cause", "Filiality",
        "Hatred", "Honesty", "Hopefulness", "Love of a person", "Nihilism",
        "Paternalism", "Pessimism", "Protectiveness", "Resentment", "Shame",
    ]),
)


@dataclass
class NPC:
    """A generated NPC sketch."""
    name: str
    culture: Culture
    traits: list[tuple[str, str]] = field(default_factory=list)

    def rows(self) -> list[tuple[str, str]]:
        return [("Culture", str(self.culture))] + list(self.traits)

    def format(self, output_type: Union[OutputType, str] = OutputType.TEXT) -> str:
        return table(output_type, ("Name", self.name), self.rows())

    def __str__(self) -> str:
        return self.format(OutputType.TEXT)


def new_npc(culture: Optional[Culture] = None, dice: Optional[DiceRoller] = None) -> NPC:
    """Roll a named NPC of the given (or a random) culture."""
    dice = dice or get_dice_roller()
    if culture is None:
        culture = random_culture(dice)
    return NPC(
        name=names.by_culture(culture).full_name(dice),
        culture=culture,
        traits=NPC_TABLE.roll(dice).rows(),
    )
