"""
World generator.

A world is a culture-flavoured name, five 2d6 physical and social
characteristics, and two distinct world tags. Secondary worlds (those
that are not the campaign's primary world) also roll how they were
settled, how they relate to the primary world and how they keep in
contact.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from swnt.content import names
from swnt.content.culture import Culture, random_culture
from swnt.content.format import OutputType, table
from swnt.content.world_tags import TAGS, Tag, TagsTable
from swnt.data_models import DiceExpression, DiceRoller, get_dice_roller
from swnt.tables.table_types import TableEntry, UniformList, WeightedTable

logger = logging.getLogger(__name__)

_2D6 = DiceExpression(count=2, faces=6)


# =============================================================================
# TABLES
# =============================================================================


ATMOSPHERE = WeightedTable(
    name="Atmosphere",
    dice=_2D6,
    entries=[
        TableEntry.single(2, "Corrosive, damaging to foreign objects"),
        TableEntry.single(3, "Inert gas, useless for respiration"),
        TableEntry.single(4, "Airless or thin to the point of suffocation"),
        TableEntry(5, 9, "Breathable mix"),
        TableEntry.single(10, "Thick, but breathable with a pressure mask"),
        TableEntry.single(11, "Invasive, toxic to the unprotected"),
        TableEntry.single(12, "Both corrosive and invasive in its effects"),
    ],
)

TEMPERATURE = WeightedTable(
    name="Temperature",
    dice=_2D6,
    entries=[
        TableEntry.single(2, "Frozen, locked in perpetual ice"),
        TableEntry.single(3, "Cold, dominated by glaciers and tundra"),
        TableEntry(4, 5, "Variable cold with temperate places"),
        TableEntry(6, 8, "Temperate, Earthlike in its ranges"),
        TableEntry(9, 10, "Variable warm, with temperate places"),
        TableEntry.single(11, "Warm, tropical and hotter in places"),
        TableEntry.single(12, "Burning, intolerably hot on its surface"),
    ],
)

BIOSPHERE = WeightedTable(
    name="Biosphere",
    dice=_2D6,
    entries=[
        TableEntry.single(2, "Remnant biosphere"),
        TableEntry.single(3, "Microbial life forms exist"),
        TableEntry(4, 5, "No native biosphere"),
        TableEntry(6, 8, "Human-miscible biosphere"),
        TableEntry(9, 10, "Immiscible biosphere"),
        TableEntry.single(11, "Hybrid biosphere"),
        TableEntry.single(12, "Engineered biosphere"),
    ],
)

POPULATION = WeightedTable(
    name="Population",
    dice=_2D6,
    entries=[
        TableEntry.single(2, "Failed colony"),
        TableEntry.single(3, "Outpost"),
        TableEntry(4, 5, "Fewer than a million inhabitants"),
        TableEntry(6, 8, "Several million inhabitants"),
        TableEntry(9, 10, "Hundreds of millions of inhabitants"),
        TableEntry.single(11, "Billions of inhabitants"),
        TableEntry.single(12, "Alien inhabitants"),
    ],
)

TECH_LEVEL = WeightedTable(
    name="Tech Level",
    dice=_2D6,
    entries=[
        TableEntry.single(2, "TL0, neolithic-level technology"),
        TableEntry.single(3, "TL1, medieval technology"),
        TableEntry(4, 5, "TL2, early Industrial Age tech"),
        TableEntry(6, 8, "TL3, tech like that of present-day Earth"),
        TableEntry(9, 10, "TL4, baseline postech"),
        TableEntry.single(11, "TL4+, postech with specialties"),
        TableEntry.single(12, "TL5, pretech with surviving infrastructure"),
    ],
)

ORIGIN = UniformList(
    name="Origin",
    items=[
        "Recent colony from the primary world",
        "Refuge for exiles from the primary world",
        "Founded ages ago by a different group",
        "Founded long ago, but by the same group as the primary world",
        "Lost colony rediscovered by the primary world",
        "Former prison or penal colony",
        "Mining or resource outpost that grew into a colony",
        "Corporate venture gone independent",
    ],
)

RELATIONSHIP = UniformList(
    name="Relationship",
    items=[
        "Bitter hatred of the primary world",
        "Trade partners with some friction",
        "Loyal subjects of the primary world",
        "Wary neutrality",
        "Cultural rivals, competing for prestige",
        "Close allies against an outside threat",
        "Resentful vassal paying tribute",
        "Almost no contact or interest",
    ],
)

CONTACT = UniformList(
    name="Contact",
    items=[
        "Regular trade ships",
        "Occasional diplomatic envoys",
        "Pilgrims travelling to a shared holy site",
        "Smugglers and illicit traders",
        "Military patrols",
        "Communications relay only",
        "Religious missionaries",
        "None beyond rare explorers",
    ],
)


# =============================================================================
# WORLD
# =============================================================================


@dataclass
class World:
    """A generated world."""
    name: str
    culture: Culture
    tags: tuple[Tag, Tag]
    atmosphere: str
    temperature: str
    biosphere: str
    population: str
    tech_level: str
    primary: bool = True
    origin: str = ""
    relationship: str = ""
    contact: str = ""

    def rows(self) -> list[tuple[str, str]]:
        rows = [
            ("Culture", str(self.culture)),
            (ATMOSPHERE.name, self.atmosphere),
            (TEMPERATURE.name, self.temperature),
            (BIOSPHERE.name, self.biosphere),
            (POPULATION.name, self.population),
            (TECH_LEVEL.name, self.tech_level),
            ("Tags", ""),
        ]
        for tag in self.tags:
            rows.append((tag.name, tag.desc))

        if not self.primary:
            rows.append(("Origins", ""))
            rows.append((ORIGIN.name, self.origin))
            rows.append((RELATIONSHIP.name, self.relationship))
            rows.append((CONTACT.name, self.contact))

        return rows

    def format(self, output_type: Union[OutputType, str] = OutputType.TEXT) -> str:
        """Render the world. Plain text also lists both tags in full."""
        output_type = OutputType(output_type)
        text = table(output_type, ("Name", self.name), self.rows())
        if output_type == OutputType.TEXT:
            for tag in self.tags:
                text += "\n" + str(tag)
        return text

    def __str__(self) -> str:
        return self.format(OutputType.TEXT)


def new_world(
    culture: Optional[Culture] = None,
    primary: bool = True,
    exclude: Iterable[str] = (),
    dice: Optional[DiceRoller] = None,
    tags: Optional[TagsTable] = None,
) -> World:
    """
    Roll a new world.

    Args:
        culture: Culture for the world's name, random if None
        primary: Secondary worlds also roll origin, relationship and contact
        exclude: Tag names that must not be chosen
        dice: Random source
        tags: Tag collection, defaults to the built-in tags

    Raises:
        DegenerateSelectionError: If exclusions leave fewer than two tags
    """
    dice = dice or get_dice_roller()
    if tags is None:
        tags = TAGS
    if culture is None:
        culture = random_culture(dice)

    first, second = tags.select_tags(exclude, dice)

    world = World(
        name=names.by_culture(culture).place.roll(dice),
        culture=culture,
        tags=(first, second),
        atmosphere=ATMOSPHERE.roll(dice),
        temperature=TEMPERATURE.roll(dice),
        population=POPULATION.roll(dice),
        biosphere=BIOSPHERE.roll(dice),
        tech_level=TECH_LEVEL.roll(dice),
        primary=primary,
    )

    if not primary:
        world.origin = ORIGIN.roll(dice)
        world.relationship = RELATIONSHIP.roll(dice)
        world.contact = CONTACT.roll(dice)

    logger.debug(f"Generated world {world.name!r} ({culture})")
    return world
