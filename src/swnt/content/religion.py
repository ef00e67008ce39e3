"""
Religion generator.

A religion is an origin tradition, how the faith has evolved since, and
how it is led. The leadership table carries the one self-modifying entry
in the content set: a faith without universal leadership collapses the
table to its regional options and rolls again for each region.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from swnt.content.format import OutputType, table
from swnt.data_models import DiceExpression, DiceRoller, DieType
from swnt.tables.entry_actions import EntryAction
from swnt.tables.table_registry import TableRegistry, get_table_registry
from swnt.tables.table_types import TableEntry, UniformList, WeightedTable

logger = logging.getLogger(__name__)

LEADERSHIP_ID = "religion.Leadership"


# =============================================================================
# TABLES
# =============================================================================


EVOLUTION = UniformList(
    name="Evolution",
    items=[
        "New holy book. A recently penned or discovered text is now held to be holy writ.",
        "New prophet. The faith reveres the teachings of a recent prophet as the final word on the divine.",
        "Syncretism. The faith has merged much of its doctrine with another tradition and reconciled the two.",
        "Neofundamentalism. The faithful resist every innovation and keep even onerous rules to the letter.",
        "Quietism. The faith shuns the affairs of outsiders and avoids positions of wealth and power.",
        "Sacrifices. The faith demands substantial offerings, from great tithes to darker gifts.",
        "Schism. Doctrine differs from the parent faith on points only theologians care about, yet resentment burns.",
        "Holy family. Divine favour rests on one bloodline, whose members alone may serve as clergy or figureheads.",
    ],
)

ORIGIN = UniformList(
    name="Origin",
    items=[
        "Paganism",
        "Roman Catholicism",
        "Eastern Orthodox Christianity",
        "Protestant Christianity",
        "Buddhism",
        "Judaism",
        "Islam",
        "Taoism",
        "Hinduism",
        "Zoroastrianism",
        "Confucianism",
        "Ideology",
    ],
)

LEADERSHIP = WeightedTable(
    name="Leadership",
    table_id=LEADERSHIP_ID,
    dice=DiceExpression.of(DieType.D6),
    entries=[
        TableEntry(1, 2, "Patriarch/Matriarch. A single leader sets doctrine for the whole faith."),
        TableEntry(3, 4, "Council. The eldest and most revered clergy steer the faith together."),
        TableEntry.single(5, "Democracy. Every believer has an equal voice, usually at regular church-wide councils."),
        TableEntry.single(
            6,
            "No universal leadership",
            action=EntryAction.collapse_and_reroll(
                LEADERSHIP_ID,
                DiceExpression.of(DieType.D5),
                prefix="Each region governed independently by a ",
                skip_in=1,
                skip_die=6,
            ),
        ),
    ],
)


def register_tables(registry: Optional[TableRegistry] = None) -> None:
    """
    Register the regional leadership table.

    The registry holds its own copy of the leadership table, so collapsing
    its dice for regional rolls leaves the top-level table untouched.
    Already registered ids are kept.
    """
    if registry is None:
        registry = get_table_registry()
    if LEADERSHIP_ID not in registry:
        registry.add(LEADERSHIP.copy())
        logger.debug(f"Registered {LEADERSHIP_ID}")


register_tables()


# =============================================================================
# RELIGION
# =============================================================================


@dataclass
class Religion:
    """A generated religion."""
    origin_tradition: str
    evolution: str
    leadership: str

    def rows(self) -> list[tuple[str, str]]:
        return [
            (ORIGIN.name, self.origin_tradition),
            (EVOLUTION.name, self.evolution),
            (LEADERSHIP.name, self.leadership),
        ]

    def format(self, output_type: Union[OutputType, str] = OutputType.TEXT) -> str:
        return table(output_type, ("Religion", ""), self.rows())

    def __str__(self) -> str:
        return self.format(OutputType.TEXT)


def new_religion(
    dice: Optional[DiceRoller] = None,
    registry: Optional[TableRegistry] = None,
) -> Religion:
    """Roll a religion with random characteristics."""
    if registry is None:
        registry = get_table_registry()
    register_tables(registry)
    return Religion(
        evolution=EVOLUTION.roll(dice),
        leadership=LEADERSHIP.roll(dice, registry),
        origin_tradition=ORIGIN.roll(dice),
    )
