"""
Problem generator built on a three-part table.

Pick a conflict type, then roll its overall situation and a specific
detail that drives it.
"""

from dataclasses import dataclass
from typing import Optional, Union

from swnt.content.format import OutputType, table
from swnt.data_models import DiceRoller
from swnt.tables.composite_tables import ThreePart, ThreePartGroup, ThreePartResult
from swnt.tables.table_types import UniformList


def _group(name: str, overall: list[str], specific: list[str]) -> ThreePartGroup:
    return ThreePartGroup(
        name=name,
        sub1=UniformList(f"{name} Overall", overall),
        sub2=UniformList(f"{name} Specific", specific),
    )


PROBLEMS = ThreePart(
    name="Problem",
    headers=("Conflict Type", "Overall", "Specific"),
    groups=[
        _group(
            "Money",
            ["Lack of money", "Money is owed", "Money is being stolen", "Money is being extorted"],
            ["Trade rights", "A lost inheritance", "Unpaid wages", "A rigged contract"],
        ),
        _group(
            "Revenge",
            ["Old grudge", "Recent murder", "Public humiliation", "Betrayed trust"],
            ["A duel is arranged", "A hired killer is coming", "A scandal is about to break", "A family feud reignites"],
        ),
        _group(
            "Power",
            ["A coup is planned", "An office is vacant", "A leader is weakening", "A rival faction rises"],
            ["Blackmail material", "A bribed official", "An army's loyalty", "A disputed election"],
        ),
        _group(
            "Natural Danger",
            ["Storms are worsening", "Disease is spreading", "The ground is unstable", "Wildlife is migrating"],
            ["A town must evacuate", "Supplies are running out", "A shelter is failing", "A rescue is needed"],
        ),
        _group(
            "Religion",
            ["Heresy has appeared", "A holy site is threatened", "Clergy are corrupt", "A miracle is claimed"],
            ["A relic is missing", "A prophet is hunted", "Converts are persecuted", "A temple is seized"],
        ),
        _group(
            "Ideology",
            ["Reformers clash with traditionalists", "A new movement spreads", "Censorship tightens", "Revolution brews"],
            ["A banned pamphlet", "A rally turns violent", "An idealist is jailed", "A leader recants"],
        ),
    ],
)


@dataclass
class Problem:
    """A generated problem."""
    result: ThreePartResult

    def rows(self) -> list[tuple[str, str]]:
        return self.result.rows()

    def format(self, output_type: Union[OutputType, str] = OutputType.TEXT) -> str:
        return table(output_type, (PROBLEMS.name, ""), self.rows())

    def __str__(self) -> str:
        return self.format(OutputType.TEXT)


def new_problem(dice: Optional[DiceRoller] = None) -> Problem:
    """Roll a problem from the three-part problem table."""
    return Problem(result=PROBLEMS.roll(dice))
