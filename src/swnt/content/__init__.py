"""Content generators built on the table engine."""

from swnt.content.culture import (
    Culture,
    UnknownCultureError,
    find_culture,
    random_culture,
    resolve_culture,
)
from swnt.content.format import OutputType, table
from swnt.content.names import NAMES, NameSet, by_culture
from swnt.content.religion import Religion, new_religion
from swnt.content.world_tags import (
    TAGS,
    Tag,
    TagsTable,
    TagNotFoundError,
    DegenerateSelectionError,
)
from swnt.content.world import World, new_world
from swnt.content.npc import NPC, NPC_TABLE, new_npc
from swnt.content.problem import PROBLEMS, Problem, new_problem

__all__ = [
    # Cultures and names
    "Culture",
    "UnknownCultureError",
    "find_culture",
    "random_culture",
    "resolve_culture",
    "NAMES",
    "NameSet",
    "by_culture",
    # Formatting
    "OutputType",
    "table",
    # Generators
    "Religion",
    "new_religion",
    "TAGS",
    "Tag",
    "TagsTable",
    "TagNotFoundError",
    "DegenerateSelectionError",
    "World",
    "new_world",
    "NPC",
    "NPC_TABLE",
    "new_npc",
    "PROBLEMS",
    "Problem",
    "new_problem",
]
