"""
World tags.

A tag is a short hook describing what makes a world interesting, with
lists of enemies, friends, complications, things and places a GM can
draw from. Every world gets two distinct tags.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from swnt.content.format import OutputType, table
from swnt.data_models import DiceRoller, InvalidConfigurationError, TableError, get_dice_roller
from swnt.tables.table_types import UniformList

logger = logging.getLogger(__name__)


class TagNotFoundError(TableError, LookupError):
    """Raised when no tag matches a requested name."""

    def __init__(self, name: str):
        super().__init__(f"no tag with name \"{name}\"")
        self.name = name


class DegenerateSelectionError(TableError):
    """Raised when fewer than two tags remain after exclusion."""

    def __init__(self, available: int):
        super().__init__(f"need at least 2 tags to choose from, {available} remain after exclusions")
        self.available = available


@dataclass
class Tag:
    """A complete world tag."""
    name: str
    desc: str
    enemies: UniformList
    friends: UniformList
    complications: UniformList
    things: UniformList
    places: UniformList

    def lists(self) -> list[UniformList]:
        return [self.enemies, self.friends, self.complications, self.things, self.places]

    def matches(self, names: Iterable[str]) -> bool:
        """Case-insensitive match against any of names."""
        own = self.name.lower()
        return any(own == name.lower() for name in names)

    def rows(self) -> list[tuple[str, str]]:
        rows = [("Name", self.name), ("Desc", self.desc)]
        for lst in self.lists():
            rows.append((lst.name, ", ".join(lst.items)))
        return rows

    def roll_elements(self, dice: Optional[DiceRoller] = None) -> list[tuple[str, str]]:
        """One pick from each of the five lists."""
        return [(lst.name, lst.roll(dice)) for lst in self.lists()]

    def format(self, output_type: Union[OutputType, str] = OutputType.TEXT) -> str:
        return table(output_type, ("Tag", self.name), self.rows()[1:])

    def __str__(self) -> str:
        return table(OutputType.TEXT, None, self.rows())


def _tag(name: str, desc: str, enemies: list[str], friends: list[str],
         complications: list[str], things: list[str], places: list[str]) -> Tag:
    return Tag(
        name=name,
        desc=desc,
        enemies=UniformList("Enemies", enemies),
        friends=UniformList("Friends", friends),
        complications=UniformList("Complications", complications),
        things=UniformList("Things", things),
        places=UniformList("Places", places),
    )


class TagsTable:
    """The collection of world tags. Names are unique, ignoring case."""

    def __init__(self, tags: Iterable[Tag]):
        self._tags: list[Tag] = list(tags)

        seen: set[str] = set()
        for tag in self._tags:
            key = tag.name.lower()
            if key in seen:
                raise InvalidConfigurationError(f"Duplicate tag name \"{tag.name}\"")
            seen.add(key)

    @property
    def tags(self) -> list[Tag]:
        return list(self._tags)

    def names(self) -> list[str]:
        return [tag.name for tag in self._tags]

    def roll(self, dice: Optional[DiceRoller] = None) -> str:
        """A random tag, rendered as text."""
        return str(self._pick(dice))

    def random(self, dice: Optional[DiceRoller] = None) -> str:
        """The name of a random tag."""
        return self._pick(dice).name

    def _pick(self, dice: Optional[DiceRoller]) -> Tag:
        if not self._tags:
            raise DegenerateSelectionError(0)
        dice = dice or get_dice_roller()
        return self._tags[dice.randint(1, len(self._tags), "tag") - 1]

    def find(self, name: str) -> Tag:
        """
        Find a tag by name. The search is case insensitive.

        Raises:
            TagNotFoundError: If no tag has that name
        """
        for tag in self._tags:
            if tag.name.lower() == name.lower():
                return tag
        raise TagNotFoundError(name)

    def select_tags(
        self,
        exclude: Iterable[str] = (),
        dice: Optional[DiceRoller] = None,
    ) -> tuple[Tag, Tag]:
        """
        Choose two different tags, skipping any excluded by name.

        Args:
            exclude: Tag names to leave out (case-insensitive)
            dice: Random source

        Returns:
            Two distinct tags

        Raises:
            DegenerateSelectionError: If fewer than two tags are eligible
        """
        exclude = list(exclude)
        eligible = [tag for tag in self._tags if not tag.matches(exclude)]
        if len(eligible) < 2:
            raise DegenerateSelectionError(len(eligible))

        dice = dice or get_dice_roller()
        first = dice.randint(1, len(eligible), "first tag") - 1
        second = dice.randint(1, len(eligible), "second tag") - 1
        while second == first:
            second = dice.randint(1, len(eligible), "second tag redraw") - 1

        logger.debug(f"Selected tags {eligible[first].name!r} and {eligible[second].name!r}")
        return eligible[first], eligible[second]

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)


# =============================================================================
# TAG DATA
# =============================================================================


TAGS = TagsTable([
    _tag(
        "Abandoned Colony",
        "The world once held a colony that was destroyed or deserted. Its ruins still stand.",
        enemies=["Crazed survivors", "Ruthless plunderers", "Automated defences"],
        friends=["Inquisitive explorer", "Heir to the colony's legacy", "Local salvager"],
        complications=["The disaster that ended the colony still lingers", "Another group claims the ruins"],
        things=["Colony vault records", "Untouched supply cache", "Prototype colony tech"],
        places=["Shattered colony hall", "Overgrown landing field", "Sealed emergency bunker"],
    ),
    _tag(
        "Alien Ruins",
        "The world holds the remains of a long-dead alien civilisation.",
        enemies=["Grave robbers", "Xenophobic locals", "Ruin guardian constructs"],
        friends=["Xenoarchaeologist", "Rival collector with a conscience", "Native guide"],
        complications=["The ruins are holy ground", "Something in the ruins still works"],
        things=["Alien artefact", "Translation key", "Preserved alien remains"],
        places=["Vast ziggurat interior", "Buried vault", "Field of toppled monoliths"],
    ),
    _tag(
        "Altered Humanity",
        "The locals have been changed by genetic engineering, mutation or adaptation.",
        enemies=["Purist agitator", "Predatory gene-broker", "Unstable mutant warlord"],
        friends=["Sympathetic researcher", "Bridge-building diplomat", "Outcast unaltered native"],
        complications=["The alteration is spreading", "Outsiders are seen as inferior"],
        things=["Gene-therapy samples", "Original design records", "Cure research"],
        places=["Gene clinic", "Segregated quarter", "Adaptation proving ground"],
    ),
    _tag(
        "Badlands World",
        "Something ruined most of the planet, leaving a few habitable enclaves.",
        enemies=["Raider chieftain", "Enclave tyrant", "Mutated beasts"],
        friends=["Wasteland scout", "Enclave doctor", "Terraforming idealist"],
        complications=["The enclaves are at war over water", "The badlands are growing"],
        things=["Functional terraformer", "Pre-catastrophe map", "Clean water cache"],
        places=["Glassed crater", "Fortified enclave wall", "Dust-choked highway"],
    ),
    _tag(
        "Civil War",
        "The world is split between factions fighting for control.",
        enemies=["Ruthless general", "War profiteer", "Secret police chief"],
        friends=["Peace negotiator", "Field medic", "Refugee leader"],
        complications=["Both sides want offworld help", "A ceasefire is about to fail"],
        things=["Battle plans", "Payroll shipment", "Proof of atrocities"],
        places=["Front-line trench", "Refugee camp", "Bombed capital"],
    ),
    _tag(
        "Cold War",
        "Two or more great powers watch each other with hostility short of open war.",
        enemies=["Spymaster", "Hardline minister", "Double agent"],
        friends=["Idealistic journalist", "Border guard", "Defector"],
        complications=["A border incident is escalating", "Both sides suspect the PCs"],
        things=["Stolen codebook", "Nuclear launch keys", "Defector's dossier"],
        places=["Checkpoint", "Embassy ballroom", "Listening post"],
    ),
    _tag(
        "Desert World",
        "The world is hot and dry, with water the most precious resource.",
        enemies=["Water baron", "Sand raiders", "Massive burrowing predator"],
        friends=["Caravan master", "Well keeper", "Hydrologist"],
        complications=["A sandstorm season is arriving", "The aquifer is running dry"],
        things=["Water rights charter", "Hidden oasis map", "Moisture condenser"],
        places=["Dune sea", "Deep well town", "Salt flat spaceport"],
    ),
    _tag(
        "Forbidden Tech",
        "Someone on the world is working with technology that is banned for good reason.",
        enemies=["Mad scientist", "Black-market broker", "Enforcer of the ban"],
        friends=["Whistleblower", "Repentant engineer", "Investigator"],
        complications=["The tech is already loose", "Powerful people rely on it"],
        things=["Prototype device", "Research data", "Containment unit"],
        places=["Hidden laboratory", "Abandoned test site", "Corporate black site"],
    ),
    _tag(
        "Gold Rush",
        "A valuable resource has been discovered and fortune seekers are flooding in.",
        enemies=["Claim jumper", "Corrupt assayer", "Company security boss"],
        friends=["Honest prospector", "Boomtown sheriff", "Saloon owner"],
        complications=["The find is smaller than rumoured", "The natives own the land"],
        things=["Rich claim deed", "Stash of refined ore", "Survey data"],
        places=["Boomtown main street", "Mine shaft", "Claims office"],
    ),
    _tag(
        "Oceanic World",
        "The world is covered almost entirely by water.",
        enemies=["Pirate captain", "Sea monster", "Floating-city despot"],
        friends=["Fisher clan elder", "Marine biologist", "Submarine pilot"],
        complications=["A great storm approaches", "The deep holds something old"],
        things=["Sunken treasure", "Rare deep-sea organism", "Navigation charts"],
        places=["Floating city", "Undersea habitat", "Lone island spire"],
    ),
    _tag(
        "Pilgrimage Site",
        "The world holds a site of great religious significance.",
        enemies=["Fanatical guardian", "Relic thief", "Exploitative tour operator"],
        friends=["Humble pilgrim", "Temple archivist", "Visiting cleric"],
        complications=["Rival faiths claim the site", "The pilgrim season is at its height"],
        things=["Sacred relic", "Pilgrim donations", "Ancient scripture"],
        places=["Great shrine", "Pilgrim road", "Crowded hostel"],
    ),
    _tag(
        "Quarantined World",
        "The world is under quarantine, and no one may land or leave.",
        enemies=["Blockade commander", "Smuggler who spreads the plague", "Desperate escapee"],
        friends=["Relief worker", "Local doctor", "Blockade officer with doubts"],
        complications=["The quarantine hides something other than disease", "A cure exists but is suppressed"],
        things=["Vaccine sample", "Blockade codes", "Evacuation manifest"],
        places=["Orbital blockade station", "Empty city", "Field hospital"],
    ),
    _tag(
        "Theocracy",
        "The world is ruled by a religious hierarchy.",
        enemies=["Grand inquisitor", "Hypocritical high priest", "Zealot mob leader"],
        friends=["Reformist priest", "Secret heretic", "Pious but decent magistrate"],
        complications=["Offworlders are unclean", "A succession crisis looms"],
        things=["Heretical text", "Temple treasury", "Proof of clerical corruption"],
        places=["Cathedral", "Inquisition prison", "Pilgrim square"],
    ),
    _tag(
        "Trade Hub",
        "The world is a crossroads of commerce between many systems.",
        enemies=["Crime lord", "Monopolist merchant", "Customs inspector on the take"],
        friends=["Freight broker", "Dock worker union boss", "Foreign trade envoy"],
        complications=["A trade war is brewing", "A valuable cargo has gone missing"],
        things=["Cargo manifest", "Exotic trade goods", "Trading licence"],
        places=["Bustling spaceport", "Bonded warehouse", "Exchange floor"],
    ),
])
