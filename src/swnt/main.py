"""
SWNT - Main Entry Point

Command line access to the Stars Without Number generators: cultures,
religions, worlds, NPCs, problems and world tags.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence

from swnt import __version__
from swnt.content.culture import Culture, UnknownCultureError, random_culture, resolve_culture
from swnt.content.format import OutputType
from swnt.content.npc import new_npc
from swnt.content.problem import new_problem
from swnt.content.religion import new_religion
from swnt.content.world import new_world
from swnt.content.world_tags import TAGS, DegenerateSelectionError, TagNotFoundError
from swnt.data_models import DiceRoller, get_dice_roller


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GeneratorConfig:
    """Configuration for one generator invocation."""

    output_type: OutputType = OutputType.TEXT
    seed: Optional[int] = None

    # World options
    culture: Optional[str] = None  # None or "any" for random
    primary: bool = True
    exclude: list[str] = field(default_factory=list)

    # Runtime options
    verbose: bool = False

    def __post_init__(self):
        """Normalise string values."""
        if isinstance(self.output_type, str):
            self.output_type = OutputType(self.output_type.lower())
        self.exclude = [name.strip() for name in self.exclude if name.strip()]


# =============================================================================
# COMMANDS
# =============================================================================

def _culture(config: GeneratorConfig, dice: DiceRoller) -> Culture:
    return resolve_culture(config.culture, dice)


def cmd_new_culture(config: GeneratorConfig, dice: DiceRoller, args: argparse.Namespace) -> str:
    return str(random_culture(dice)) + "\n"


def cmd_new_religion(config: GeneratorConfig, dice: DiceRoller, args: argparse.Namespace) -> str:
    return new_religion(dice).format(config.output_type)


def cmd_new_world(config: GeneratorConfig, dice: DiceRoller, args: argparse.Namespace) -> str:
    world = new_world(
        culture=_culture(config, dice),
        primary=config.primary,
        exclude=config.exclude,
        dice=dice,
    )
    return world.format(config.output_type)


def cmd_new_npc(config: GeneratorConfig, dice: DiceRoller, args: argparse.Namespace) -> str:
    return new_npc(_culture(config, dice), dice).format(config.output_type)


def cmd_new_problem(config: GeneratorConfig, dice: DiceRoller, args: argparse.Namespace) -> str:
    return new_problem(dice).format(config.output_type)


def cmd_new_tag(config: GeneratorConfig, dice: DiceRoller, args: argparse.Namespace) -> str:
    return TAGS.find(TAGS.random(dice)).format(config.output_type)


def cmd_show_tag(config: GeneratorConfig, dice: DiceRoller, args: argparse.Namespace) -> str:
    return TAGS.find(" ".join(args.name)).format(config.output_type)


def cmd_list_tags(config: GeneratorConfig, dice: DiceRoller, args: argparse.Namespace) -> str:
    return "\n".join(TAGS.names()) + "\n"


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="swnt",
        description="SWNT - procedural generators for Stars Without Number",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  swnt new world                          # Random primary world
  swnt new world --secondary -x "Civil War"
  swnt --format markdown new religion
  swnt --seed 42 new npc --culture greek
  swnt show tag "trade hub"
        """
    )

    parser.add_argument(
        "-f", "--format",
        type=str,
        default=OutputType.TEXT.value,
        choices=[t.value for t in OutputType],
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the random source for reproducible output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    # new <thing>
    new_parser = commands.add_parser("new", help="Generate something")
    new_commands = new_parser.add_subparsers(dest="kind", required=True)

    new_commands.add_parser("culture", help="Generate a culture").set_defaults(handler=cmd_new_culture)
    new_commands.add_parser("religion", help="Generate a religion").set_defaults(handler=cmd_new_religion)
    new_commands.add_parser("problem", help="Generate a problem").set_defaults(handler=cmd_new_problem)
    new_commands.add_parser("tag", help="Show a random world tag").set_defaults(handler=cmd_new_tag)

    world_parser = new_commands.add_parser("world", help="Generate a world")
    world_parser.add_argument(
        "-c", "--culture",
        type=str,
        help="Culture for the world's name (default: random)",
    )
    world_parser.add_argument(
        "--secondary",
        action="store_true",
        help="Secondary world: also roll origin, relationship and contact",
    )
    world_parser.add_argument(
        "-x", "--exclude",
        action="append",
        default=[],
        metavar="TAG",
        help="Tag name to exclude (repeatable)",
    )
    world_parser.set_defaults(handler=cmd_new_world)

    npc_parser = new_commands.add_parser("npc", help="Generate an NPC")
    npc_parser.add_argument(
        "-c", "--culture",
        type=str,
        help="Culture for the NPC's name (default: random)",
    )
    npc_parser.set_defaults(handler=cmd_new_npc)

    # show tag NAME
    show_parser = commands.add_parser("show", help="Show a named entry")
    show_commands = show_parser.add_subparsers(dest="kind", required=True)
    tag_parser = show_commands.add_parser("tag", help="Show a world tag by name")
    tag_parser.add_argument("name", nargs="+", help="Tag name (case insensitive)")
    tag_parser.set_defaults(handler=cmd_show_tag)

    # list tags
    list_parser = commands.add_parser("list", help="List available entries")
    list_commands = list_parser.add_subparsers(dest="kind", required=True)
    list_commands.add_parser("tags", help="List world tag names").set_defaults(handler=cmd_list_tags)

    return parser


def create_config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Create GeneratorConfig from parsed arguments."""
    return GeneratorConfig(
        output_type=args.format,
        seed=args.seed,
        culture=getattr(args, "culture", None),
        primary=not getattr(args, "secondary", False),
        exclude=getattr(args, "exclude", []),
        verbose=args.verbose,
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI usage. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = create_config_from_args(args)

    dice = get_dice_roller()
    if config.seed is not None:
        dice.set_seed(config.seed)
    logger.debug(f"Running '{args.command} {args.kind}' with seed {dice.seed}")

    try:
        output = args.handler(config, dice, args)
    except (TagNotFoundError, UnknownCultureError, DegenerateSelectionError) as e:
        print(f"swnt: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
