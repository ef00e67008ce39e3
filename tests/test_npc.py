"""
Tests for the NPC generator.
"""

from swnt.content.culture import Culture
from swnt.content.format import OutputType
from swnt.content.npc import NPC_TABLE, new_npc


TRAIT_LABELS = [
    "Age",
    "Background",
    "Role in Society",
    "Biggest Problem",
    "Greatest Desire",
    "Most Obvious Trait",
]


class TestNewNPC:
    """Tests for new_npc."""

    def test_scripted_npc(self, scripted_dice):
        """Test an NPC rolled from scripted dice."""
        # gender, given name, surname, then d4 d6 d8 d10 d12 d20
        npc = new_npc(Culture.ARABIC, scripted_dice(1, 1, 1, 1, 1, 1, 1, 1, 1))

        assert npc.name == "Aamir Al-Amin"
        assert npc.culture == Culture.ARABIC
        assert [label for label, _ in npc.traits] == TRAIT_LABELS

    def test_traits_come_from_tables(self, seeded_dice):
        """Test that every trait comes from its table."""
        members = dict(zip(TRAIT_LABELS, NPC_TABLE.members()))
        for _ in range(50):
            npc = new_npc(dice=seeded_dice)
            for label, value in npc.traits:
                assert value in [entry.result for entry in members[label].entries]

    def test_female_given_name(self, scripted_dice):
        """Test that the gender draw selects the given-name list."""
        npc = new_npc(Culture.ARABIC, scripted_dice(2, 1, 1, 1, 1, 1, 1, 1, 1))
        assert npc.name == "Amira Al-Amin"


class TestNPCOutput:
    """Tests for NPC rows and formatting."""

    def test_rows(self, seeded_dice):
        """Test NPC rows."""
        npc = new_npc(Culture.GREEK, seeded_dice)
        rows = npc.rows()
        assert rows[0] == ("Culture", "Greek")
        assert len(rows) == 7

    def test_text(self, seeded_dice):
        """Test NPC text output."""
        npc = new_npc(Culture.GREEK, seeded_dice)
        assert str(npc).startswith(f"Name\t:\t{npc.name}\nCulture\t:\tGreek\n")

    def test_markdown(self, seeded_dice):
        """Test NPC Markdown output."""
        npc = new_npc(Culture.GREEK, seeded_dice)
        text = npc.format(OutputType.MARKDOWN)
        assert text.startswith(f"| Name | {npc.name} |\n")
        assert text.count("\n") == 9
