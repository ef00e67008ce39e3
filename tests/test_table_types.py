"""
Tests for weighted tables and uniform lists.

Tests cover:
- Range coverage validation at construction
- Entries claiming explicit, non-contiguous sets of totals
- Exhaustive resolution of every total
- First-match entry selection and static text
- Weighted and uniform distribution laws
- Runtime dice rewrites and copies
"""

from collections import Counter

import pytest

from swnt.data_models import DiceExpression, DiceRoller, InvalidConfigurationError
from swnt.tables.table_types import (
    TableEntry,
    UniformList,
    UnresolvedRollError,
    WeightedTable,
    validate_coverage,
)
from tests.helpers import ScriptedRandom, faces_for_total


def make_d6_table(**kwargs) -> WeightedTable:
    return WeightedTable(
        name="Test",
        dice=DiceExpression(1, 6),
        entries=[
            TableEntry(1, 2, "A"),
            TableEntry(3, 4, "B"),
            TableEntry.single(5, "C"),
            TableEntry.single(6, "D"),
        ],
        **kwargs,
    )


def make_2d6_table() -> WeightedTable:
    return WeightedTable(
        name="Bell",
        dice="2d6",
        entries=[
            TableEntry(2, 4, "Low"),
            TableEntry(5, 9, "Middle"),
            TableEntry(10, 12, "High"),
        ],
    )


def make_edges_table() -> WeightedTable:
    return WeightedTable(
        name="Edges",
        dice=DiceExpression(1, 6),
        entries=[
            TableEntry.matching({1, 6}, "Extreme"),
            TableEntry(2, 5, "Ordinary"),
        ],
    )


class TestTableEntry:
    """Tests for TableEntry."""

    def test_matches_roll_inclusive(self):
        """Test that both range bounds match."""
        entry = TableEntry(3, 5, "x")
        assert not entry.matches_roll(2)
        assert entry.matches_roll(3)
        assert entry.matches_roll(5)
        assert not entry.matches_roll(6)

    def test_inverted_range_rejected(self):
        """Test that a range with min above max is rejected."""
        with pytest.raises(InvalidConfigurationError):
            TableEntry(5, 3, "x")

    def test_single(self):
        """Test single-total entries and range labels."""
        entry = TableEntry.single(4, "x")
        assert (entry.roll_min, entry.roll_max) == (4, 4)
        assert entry.range_label() == "4"
        assert TableEntry(1, 2).range_label() == "1-2"

    def test_static_entry_is_not_dynamic(self):
        """Test that an entry without an action is static."""
        assert not TableEntry(1, 1, "x").is_dynamic


class TestMatchingEntry:
    """Tests for entries claiming an explicit set of totals."""

    def test_only_listed_totals_match(self):
        """Test that a set entry skips the totals between its members."""
        entry = TableEntry.matching([6, 1], "x")
        assert (entry.roll_min, entry.roll_max) == (1, 6)
        assert entry.matches_roll(1)
        assert entry.matches_roll(6)
        assert not any(entry.matches_roll(v) for v in range(2, 6))
        assert entry.totals() == [1, 6]

    def test_range_label_lists_totals(self):
        """Test labels of non-contiguous and contiguous sets."""
        assert TableEntry.matching({1, 6}).range_label() == "1,6"
        assert TableEntry.matching({3, 4, 5}).range_label() == "3-5"

    def test_empty_set_rejected(self):
        """Test that a set entry must claim at least one total."""
        with pytest.raises(InvalidConfigurationError):
            TableEntry.matching([])

    def test_bounds_must_agree_with_values(self):
        """Test that explicit values must span roll_min..roll_max."""
        with pytest.raises(InvalidConfigurationError):
            TableEntry(1, 6, "x", values=frozenset({2, 6}))

    def test_table_with_split_entry(self, scripted_dice):
        """Test that a non-contiguous entry resolves both of its totals."""
        table = make_edges_table()
        assert table.roll(scripted_dice(1)) == "Extreme"
        assert table.roll(scripted_dice(6)) == "Extreme"
        assert table.roll(scripted_dice(3)) == "Ordinary"

    def test_split_entry_overlap_rejected(self):
        """Test that set entries take part in overlap checks."""
        with pytest.raises(InvalidConfigurationError, match="overlap"):
            WeightedTable(
                name="Clash",
                dice=DiceExpression(1, 6),
                entries=[TableEntry.matching({1, 6}, "A"), TableEntry(2, 6, "B")],
            )

    def test_split_entry_gap_rejected(self):
        """Test that totals between set members still need an entry."""
        with pytest.raises(InvalidConfigurationError, match="not covered"):
            WeightedTable(
                name="Holes",
                dice=DiceExpression(1, 6),
                entries=[TableEntry.matching({1, 6}, "A"), TableEntry(2, 4, "B")],
            )

    def test_describe_shows_set(self):
        """Test that describe lists the set's totals."""
        assert "1,6\tExtreme" in make_edges_table().describe()


class TestCoverageValidation:
    """Construction-time coverage checks."""

    def test_valid_table(self):
        """Test that a fully covered table builds."""
        table = make_d6_table()
        assert table.get_min_roll() == 1
        assert table.get_max_roll() == 6

    def test_string_dice_parsed(self):
        """Test that dice notation is accepted at construction."""
        assert make_2d6_table().dice == DiceExpression(2, 6)

    def test_gap_rejected(self):
        """Test that an uncovered total is rejected."""
        with pytest.raises(InvalidConfigurationError, match="not covered"):
            WeightedTable(
                name="Gappy",
                dice=DiceExpression(1, 6),
                entries=[TableEntry(1, 2, "A"), TableEntry(4, 6, "B")],
            )

    def test_overlap_rejected(self):
        """Test that a total claimed twice is rejected."""
        with pytest.raises(InvalidConfigurationError, match="overlap"):
            WeightedTable(
                name="Overlap",
                dice=DiceExpression(1, 6),
                entries=[TableEntry(1, 3, "A"), TableEntry(3, 6, "B")],
            )

    def test_out_of_domain_rejected(self):
        """Test that an entry above the domain is rejected."""
        with pytest.raises(InvalidConfigurationError, match="outside"):
            WeightedTable(
                name="Outside",
                dice=DiceExpression(1, 4),
                entries=[TableEntry(1, 4, "A"), TableEntry.single(5, "B")],
            )

    def test_below_domain_rejected(self):
        """Test that an entry below the domain is rejected."""
        with pytest.raises(InvalidConfigurationError):
            WeightedTable(
                name="Below",
                dice=DiceExpression(2, 6),
                entries=[TableEntry(1, 12, "A")],
            )

    def test_no_entries_rejected(self):
        """Test that a table needs entries."""
        with pytest.raises(InvalidConfigurationError):
            WeightedTable(name="Empty", dice=DiceExpression(1, 6), entries=[])

    def test_allow_unreachable(self):
        """Test that unreachable entries pass only when allowed."""
        entries = [TableEntry(1, 3, "A"), TableEntry(4, 6, "B")]
        validate_coverage("t", DiceExpression(1, 4), entries, allow_unreachable=True)
        with pytest.raises(InvalidConfigurationError):
            validate_coverage("t", DiceExpression(1, 4), entries)


class TestWeightedTableRoll:
    """Tests for WeightedTable resolution."""

    @pytest.mark.parametrize("table_factory", [make_d6_table, make_2d6_table, make_edges_table])
    def test_every_total_resolves(self, table_factory):
        """Test that every total of the domain resolves to text."""
        table = table_factory()
        for total in table.dice.domain():
            dice = DiceRoller(rng=ScriptedRandom(faces_for_total(table.dice, total)))
            result = table.roll_detailed(dice)
            assert result.roll_total == total
            assert result.result_text
            assert result.entry.matches_roll(total)

    def test_static_text_returned_verbatim(self, scripted_dice):
        """Test that static entries return their text unchanged."""
        table = make_d6_table()
        assert table.roll(scripted_dice(1)) == "A"
        assert table.roll(scripted_dice(4)) == "B"
        assert table.roll(scripted_dice(5)) == "C"
        assert table.roll(scripted_dice(6)) == "D"

    def test_roll_detailed_fields(self, scripted_dice):
        """Test the fields of a detailed roll result."""
        table = make_d6_table(table_id="test.table")
        result = table.roll_detailed(scripted_dice(3))
        assert result.table_id == "test.table"
        assert result.table_name == "Test"
        assert result.roll_total == 3
        assert result.result_text == "B"

    def test_first_matching_entry_wins(self):
        """Test that find_entry returns the entry claiming the total."""
        table = make_d6_table()
        assert table.find_entry(2).result == "A"

    def test_unmatched_total_raises(self):
        """Test that an unmatched total raises instead of returning nothing."""
        table = make_d6_table()
        with pytest.raises(UnresolvedRollError) as exc_info:
            table.find_entry(7)
        assert exc_info.value.total == 7
        assert "Test" in str(exc_info.value)

    def test_weighted_distribution(self, seeded_dice):
        """Test that entry frequency follows range width."""
        table = make_d6_table()
        counts = Counter(table.roll(seeded_dice) for _ in range(6000))
        expected = {"A": 2000, "B": 2000, "C": 1000, "D": 1000}
        for text, count in expected.items():
            assert abs(counts[text] - count) <= count * 0.15, counts

    def test_weighted_distribution_2d6(self, seeded_dice):
        """Test that 2d6 entries follow the bell curve."""
        table = make_2d6_table()
        counts = Counter(table.roll(seeded_dice) for _ in range(3600))
        # 6, 24 and 6 ways out of 36
        assert abs(counts["Low"] - 600) <= 120
        assert abs(counts["Middle"] - 2400) <= 240
        assert abs(counts["High"] - 600) <= 120


class TestWeightedTableMutation:
    """Tests for runtime dice rewrites."""

    def test_set_dice_narrows_domain(self, scripted_dice):
        """Test that a smaller die leaves the upper entries unreachable."""
        table = make_d6_table()
        table.set_dice("1d5")
        assert table.dice == DiceExpression(1, 5)
        assert table.get_max_roll() == 5
        assert table.roll(scripted_dice(5)) == "C"

    def test_set_dice_rejects_uncovered_domain(self):
        """Test that a rewrite may not leave totals uncovered."""
        table = make_d6_table()
        with pytest.raises(InvalidConfigurationError):
            table.set_dice(DiceExpression(1, 8))
        assert table.dice == DiceExpression(1, 6)

    def test_copy_is_independent(self):
        """Test that a copy has its own dice and lock."""
        table = make_d6_table(table_id="orig")
        clone = table.copy()
        clone.set_dice("1d4")
        assert table.dice == DiceExpression(1, 6)
        assert clone.table_id == "orig"
        assert clone.entries == table.entries
        assert clone is not table
        assert clone.lock is not table.lock

    def test_from_list(self, scripted_dice):
        """Test building a 1dN table from a list."""
        table = WeightedTable.from_list("Colours", ["red", "green", "blue"])
        assert table.dice == DiceExpression(1, 3)
        assert table.roll(scripted_dice(2)) == "green"

    def test_from_list_needs_two_items(self):
        """Test that a one-item list cannot become a die table."""
        with pytest.raises(InvalidConfigurationError):
            WeightedTable.from_list("Lonely", ["only"])

    def test_describe_lists_entries(self):
        """Test the full table listing."""
        text = make_d6_table().describe()
        assert text.splitlines()[0] == "Test (1d6)"
        assert "1-2\tA" in text
        assert "6\tD" in text


class TestUniformList:
    """Tests for UniformList."""

    def test_roll_returns_item(self, scripted_dice):
        """Test that a roll picks the item at the drawn position."""
        lst = UniformList("Letters", ["a", "b", "c"])
        assert lst.roll(scripted_dice(1)) == "a"
        assert lst.roll(scripted_dice(3)) == "c"

    def test_random_is_same_draw(self, scripted_dice):
        """Test that random() draws like roll()."""
        lst = UniformList("Letters", ["a", "b", "c"])
        assert lst.random(scripted_dice(2)) == "b"

    def test_single_item_list(self, seeded_dice):
        """Test that a one-item list always returns its item."""
        assert UniformList("One", ["only"]).roll(seeded_dice) == "only"

    def test_empty_list_rejected(self):
        """Test that an empty list is rejected."""
        with pytest.raises(InvalidConfigurationError):
            UniformList("Empty", [])

    def test_uniform_distribution(self, seeded_dice):
        """Test that items come up with equal frequency."""
        lst = UniformList("Letters", ["a", "b", "c", "d"])
        counts = Counter(lst.roll(seeded_dice) for _ in range(4000))
        for item in lst.items:
            assert abs(counts[item] - 1000) <= 150, counts

    def test_len_and_label(self):
        """Test length, label and listing."""
        lst = UniformList("Letters", ["a", "b"])
        assert len(lst) == 2
        assert lst.label == "Letters"
        assert lst.describe() == "Letters\na\nb"
