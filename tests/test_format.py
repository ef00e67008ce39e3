"""
Tests for output formatting.
"""

import pytest

from swnt.content.format import OutputType, table


ROWS = [("Atmosphere", "Breathable mix"), ("Tags", "")]


class TestTextOutput:
    """Tests for tab separated text."""

    def test_header_and_rows(self):
        """Test a text table with a header."""
        assert table(OutputType.TEXT, ("Name", "Aldis"), ROWS) == (
            "Name\t:\tAldis\n"
            "Atmosphere\t:\tBreathable mix\n"
            "Tags\t:\t\n"
        )

    def test_no_header(self):
        """Test a text table without a header."""
        assert table(OutputType.TEXT, None, ROWS).startswith("Atmosphere\t:\t")

    def test_empty_header_label_skipped(self):
        """Test that a header with an empty label is not printed."""
        assert table(OutputType.TEXT, ("", "x"), ROWS).startswith("Atmosphere\t:\t")

    def test_string_output_type(self):
        """Test that the output type may be given as a string."""
        assert table("text", None, ROWS) == table(OutputType.TEXT, None, ROWS)


class TestMarkdownOutput:
    """Tests for Markdown tables."""

    def test_header_and_rows(self):
        """Test a Markdown table with a header."""
        assert table(OutputType.MARKDOWN, ("Name", "Aldis"), ROWS) == (
            "| Name | Aldis |\n"
            "| --- | --- |\n"
            "| Atmosphere | Breathable mix |\n"
            "| Tags |  |\n"
        )

    def test_missing_header_still_renders_table(self):
        """Test that Markdown always has a header row."""
        assert table(OutputType.MARKDOWN, None, []).startswith("|  |  |\n| --- | --- |")

    def test_cells_escaped(self):
        """Test escaping of pipes and newlines in cells."""
        text = table(OutputType.MARKDOWN, None, [("A|B", "line one\nline two")])
        assert "| A\\|B | line one<br>line two |" in text


def test_unknown_output_type():
    """Test that an unknown output type is rejected."""
    with pytest.raises(ValueError):
        table("html", None, ROWS)
