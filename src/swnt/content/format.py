"""
Output formatting for generated records.

Every generated record exposes its fields as ordered (label, value)
pairs. This module renders those pairs as plain tab-separated text or as
a Markdown table; nothing else in the package knows about output modes.
"""

from enum import Enum
from typing import Iterable, Optional, Union


class OutputType(str, Enum):
    """Output modes supported by the renderer."""
    TEXT = "text"
    MARKDOWN = "markdown"


def _md_cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", "<br>")


def table(
    output_type: Union[OutputType, str],
    header: Optional[tuple[str, str]],
    rows: Iterable[tuple[str, str]],
) -> str:
    """
    Render label/value rows.

    Args:
        output_type: TEXT or MARKDOWN
        header: Optional (left, right) heading. TEXT prints it as a row
                when the left side is non-empty.
        rows: Ordered (label, value) pairs

    Returns:
        The rendered table, newline terminated
    """
    output_type = OutputType(output_type)
    lines = []

    if output_type == OutputType.MARKDOWN:
        left, right = header or ("", "")
        lines.append(f"| {_md_cell(left)} | {_md_cell(right)} |")
        lines.append("| --- | --- |")
        for label, value in rows:
            lines.append(f"| {_md_cell(label)} | {_md_cell(value)} |")
    else:
        if header and header[0]:
            lines.append(f"{header[0]}\t:\t{header[1]}")
        for label, value in rows:
            lines.append(f"{label}\t:\t{value}")

    return "\n".join(lines) + "\n"
