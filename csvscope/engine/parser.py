"""Split raw comma-separated text into a header and equally wide rows.

There is no quoting or escaping: every ``,`` separates cells and every
``\\n`` separates rows.
"""

import logging
from dataclasses import dataclass

from csvscope.errors import MalformedInputError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedTable:
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    @property
    def number_of_columns(self) -> int:
        return len(self.headers)

    @property
    def number_of_rows(self) -> int:
        return len(self.rows)

    def column(self, index: int) -> list[str]:
        """Cells of one column in row order."""
        return [row[index] for row in self.rows]


def _split_lines(raw_text: str) -> list[str]:
    lines = raw_text.split("\n")
    # A trailing newline does not start another row
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def parse(raw_text: str) -> ParsedTable:
    """Parse CSV text into a ParsedTable.

    Raises MalformedInputError for blank input or when a data row does not
    have as many cells as the header.
    """
    if raw_text is None or not raw_text.strip():
        raise MalformedInputError("CSV data cannot be empty")

    lines = _split_lines(raw_text)
    headers = tuple(lines[0].split(","))
    expected = len(headers)

    rows: list[tuple[str, ...]] = []
    for i, line in enumerate(lines[1:], start=1):
        cells = tuple(line.split(","))
        if len(cells) != expected:
            log.warning("Row %d has %d columns, expected %d", i, len(cells), expected)
            raise MalformedInputError.column_mismatch(i, len(cells), expected)
        rows.append(cells)

    return ParsedTable(headers=headers, rows=tuple(rows))
