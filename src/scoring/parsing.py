"""Grid parsing and validation utilities."""

import re
from typing import List, Optional, Sequence

from .models import Grid


EMPTY_MARKERS = {"", ".", "_", "-"}

# Checked before uppercasing: some characters uppercase to two letters
_SINGLE_LETTER = re.compile(r"^[A-Za-z]\Z")


def normalize_cell(value: Optional[str]) -> Optional[str]:
    """
    Normalize one cell: None for empty, an uppercase letter otherwise.

    Raises ValueError for anything that is neither empty nor a single letter.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Grid cell must be a string or None, got {type(value).__name__}")

    cell = value.strip()
    if cell in EMPTY_MARKERS:
        return None
    if not _SINGLE_LETTER.match(cell):
        raise ValueError(f"Invalid grid cell {value!r}: expected a single letter A-Z or empty")
    return cell.upper()


def validate_grid(grid: Sequence[Sequence[Optional[str]]]) -> Grid:
    """
    Check that a grid is rectangular and return a normalized copy.

    Raises:
        ValueError: If rows have different lengths or a cell is malformed
    """
    rows = [list(row) for row in grid]
    if rows:
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Grid is not rectangular: row {i} has {len(row)} cells, expected {width}"
                )
    return [[normalize_cell(cell) for cell in row] for row in rows]


def parse_grid(text: str) -> Grid:
    """
    Parse a text grid, one row per line.

    Letters are case-insensitive; '.', '_', '-' and spaces are empty cells.
    Blank lines before and after the grid are ignored.

    Raises:
        ValueError: If rows have different lengths
    """
    lines: List[str] = text.split('\n')
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    # Trailing whitespace is ambiguous with empty cells, so only '\r' is stripped
    rows = [list(line.rstrip('\r')) for line in lines]
    return validate_grid(rows)


def format_grid(grid: Grid) -> str:
    """Inverse of parse_grid: letters as-is, '.' for empty cells."""
    return '\n'.join(''.join(cell or '.' for cell in row) for row in grid)
