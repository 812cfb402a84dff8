"""
Grid scanning: enumerate every candidate word on a grid.

Each row and each column is split into runs of letters. Every contiguous
sub-range of a run that is at least `min_length` long becomes a candidate,
once read forward (right/down) and once read backward (left/up).
"""

from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .models import Cell, Direction, Grid, WordCandidate
from .parsing import validate_grid


def find_runs(line: Sequence[Optional[str]]) -> Iterator[Tuple[int, int]]:
    """Yield (start, end) bounds of each maximal run of letters, end exclusive."""
    n = len(line)
    i = 0
    while i < n:
        while i < n and line[i] is None:
            i += 1
        if i >= n:
            break
        j = i
        while j < n and line[j] is not None:
            j += 1
        yield i, j
        i = j


def _scan_line(
    line: Sequence[Optional[str]],
    coord: Callable[[int], Cell],
    forward: Direction,
    backward: Direction,
    min_length: int,
) -> List[WordCandidate]:
    candidates: List[WordCandidate] = []

    for run_start, run_end in find_runs(line):
        if run_end - run_start < min_length:
            continue

        for a in range(run_start, run_end):
            for b in range(a + min_length, run_end + 1):
                text = ''.join(line[a:b])
                path = tuple(coord(k) for k in range(a, b))
                candidates.append(WordCandidate(text=text, path=path, direction=forward))

        for b in range(run_end, run_start, -1):
            for a in range(b - min_length, run_start - 1, -1):
                text = ''.join(reversed(line[a:b]))
                path = tuple(coord(k) for k in range(b - 1, a - 1, -1))
                candidates.append(WordCandidate(text=text, path=path, direction=backward))

    return candidates


def scan_grid(grid: Grid, min_length: int = 2) -> List[WordCandidate]:
    """
    Enumerate all candidates on the grid.

    Rows are scanned top to bottom, then columns left to right. Within a line,
    forward candidates of a run come before its backward candidates.

    Args:
        grid: Rectangular grid of letters and empty cells
        min_length: Shortest candidate to emit (at least 1)

    Returns:
        One candidate per (start, end, direction)

    Raises:
        ValueError: If min_length < 1 or the grid is malformed
    """
    if min_length < 1:
        raise ValueError(f"min_length must be at least 1, got {min_length}")

    cells = validate_grid(grid)
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    candidates: List[WordCandidate] = []

    for r in range(rows):
        candidates.extend(_scan_line(
            cells[r], lambda k, r=r: Cell(r, k), "right", "left", min_length
        ))

    for c in range(cols):
        column = [cells[r][c] for r in range(rows)]
        candidates.extend(_scan_line(
            column, lambda k, c=c: Cell(k, c), "down", "up", min_length
        ))

    return candidates
