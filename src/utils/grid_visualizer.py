from typing import Iterable, List, Optional, Set, Tuple

ARROWS = {'right': '→', 'left': '←', 'down': '↓', 'up': '↑'}


def render_grid(grid: List[List[Optional[str]]], scored_cells: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """
    Render the grid to a string.

    Empty cells are '.'. When scored_cells is given, letters covered by a scored
    word stay uppercase and all other letters are lowercased.
    """
    marked: Optional[Set[Tuple[int, int]]] = None
    if scored_cells is not None:
        marked = {(r, c) for r, c in scored_cells}

    lines = []
    for r, row in enumerate(grid):
        line = ''
        for c, cell in enumerate(row):
            if not cell:
                line += '.'
            elif marked is None or (r, c) in marked:
                line += cell.upper()
            else:
                line += cell.lower()
        lines.append(line)

    return '\n'.join(lines)


def render_words(words) -> str:
    """One line per scored word: text, direction arrow and start cell."""
    lines = []
    for word in words:
        row, col = word.path[0]
        lines.append(f"{word.text:<12} {ARROWS.get(word.direction, '?')} ({row}, {col})")
    return '\n'.join(lines)


if __name__ == '__main__':
    example = [
        ['C', 'A', 'T'],
        [None, None, 'O'],
        [None, None, 'P'],
    ]

    print("Rendered grid:")
    print(render_grid(example))
    print("\nWith only the top row scored:")
    print(render_grid(example, [(0, 0), (0, 1), (0, 2)]))
