from typing import Iterable, Optional, Sequence, Set, Tuple


def render_grid(
    grid: Sequence[Sequence[str]],
    highlight: Optional[Iterable[Tuple[int, int]]] = None,
    uppercase: bool = True,
) -> str:
    """Render the grid as rows of space-separated letters; highlighted cells are bracketed."""
    marked: Set[Tuple[int, int]] = set(highlight or [])

    lines = []
    for r, row in enumerate(grid):
        cells = []
        for c, letter in enumerate(row):
            ch = letter.upper() if uppercase else letter
            cells.append(f"[{ch}]" if (r, c) in marked else f" {ch} ")
        lines.append(''.join(cells).rstrip())

    return '\n'.join(lines)
