"""
Selection checking for word-search puzzles.

Validates a player's selection:
1. Normalization (consecutive duplicate cells collapsed, empty selections rejected)
2. Straight line (constant step that is one of the eight directions)
3. Bounds (every cell inside the grid)
4. Word match (forward or reversed string against the target words)

Nothing here raises for bad selections; they come back as an invalid result.
"""

from typing import Any, List, Optional, Sequence

from pydantic import ValidationError

from ..directions import Direction, direction_for_delta
from .models import Cell, SelectionResult


def _coerce_cells(cells: Optional[Sequence[Any]]) -> Optional[List[Cell]]:
    """Turn Cells, (row, col) pairs or {'row', 'col'} mappings into Cells; None if any is unusable."""
    if not cells:
        return None
    try:
        return [Cell.model_validate(c) for c in cells]
    except (ValidationError, TypeError):
        return None


def line_direction(cells: Sequence[Cell]) -> Optional[Direction]:
    """
    Direction of a straight-line selection.

    Returns None for fewer than two cells, for a selection whose steps are
    not all equal, and for a step that is not one of the eight directions.
    """
    if len(cells) < 2:
        return None

    dr = cells[1].row - cells[0].row
    dc = cells[1].col - cells[0].col

    for prev, cur in zip(cells, cells[1:]):
        if cur.row - prev.row != dr or cur.col - prev.col != dc:
            return None

    return direction_for_delta(dr, dc)


def normalize_selection(cells: Optional[Sequence[Any]]) -> Optional[List[Cell]]:
    """
    Collapse repeated consecutive cells and check the result is a straight line.

    Fast drags can report the same cell twice in a row. A single cell is
    allowed (its direction is unknown).

    Returns:
        The deduplicated cells, or None if empty or not a straight line
    """
    coerced = _coerce_cells(cells)
    if not coerced:
        return None

    deduped = [c for i, c in enumerate(coerced) if i == 0 or c != coerced[i - 1]]

    if len(deduped) == 1:
        return deduped

    return deduped if line_direction(deduped) is not None else None


def check_selection(
    grid: Sequence[Sequence[str]],
    cells: Optional[Sequence[Any]],
    target_words: Sequence[str],
) -> SelectionResult:
    """
    Check whether a selection of cells spells one of the target words.

    Words placed left or upwards read backwards along the player's drag, so
    both the selected string and its reverse are compared. On a reversed
    match the cells are returned in the word's reading order, and the start
    cell and direction follow that order.

    Args:
        grid: Filled letter grid (not modified)
        cells: Ordered selection as Cells, (row, col) pairs or mappings
        target_words: Words to find, compared case-insensitively

    Returns:
        SelectionResult; `valid` is False for empty, bent or out-of-bounds
        selections, `found` is True only for a matching target word
    """
    normalized = normalize_selection(cells)
    if not normalized:
        return SelectionResult.invalid()

    size = len(grid)
    for cell in normalized:
        if cell.row < 0 or cell.row >= size or cell.col < 0 or cell.col >= len(grid[cell.row]):
            return SelectionResult.invalid()

    selected = ''.join(grid[c.row][c.col] for c in normalized).lower()
    reversed_ = selected[::-1]

    targets = {w.lower() for w in target_words}

    matched_word: Optional[str] = None
    matched_cells = normalized

    if selected in targets:
        matched_word = selected
    elif reversed_ in targets:
        matched_word = reversed_
        matched_cells = list(reversed(normalized))

    if matched_word is None:
        return SelectionResult(valid=True, found=False, cells=normalized)

    direction = line_direction(matched_cells)
    return SelectionResult(
        valid=True,
        found=True,
        word=matched_word,
        direction=direction.name if direction else None,
        start_cell=matched_cells[0],
        cells=matched_cells,
    )


def is_game_won(found_words: Sequence[str], target_words: Sequence[str]) -> bool:
    """True once every target word has been found; never for an empty target list."""
    if not target_words:
        return False
    found = {w.lower() for w in found_words}
    return all(w.lower() in found for w in target_words)
