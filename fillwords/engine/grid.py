"""
Grid generation for word-search puzzles.

Words are hidden in a square grid along any of the eight directions, longest
first, with a fixed budget of random attempts per word. Two words may cross
only where they share the same letter. Words that never fit are reported in
``skipped`` instead of failing the whole grid, and every cell left empty is
filled with a random character from the puzzle language's alphabet.
"""

import logging
import math
import random
from functools import partial
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..directions import DIRECTIONS, Direction
from ..verifiers.models import Cell
from .alphabets import DEFAULT_LANG, random_char
from .models import GridResult, Placement

logger = logging.getLogger(__name__)

# Random (row, col, direction) tries per word before giving up on it
MAX_ATTEMPTS = 200

FillerSource = Callable[[str], str]


def max_word_length(grid_size: int) -> int:
    """Longest word that can fit at all: the length of the grid's diagonal."""
    return math.floor(math.sqrt(2) * grid_size)


def _empty_grid(size: int) -> List[List[Optional[str]]]:
    return [[None for _ in range(size)] for _ in range(size)]


def can_place(
    grid: List[List[Optional[str]]],
    word: str,
    row: int,
    col: int,
    direction: Direction,
) -> bool:
    """Check that every cell of the word is in bounds and empty or already holds the same letter."""
    size = len(grid)
    for i, letter in enumerate(word):
        r = row + i * direction.dr
        c = col + i * direction.dc
        if r < 0 or r >= size or c < 0 or c >= size:
            return False
        if grid[r][c] is not None and grid[r][c] != letter:
            return False
    return True


def place_word(
    grid: List[List[Optional[str]]],
    word: str,
    row: int,
    col: int,
    direction: Direction,
) -> List[Cell]:
    """Write the word into the grid (in place) and return the cells it covers."""
    cells = []
    for i, letter in enumerate(word):
        r = row + i * direction.dr
        c = col + i * direction.dc
        grid[r][c] = letter
        cells.append(Cell(row=r, col=c))
    return cells


def try_place_word(
    grid: List[List[Optional[str]]],
    word: str,
    rng: random.Random,
    max_attempts: int = MAX_ATTEMPTS,
) -> Optional[Placement]:
    """
    Try random start cells for a word until one fits or the budget runs out.

    The direction order is shuffled once per word and cycled through by
    attempt number, so every direction gets tried within any eight attempts.

    Returns:
        The committed Placement, or None if no attempt succeeded
    """
    size = len(grid)
    directions = list(DIRECTIONS)
    rng.shuffle(directions)

    for attempt in range(max_attempts):
        row = rng.randrange(size)
        col = rng.randrange(size)
        direction = directions[attempt % len(directions)]

        if can_place(grid, word, row, col, direction):
            cells = place_word(grid, word, row, col, direction)
            return Placement(
                word=word,
                row=row,
                col=col,
                direction=direction.name,
                dr=direction.dr,
                dc=direction.dc,
                cells=cells,
            )

    return None


def generate_grid(
    words: Sequence[str],
    grid_size: int,
    lang: str = DEFAULT_LANG,
    filler: Optional[FillerSource] = None,
    rng: Optional[random.Random] = None,
) -> GridResult:
    """
    Hide words in a grid_size x grid_size grid and fill the rest with filler letters.

    Args:
        words: Words to hide, any casing (placed in lowercase)
        grid_size: Side length of the square grid
        lang: Language code passed to the filler source
        filler: Callable returning one filler character for a language code
            (defaults to random_char)
        rng: Random generator for positions and direction order

    Returns:
        GridResult with the filled grid, the placements made, and the words
        that could not be placed (as supplied, in processing order)

    Raises:
        ValueError: If grid_size is not a positive integer
    """
    if isinstance(grid_size, bool) or not isinstance(grid_size, int) or grid_size <= 0:
        raise ValueError(f"grid_size must be a positive integer, got {grid_size!r}")

    rng = rng or random.Random()
    if filler is None:
        filler = partial(random_char, rng=rng)

    grid = _empty_grid(grid_size)
    placements: List[Placement] = []
    skipped: List[str] = []
    max_length = max_word_length(grid_size)

    # Longest first: long words have the fewest legal slots (sort is stable)
    for word in sorted(words, key=len, reverse=True):
        lower = word.lower()

        if not lower or len(lower) > max_length:
            skipped.append(word)
            continue

        placement = try_place_word(grid, lower, rng)
        if placement:
            placements.append(placement)
        else:
            skipped.append(word)

    for r in range(grid_size):
        for c in range(grid_size):
            if grid[r][c] is None:
                grid[r][c] = filler(lang)

    if skipped:
        logger.debug("Skipped %d of %d word(s): %s", len(skipped), len(words), skipped)

    return GridResult(grid=grid, placements=placements, skipped=skipped)


def cells_for_word(placement: Placement) -> List[Cell]:
    """A copy of the cells a placement covers, in reading order."""
    return list(placement.cells)


def build_cell_index(placements: Sequence[Placement]) -> Dict[Tuple[int, int], str]:
    """Map (row, col) to the placed word covering it; later placements win at crossings."""
    index: Dict[Tuple[int, int], str] = {}
    for placement in placements:
        for cell in placement.cells:
            index[(cell.row, cell.col)] = placement.word
    return index
