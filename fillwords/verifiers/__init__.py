"""Selection checking for fillwords puzzles."""

from .selection import check_selection, is_game_won, normalize_selection, line_direction
from .models import Cell, SelectionResult
from .parsing import parse_cells

__all__ = [
    # Main checking
    "check_selection",
    "is_game_won",
    "normalize_selection",
    "line_direction",
    # Models
    "Cell",
    "SelectionResult",
    # Parsing
    "parse_cells",
]
