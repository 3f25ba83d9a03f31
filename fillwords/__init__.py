"""Word-search puzzle generation and selection checking."""

from .directions import DIRECTIONS, Direction, direction_for_delta, get_direction
from .engine import generate_grid, GridResult, Placement
from .verifiers import check_selection, is_game_won, Cell, SelectionResult

__all__ = [
    "DIRECTIONS",
    "Direction",
    "direction_for_delta",
    "get_direction",
    "generate_grid",
    "GridResult",
    "Placement",
    "check_selection",
    "is_game_won",
    "Cell",
    "SelectionResult",
]
