"""The eight compass directions shared by placement and selection checking."""

from typing import Dict, List, NamedTuple, Optional, Tuple


class Direction(NamedTuple):
    """A unit step (dr, dc) through the grid with its canonical name."""
    name: str
    dr: int
    dc: int


DIRECTIONS: List[Direction] = [
    Direction("right", 0, 1),
    Direction("left", 0, -1),
    Direction("down", 1, 0),
    Direction("up", -1, 0),
    Direction("down-right", 1, 1),
    Direction("down-left", 1, -1),
    Direction("up-right", -1, 1),
    Direction("up-left", -1, -1),
]

_BY_DELTA: Dict[Tuple[int, int], Direction] = {(d.dr, d.dc): d for d in DIRECTIONS}
_BY_NAME: Dict[str, Direction] = {d.name: d for d in DIRECTIONS}


def direction_for_delta(dr: int, dc: int) -> Optional[Direction]:
    """Return the direction for a step, or None if it is not one of the eight."""
    return _BY_DELTA.get((dr, dc))


def get_direction(name: str) -> Direction:
    """Look up a direction by its canonical name (raises KeyError if unknown)."""
    return _BY_NAME[name]
