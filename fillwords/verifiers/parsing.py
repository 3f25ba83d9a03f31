"""Selection parsing utilities for the command line."""

import re
from typing import List

from .models import Cell


_CELL_PATTERN = re.compile(r'(-?\d+)\s*,\s*(-?\d+)')
_SEPARATORS = re.compile(r'[\s;()\[\]]+')


def parse_cells(spec: str) -> List[Cell]:
    """
    Parse a textual selection such as "0,0 0,1 0,2" or "(0,0);(0,1)".

    Raises ValueError if the text is empty or contains anything other than
    row,col pairs and separators.
    """
    spec = (spec or "").strip()
    pairs = _CELL_PATTERN.findall(spec)
    if not pairs:
        raise ValueError(f"No cells found in selection: '{spec}'")

    leftover = _SEPARATORS.sub('', _CELL_PATTERN.sub('', spec))
    if leftover:
        raise ValueError(f"Invalid selection format: '{spec}'")

    return [Cell(row=int(r), col=int(c)) for r, c in pairs]
