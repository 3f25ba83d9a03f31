"""
Standalone CLI for checking a selection against a saved puzzle.

Usage:
    python -m fillwords.check puzzles/p1.json "0,0 0,1 0,2"
    python -m fillwords.check puzzles/p1.json "(4,4);(3,3);(2,2)" --words cat,dog
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .engine import GridResult
from .verifiers import check_selection, parse_cells


def load_puzzle(path: Path) -> GridResult:
    """Load a puzzle saved by fillwords.main."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return GridResult.model_validate(data)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check a cell selection against a saved fillwords puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m fillwords.check puzzles/p1.json "0,0 0,1 0,2"
  python -m fillwords.check puzzles/p1.json "2,5;2,4;2,3" --words tree
        """
    )
    parser.add_argument(
        "puzzle",
        help="Path to the puzzle JSON file"
    )
    parser.add_argument(
        "cells",
        help="Selected cells as row,col pairs, e.g. \"0,0 0,1 0,2\""
    )
    parser.add_argument(
        "--words",
        help="Comma-separated target words (default: the puzzle's placed words)"
    )

    args = parser.parse_args(argv)

    puzzle_path = Path(args.puzzle)
    if not puzzle_path.exists():
        print(f"Error: Puzzle file not found: {args.puzzle}", file=sys.stderr)
        return 1

    try:
        puzzle = load_puzzle(puzzle_path)
        cells = parse_cells(args.cells)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    targets = args.words.split(',') if args.words else puzzle.target_words
    result = check_selection(puzzle.grid, cells, targets)
    print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
