"""
Main entry point for generating fillwords puzzles.

Usage:
    python -m fillwords.main config.yaml
    python -m fillwords.main --words cat,dog,bird --size 8 --output puzzles/p1.json
    python -m fillwords.main config.yaml --level hard --reveal --verbose
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .engine import GridResult, PuzzleConfig, generate_grid, parse_custom_words, select_words
from .utils.grid_visualizer import render_grid


def load_config(config_path: str) -> PuzzleConfig:
    """Load puzzle configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return PuzzleConfig(**data)


def read_words_file(path: Path) -> List[str]:
    """Read a word pool: one word per line, or comma-separated."""
    with open(path, encoding="utf-8") as f:
        text = f.read()
    return [w.strip() for w in text.replace(',', '\n').splitlines() if w.strip()]


def resolve_words(config: PuzzleConfig, rng: random.Random) -> List[str]:
    """
    Decide which words go into the puzzle.

    Explicit words are used in the given order (lowercased, two letters or
    more, duplicates dropped) and cut to the word count, with a warning on
    stderr for anything dropped. A words file is treated as a pool and
    filtered by the level's length range, deduplicated, shuffled and cut to
    the word count.
    """
    if config.words:
        words = parse_custom_words(','.join(config.words))
        unique = list(dict.fromkeys(words))
        if len(unique) < len(words):
            print(f"Warning: ignored {len(words) - len(unique)} duplicate word(s)", file=sys.stderr)

        limit = config.effective_word_count
        if len(unique) > limit:
            print(
                f"Warning: using the first {limit} of {len(unique)} words, dropped: {', '.join(unique[limit:])}",
                file=sys.stderr,
            )
        return unique[:limit]

    if config.words_file:
        pool = read_words_file(config.words_file)
        return select_words(
            pool,
            level=config.level,
            lang=config.lang,
            count=config.effective_word_count,
            rng=rng,
        )

    return []


def save_puzzle(result: GridResult, config: PuzzleConfig, path: Path) -> None:
    """Save a generated puzzle (grid, placements, skipped words and config) as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {"config": config.model_dump(mode="json"), **result.model_dump(mode="json")}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def build_config(args: argparse.Namespace) -> PuzzleConfig:
    """Combine the optional YAML config with command-line overrides."""
    config = load_config(args.config) if args.config else PuzzleConfig()

    overrides = {}
    if args.words:
        overrides["words"] = args.words.split(',')
    if args.words_file:
        overrides["words_file"] = args.words_file
    if args.level:
        overrides["level"] = args.level
    if args.lang:
        overrides["lang"] = args.lang
    if args.size is not None:
        overrides["grid_size"] = args.size
    if args.count is not None:
        overrides["word_count"] = args.count
    if args.seed is not None:
        overrides["seed"] = args.seed

    return PuzzleConfig(**{**config.model_dump(), **overrides})


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a fillwords (word-search) puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  lang: en
  level: medium
  words_file: words/en.txt
  grid_size: 12
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument("--words", help="Comma-separated words to hide")
    parser.add_argument("--words-file", help="Word pool file (one per line or comma-separated)")
    parser.add_argument("--level", help="Difficulty level: easy, medium or hard")
    parser.add_argument("--lang", help="Filler alphabet language: en, ru, be or uk")
    parser.add_argument("--size", type=int, help="Grid size (overrides the level preset)")
    parser.add_argument("--count", type=int, help="Number of words (overrides the level preset)")
    parser.add_argument("--seed", type=int, help="Random seed for a repeatable puzzle")
    parser.add_argument(
        "--output", "-o",
        help="Path to save the puzzle as JSON"
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Highlight placed words and list their positions"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')

    try:
        config = build_config(args)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    rng = random.Random(config.seed)

    try:
        words = resolve_words(config, rng)
    except OSError as e:
        print(f"Error reading words: {e}", file=sys.stderr)
        return 1

    if not words:
        print("Error: no usable words (use --words, --words-file or a config file)", file=sys.stderr)
        return 1

    result = generate_grid(words, config.effective_grid_size, lang=config.lang, rng=rng)

    highlight = None
    if args.reveal:
        highlight = [cell.as_tuple() for p in result.placements for cell in p.cells]

    print(render_grid(result.grid, highlight=highlight))
    print()
    print(f"Words to find ({len(result.target_words)}): {', '.join(sorted(result.target_words))}")

    if args.reveal:
        for p in result.placements:
            print(f"  {p.word}: start ({p.row}, {p.col}) {p.direction}")

    if result.skipped:
        print(f"Warning: could not place {len(result.skipped)} word(s): {', '.join(result.skipped)}", file=sys.stderr)

    if args.output:
        output_path = Path(args.output)
        save_puzzle(result, config, output_path)
        print(f"Puzzle saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
