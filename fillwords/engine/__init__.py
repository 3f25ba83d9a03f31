"""Puzzle generation for fillwords."""

from .models import Placement, GridResult, LevelConfig, PuzzleConfig
from .grid import (
    MAX_ATTEMPTS,
    generate_grid,
    max_word_length,
    cells_for_word,
    build_cell_index,
)
from .alphabets import ALPHABETS, DEFAULT_LANG, get_alphabet, random_char
from .levels import LEVELS, get_level
from .words import parse_custom_words, is_valid_word, select_words

__all__ = [
    "Placement",
    "GridResult",
    "LevelConfig",
    "PuzzleConfig",
    "MAX_ATTEMPTS",
    "generate_grid",
    "max_word_length",
    "cells_for_word",
    "build_cell_index",
    "ALPHABETS",
    "DEFAULT_LANG",
    "get_alphabet",
    "random_char",
    "LEVELS",
    "get_level",
    "parse_custom_words",
    "is_valid_word",
    "select_words",
]
