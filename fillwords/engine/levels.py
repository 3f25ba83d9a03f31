"""Difficulty presets: word lengths, word count and grid size per level."""

from typing import Dict, List

from .models import LevelConfig


DEFAULT_LEVEL = "easy"

LEVELS: List[LevelConfig] = [
    LevelConfig(id="easy", label="Easy", word_length_min=3, word_length_max=5, word_count=10, grid_size=10),
    LevelConfig(id="medium", label="Medium", word_length_min=5, word_length_max=8, word_count=15, grid_size=14),
    LevelConfig(id="hard", label="Hard", word_length_min=8, word_length_max=15, word_count=20, grid_size=18),
]

LEVELS_BY_ID: Dict[str, LevelConfig] = {level.id: level for level in LEVELS}


def get_level(level_id: str) -> LevelConfig:
    """Return the preset for a level id, defaulting to easy."""
    return LEVELS_BY_ID.get(level_id, LEVELS_BY_ID[DEFAULT_LEVEL])
