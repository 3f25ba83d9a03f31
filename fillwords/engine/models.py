"""
Pydantic models for the placement engine.

Covers the per-word placement records, the generated grid result, difficulty
presets and the puzzle configuration read by the command-line entry point.
"""

from pathlib import Path
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from ..verifiers.models import Cell


class Placement(BaseModel):
    """One word committed to the grid."""
    model_config = ConfigDict(frozen=True)

    word: str
    row: int
    col: int
    direction: str
    dr: int
    dc: int
    cells: Tuple[Cell, ...]

    @property
    def start_cell(self) -> Cell:
        return Cell(row=self.row, col=self.col)


class GridResult(BaseModel):
    """A fully filled grid plus what was (and was not) hidden in it."""
    grid: List[List[str]]
    placements: List[Placement] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def target_words(self) -> List[str]:
        """Words the player has to find: only those actually placed."""
        return [p.word for p in self.placements]


class LevelConfig(BaseModel):
    """A difficulty preset."""
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    word_length_min: int = Field(..., ge=1)
    word_length_max: int = Field(..., ge=1)
    word_count: int = Field(..., ge=1)
    grid_size: int = Field(..., ge=1)


class PuzzleConfig(BaseModel):
    """Configuration for generating a single puzzle."""
    lang: str = "en"
    level: str = "easy"
    words: List[str] = Field(default_factory=list)
    words_file: Optional[Path] = None
    grid_size: Optional[int] = Field(None, ge=1)
    word_count: Optional[int] = Field(None, ge=1)
    seed: Optional[int] = None

    @property
    def effective_grid_size(self) -> int:
        """Grid size override, or the level's preset."""
        from .levels import get_level
        return self.grid_size or get_level(self.level).grid_size

    @property
    def effective_word_count(self) -> int:
        """Word count override, or the level's preset."""
        from .levels import get_level
        return self.word_count or get_level(self.level).word_count
