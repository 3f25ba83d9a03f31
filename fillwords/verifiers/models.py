"""Data models for selection checking."""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Cell(BaseModel):
    """A (row, col) coordinate in the grid, 0-indexed."""
    model_config = ConfigDict(frozen=True)

    row: int
    col: int

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        # Accept plain (row, col) pairs as well as mappings
        if isinstance(data, (tuple, list)) and len(data) == 2:
            return {"row": data[0], "col": data[1]}
        return data

    def as_tuple(self) -> tuple:
        return (self.row, self.col)


class SelectionResult(BaseModel):
    """Outcome of checking one player selection against the target words."""
    valid: bool
    found: bool = False
    word: Optional[str] = None
    direction: Optional[str] = None
    start_cell: Optional[Cell] = None
    cells: List[Cell] = Field(default_factory=list)  # reading order when found

    @classmethod
    def invalid(cls) -> "SelectionResult":
        """The result for an empty, broken or out-of-bounds selection."""
        return cls(valid=False, found=False)
