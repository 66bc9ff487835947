"""
Pydantic models for the game layer.

This module contains the configuration and the read-only views (snapshots,
stats, exported results) handed to rendering and reporting code. The logic
classes (GameRound, WordSearchGame) live in their own files.
"""

from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..board.filler import DEFAULT_MAX_NODES, Strategy
from ..board.models import Coordinate, PlacedWord


class GameConfig(BaseModel):
    """Configuration for a word-search game."""
    board_size: int = Field(default=4, ge=3)
    min_word_length: int = Field(default=3, ge=3)
    max_candidates: int = Field(default=10, ge=1)
    strategy: Strategy = "exhaustive"
    max_nodes: int = Field(default=DEFAULT_MAX_NODES, ge=1)
    time_budget: Optional[float] = Field(default=None, gt=0)  # seconds
    seed: Optional[int] = None
    words_path: Optional[str] = None

    @model_validator(mode="after")
    def _check_lengths(self) -> "GameConfig":
        if self.min_word_length > self.board_size:
            raise ValueError(
                f"min_word_length ({self.min_word_length}) cannot exceed board_size ({self.board_size})"
            )
        return self


class BoardSnapshot(BaseModel):
    """Everything a renderer needs to draw the board at one moment."""
    model_config = ConfigDict(frozen=True)

    round_number: int
    rows: Tuple[str, ...]
    selection: Tuple[Coordinate, ...] = ()
    selection_text: str = ""  # string under the current drag
    placed_words: Tuple[PlacedWord, ...] = ()


class BoardInfo(BaseModel):
    """Informational stats about the current board."""
    candidate_words: List[str] = Field(default_factory=list)
    placed_count: int = 0
    found_word_count: int = 0  # distinct strings readable off the grid
    min_words: int = 0
    max_words: int = 0


class RoundResult(BaseModel):
    """Exported record of a single round."""
    config: GameConfig
    round_number: int
    rows: List[str] = Field(default_factory=list)
    candidate_words: List[str] = Field(default_factory=list)
    placed_words: List[PlacedWord] = Field(default_factory=list)
    found_words: List[str] = Field(default_factory=list)
    strategy: Strategy = "exhaustive"
    nodes_explored: int = 0
    exhausted: bool = False
    created_at: str = ""
