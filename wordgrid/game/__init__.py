"""Game session layer for wordgrid."""

from .models import (
    GameConfig,
    BoardSnapshot,
    BoardInfo,
    RoundResult,
)
from .words import parse_word_list, load_words, file_word_source
from .round import GameRound
from .session import WordSearchGame, WordSource

__all__ = [
    "GameConfig",
    "BoardSnapshot",
    "BoardInfo",
    "RoundResult",
    "parse_word_list",
    "load_words",
    "file_word_source",
    "GameRound",
    "WordSearchGame",
    "WordSource",
]
