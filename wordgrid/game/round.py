from datetime import datetime
from typing import FrozenSet, List, Sequence, Set, Tuple

from pydantic import BaseModel, Field

from ..board.enumerator import enumerate_words
from ..board.filler import Strategy, fill_board
from ..board.grid import Grid
from ..board.models import Coordinate, PlacedWord
from .models import GameConfig
from .words import parse_word_list


class GameRound(BaseModel):
    """
    One round of the game: a finished grid and the words marked on it.

    The grid is complete before a round object exists, so consumers never
    see a partly filled board. The placed-word list starts with the words
    the filler placed and only grows as the player finds more.

    Attributes:
        round_number: 1-based round counter within a session
        grid: The finished letter grid
        candidate_words: Words the filler tried to place, in order
        known_words: Every word that counts as a find
        placed_words: Placed and found words, in the order they were recorded
    """

    round_number: int = Field(default=1, ge=1)
    grid: Grid
    min_word_length: int = 3
    candidate_words: List[str] = Field(default_factory=list)
    known_words: FrozenSet[str] = frozenset()
    placed_words: List[PlacedWord] = Field(default_factory=list)
    strategy: Strategy = "exhaustive"
    nodes_explored: int = 0
    exhausted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        words: Sequence[str],
        config: GameConfig,
        rng,
        round_number: int = 1,
        verbose: bool = False,
    ) -> "GameRound":
        """
        Build a round from a raw word list.

        Args:
            words: Raw words from the word source
            config: Game configuration
            rng: Random source with `shuffle` and `choice` methods
            round_number: Counter for this round
            verbose: If True, print progress to stdout

        Returns:
            A new GameRound with a finished grid

        Raises:
            ValueError: If no word fits the configured board
        """
        known = parse_word_list(words, min_length=config.min_word_length)
        pool = [w for w in known if len(w) <= config.board_size]
        if not pool:
            raise ValueError(
                f"Word source has no words of {config.min_word_length}-{config.board_size} letters"
            )

        rng.shuffle(pool)
        candidates = pool[:config.max_candidates]

        if verbose:
            print(f"Round {round_number}: {len(known)} known words, candidates: {', '.join(candidates)}")

        result = fill_board(
            candidates,
            config.board_size,
            strategy=config.strategy,
            rng=rng,
            max_nodes=config.max_nodes,
            time_budget=config.time_budget,
            verbose=verbose,
        )

        return cls(
            round_number=round_number,
            grid=result.grid,
            min_word_length=config.min_word_length,
            candidate_words=candidates,
            known_words=frozenset(known),
            placed_words=list(result.placed_words),
            strategy=result.strategy,
            nodes_explored=result.nodes_explored,
            exhausted=result.exhausted,
        )

    @property
    def size(self) -> int:
        return self.grid.size

    def record_found(self, word: str, path: List[Coordinate]) -> PlacedWord:
        """Append a found word; repeat finds are recorded again."""
        placed = PlacedWord(word=word, positions=tuple(path))
        self.placed_words.append(placed)
        return placed

    def found_words(self) -> Set[str]:
        """Every distinct string readable off the grid."""
        return enumerate_words(self.grid, min_length=self.min_word_length)

    def word_bounds(self) -> Tuple[int, int]:
        """Rough (min, max) count of words a board of this size can hold."""
        cells = self.size * self.size
        return cells // 4, cells
