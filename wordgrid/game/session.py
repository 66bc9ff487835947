import json
import random
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..board.geometry import in_bounds
from ..board.models import Coordinate, PlacedWord
from ..board.selection import SelectionPath, is_winning_word, resolve
from .models import BoardInfo, BoardSnapshot, GameConfig, RoundResult
from .round import GameRound
from .words import file_word_source


WordSource = Callable[[], Iterable[str]]


class WordSearchGame(BaseModel):
    """
    Top-level session for the word-search game.

    Owns the active round and the in-progress selection. Rounds are built
    off to the side and swapped in whole, so a failed round start leaves the
    previous round in place. Interaction events arrive as typed coordinates.

    Attributes:
        config: Game configuration
        word_source: Zero-argument callable returning raw words
        current_round: The round being played, if any
        selection: The drag in progress
        rounds_started: Number of rounds successfully started
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    word_source: Optional[WordSource] = None
    current_round: Optional[GameRound] = None
    selection: SelectionPath = Field(default_factory=SelectionPath)
    rounds_started: int = 0
    _rng: Any = None
    _generating: bool = False

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and default word source."""
        if self._rng is None:
            self._rng = random.Random(self.config.seed)
        if self.word_source is None and self.config.words_path:
            self.word_source = file_word_source(self.config.words_path)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        word_source: Optional[WordSource] = None,
        rng: Any = None,
        **config_kwargs: Any
    ) -> "WordSearchGame":
        """
        Factory method to create a game session.

        Args:
            config: Optional GameConfig instance
            word_source: Callable returning raw words (defaults to config.words_path)
            rng: Random source with `shuffle` and `choice` (defaults to a seeded random.Random)
            **config_kwargs: Config parameters if config not provided

        Returns:
            A WordSearchGame with no round started yet
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        game = cls(config=config, word_source=word_source)
        if rng is not None:
            game._rng = rng
        return game

    def _require_round(self) -> GameRound:
        if self.current_round is None:
            raise ValueError("No round in progress. Call start_round() first.")
        return self.current_round

    def start_round(self, verbose: bool = False) -> GameRound:
        """
        Fetch words, build a finished board and make it the current round.

        Any failure (word source error, no usable words) propagates and the
        previous round, if any, stays current.

        Raises:
            RuntimeError: If called while a round is already being generated
            ValueError: If there is no word source or it yields no usable words
        """
        if self._generating:
            raise RuntimeError("A round is already being generated")
        if self.word_source is None:
            raise ValueError("No word source configured")

        self._generating = True
        try:
            words = list(self.word_source())
            new_round = GameRound.create(
                words,
                self.config,
                self._rng,
                round_number=self.rounds_started + 1,
                verbose=verbose,
            )
        finally:
            self._generating = False

        self.current_round = new_round
        self.rounds_started += 1
        self.selection = SelectionPath()

        if verbose:
            print(f"Round {new_round.round_number} ready: "
                  f"{len(new_round.placed_words)}/{len(new_round.candidate_words)} words placed")

        return new_round

    def begin_selection(self, coord: Coordinate) -> None:
        """Pointer down on `coord`: start a new selection there."""
        current = self._require_round()
        coord = Coordinate(*coord)
        if not in_bounds(coord, current.size):
            raise ValueError(f"Cell {tuple(coord)} is outside the {current.size}x{current.size} grid")
        self.selection.begin(coord)

    def extend_selection(self, coord: Coordinate) -> bool:
        """Pointer enters `coord`: grow the selection if the move is legal."""
        if self.current_round is None:
            return False
        coord = Coordinate(*coord)
        if not in_bounds(coord, self.current_round.size):
            return False
        return self.selection.extend(coord)

    def end_selection(self) -> Optional[PlacedWord]:
        """
        Pointer up: check the selected string and clear the selection.

        Returns:
            The new PlacedWord record if the selection spelled a known word,
            otherwise None
        """
        if not self.selection.active:
            return None

        current = self._require_round()
        path = self.selection.end()
        text = resolve(current.grid, path)

        if is_winning_word(text, current.known_words):
            return current.record_found(text, path)
        return None

    def snapshot(self) -> BoardSnapshot:
        """Read-only view of the board for rendering."""
        current = self._require_round()
        return BoardSnapshot(
            round_number=current.round_number,
            rows=tuple(current.grid.rows()),
            selection=tuple(self.selection.cells),
            selection_text=self.selection.text(current.grid),
            placed_words=tuple(current.placed_words),
        )

    def info(self) -> BoardInfo:
        """Informational stats for the current board."""
        current = self._require_round()
        min_words, max_words = current.word_bounds()
        return BoardInfo(
            candidate_words=list(current.candidate_words),
            placed_count=len(current.placed_words),
            found_word_count=len(current.found_words()),
            min_words=min_words,
            max_words=max_words,
        )

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Useful for logging.
        """
        return {
            "rounds_started": self.rounds_started,
            "round_number": self.current_round.round_number if self.current_round else None,
            "selection": [tuple(c) for c in self.selection.cells],
            "selection_active": self.selection.active,
            "placed_count": len(self.current_round.placed_words) if self.current_round else 0,
        }

    def get_result(self) -> RoundResult:
        """Export the current round."""
        current = self._require_round()
        return RoundResult(
            config=self.config,
            round_number=current.round_number,
            rows=current.grid.rows(),
            candidate_words=list(current.candidate_words),
            placed_words=list(current.placed_words),
            found_words=sorted(current.found_words()),
            strategy=current.strategy,
            nodes_explored=current.nodes_explored,
            exhausted=current.exhausted,
            created_at=current.created_at.isoformat(),
        )

    def save_result(self, path: str | Path) -> None:
        """Save the current round to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        result = self.get_result()
        with open(path, "w") as f:
            json.dump(result.model_dump(mode="json"), f, indent=2)
