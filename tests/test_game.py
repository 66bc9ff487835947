"""
Tests for the game session layer.

Covers:
- Word list parsing and loading
- Configuration validation and YAML loading
- Round creation and atomic replacement
- Selection events and found-word recording
- Snapshots, stats and JSON export
- The command-line entry point
"""

import json
import random
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from wordgrid.board import Coordinate, enumerate_words
from wordgrid.game import (
    GameConfig,
    GameRound,
    WordSearchGame,
    file_word_source,
    load_words,
    parse_word_list,
)
from wordgrid.main import load_config, main


class SequenceRandom:
    """Deterministic random source: keeps list order, hands out letters in order."""

    def __init__(self, letters: str):
        self._letters = iter(letters)

    def choice(self, seq):
        return next(self._letters)

    def shuffle(self, items):
        pass


def make_game(words=("cat", "dog"), **config_kwargs) -> WordSearchGame:
    config_kwargs.setdefault("seed", 1)
    return WordSearchGame.create(word_source=Mock(return_value=list(words)), **config_kwargs)


def select(game: WordSearchGame, path):
    game.begin_selection(path[0])
    for coord in path[1:]:
        game.extend_selection(coord)
    return game.end_selection()


class TestParseWordList:
    """Test cases for word list parsing."""

    def test_normalizes_and_filters(self):
        """Words are stripped and uppercased; short and non-alphabetic entries are dropped."""
        lines = ["  cat ", "", "ox", "ice-cream", "dog\r", "b4d"]
        assert parse_word_list(lines) == ["CAT", "DOG"]

    def test_max_length(self):
        """Words longer than max_length are dropped."""
        assert parse_word_list(["cat", "lion", "tiger"], max_length=4) == ["CAT", "LION"]

    def test_dedup_keeps_first(self):
        """Duplicates by value are removed."""
        assert parse_word_list(["dog", "cat", "DOG"]) == ["DOG", "CAT"]

    def test_accented_letters(self):
        """Accented letters count as letters."""
        assert parse_word_list(["maçã"]) == ["MAÇÃ"]

    def test_drops_uncased_scripts(self):
        """Letters with no upper case cannot go on the grid and are dropped."""
        assert parse_word_list(["猫猫猫", "cat", "שלום"]) == ["CAT"]

    def test_input_not_mutated(self):
        """The source list is left untouched."""
        lines = ["cat", "dog"]
        parse_word_list(lines)
        assert lines == ["cat", "dog"]


class TestLoadWords:
    """Test cases for file word sources."""

    def test_load_words(self, tmp_path):
        """One word per line."""
        path = tmp_path / "words.txt"
        path.write_text("cat\ndog\n", encoding="utf-8")
        assert load_words(path) == ["cat", "dog"]

    def test_missing_file(self, tmp_path):
        """Missing word lists raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_words(tmp_path / "missing.txt")

    def test_file_word_source_rereads(self, tmp_path):
        """The source reads the file each time it is called."""
        path = tmp_path / "words.txt"
        path.write_text("cat\n", encoding="utf-8")
        source = file_word_source(path)
        assert source() == ["cat"]
        path.write_text("dog\n", encoding="utf-8")
        assert source() == ["dog"]


class TestGameConfig:
    """Test cases for configuration."""

    def test_defaults(self):
        """Defaults match the standard 4x4 game."""
        config = GameConfig()
        assert config.board_size == 4
        assert config.min_word_length == 3
        assert config.max_candidates == 10
        assert config.strategy == "exhaustive"

    def test_min_length_cannot_exceed_size(self):
        """Words must be able to fit on the board."""
        with pytest.raises(ValidationError):
            GameConfig(board_size=3, min_word_length=4)

    def test_min_length_at_least_three(self):
        """Words shorter than three letters are never allowed."""
        with pytest.raises(ValidationError):
            GameConfig(min_word_length=2)
        with pytest.raises(ValidationError):
            GameConfig(min_word_length=1)

    def test_unknown_strategy(self):
        """Only known strategies are accepted."""
        with pytest.raises(ValidationError):
            GameConfig(strategy="random")

    def test_load_config(self, tmp_path):
        """YAML configs are loaded into GameConfig."""
        path = tmp_path / "config.yaml"
        path.write_text("board_size: 5\nstrategy: greedy\nseed: 7\n")
        config = load_config(str(path))
        assert config.board_size == 5
        assert config.strategy == "greedy"
        assert config.seed == 7

    def test_load_empty_config(self, tmp_path):
        """An empty YAML file gives the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == GameConfig()

    def test_load_missing_config(self, tmp_path):
        """Missing config files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))


class TestGameRound:
    """Test cases for round creation."""

    def test_exact_board_with_scripted_random(self):
        """A scripted random source gives a known board."""
        config = GameConfig(strategy="greedy")
        current = GameRound.create(["cat", "dog"], config, SequenceRandom("ABCDEFGHIJ"))
        assert current.grid.rows() == ["CDAB", "AOCD", "TGEF", "GHIJ"]
        assert [p.word for p in current.placed_words] == ["CAT", "DOG"]

    def test_candidates_fit_the_board(self):
        """Candidates are limited to the board size and max_candidates."""
        words = ["cat", "dog", "elephant", "emu", "owl", "yak"]
        config = GameConfig(max_candidates=3, strategy="greedy")
        current = GameRound.create(words, config, random.Random(0))
        assert len(current.candidate_words) == 3
        assert "ELEPHANT" not in current.candidate_words
        assert "ELEPHANT" in current.known_words

    def test_no_usable_words(self):
        """A word list with nothing that fits is rejected."""
        with pytest.raises(ValueError):
            GameRound.create(["ox", "elephant"], GameConfig(), random.Random(0))

    def test_record_found_appends_duplicates(self):
        """Repeated finds are recorded each time."""
        current = GameRound.create(["cat"], GameConfig(), random.Random(0))
        before = len(current.placed_words)
        path = list(current.placed_words[0].positions)
        current.record_found("CAT", path)
        current.record_found("CAT", path)
        assert len(current.placed_words) == before + 2

    def test_word_bounds(self):
        """Bounds are a quarter of the cells and all cells."""
        current = GameRound.create(["cat"], GameConfig(), random.Random(0))
        assert current.word_bounds() == (4, 16)


class TestStartRound:
    """Test cases for starting rounds."""

    def test_start_round(self):
        """A round places both words and fills the grid."""
        game = make_game()
        current = game.start_round()
        assert game.current_round is current
        assert current.grid.is_full()
        assert {p.word for p in current.placed_words} == {"CAT", "DOG"}
        for placed in current.placed_words:
            assert "".join(current.grid[c] for c in placed.positions) == placed.word
        assert {"CAT", "DOG"} <= current.found_words()

    def test_new_round_replaces_old(self):
        """Each round replaces the previous one and clears the selection."""
        game = make_game()
        first = game.start_round()
        game.begin_selection(Coordinate(0, 0))
        second = game.start_round()
        assert game.current_round is second
        assert second is not first
        assert second.round_number == 2
        assert game.selection.cells == []
        assert game.rounds_started == 2

    def test_source_failure_keeps_previous_round(self):
        """A failing word source leaves the current round in place."""
        source = Mock(side_effect=[["cat", "dog"], OSError("word list unavailable")])
        game = WordSearchGame.create(word_source=source, seed=1)
        first = game.start_round()

        with pytest.raises(OSError):
            game.start_round()

        assert game.current_round is first
        assert game.rounds_started == 1

    def test_uncased_word_does_not_break_round(self):
        """A word in a script with no upper case is skipped, not fatal."""
        game = make_game(words=["猫猫猫", "cat", "dog"], strategy="greedy")
        current = game.start_round()
        assert "猫猫猫" not in current.candidate_words
        assert {p.word for p in current.placed_words} == {"CAT", "DOG"}

    def test_single_cell_tap_is_never_a_find(self):
        """One- and two-letter source words do not count as finds."""
        game = make_game(words=["a", "at", "cat"])
        current = game.start_round()
        assert all(len(w) >= 3 for w in current.known_words)
        assert select(game, [Coordinate(0, 0)]) is None
        assert all(len(w) >= 3 for w in current.found_words())

    def test_no_usable_words_publishes_nothing(self):
        """An empty word list fails without publishing a round."""
        game = make_game(words=["ox"])
        with pytest.raises(ValueError):
            game.start_round()
        assert game.current_round is None

    def test_no_word_source(self):
        """Starting without a word source is an error."""
        game = WordSearchGame.create()
        with pytest.raises(ValueError):
            game.start_round()

    def test_words_path_source(self, tmp_path):
        """words_path in the config provides the word source."""
        path = tmp_path / "words.txt"
        path.write_text("cat\ndog\n", encoding="utf-8")
        game = WordSearchGame.create(words_path=str(path), seed=2)
        current = game.start_round()
        assert set(current.candidate_words) == {"CAT", "DOG"}

    def test_reentry_rejected(self):
        """A round cannot start while another is being generated."""
        game = WordSearchGame.create(seed=1)

        def reentrant_source():
            game.start_round()
            return ["cat"]

        game.word_source = reentrant_source
        with pytest.raises(RuntimeError):
            game.start_round()
        assert game.current_round is None

    def test_seeded_games_match(self):
        """Two games with the same seed produce the same board."""
        first = make_game(seed=11).start_round()
        second = make_game(seed=11).start_round()
        assert first.grid.rows() == second.grid.rows()

    def test_verbose_prints_progress(self, capsys):
        """Verbose mode prints round progress."""
        make_game().start_round(verbose=True)
        out = capsys.readouterr().out
        assert "Round 1" in out


class TestSelectionEvents:
    """Test cases for selection routing and word checks."""

    def test_winning_selection_appends_record(self):
        """Selecting a known word appends one record with the selected path."""
        game = make_game()
        current = game.start_round()
        path = list(current.placed_words[0].positions)
        before = len(current.placed_words)

        found = select(game, path)

        assert found is not None
        assert found.word == current.placed_words[0].word
        assert list(found.positions) == path
        assert len(current.placed_words) == before + 1
        assert current.placed_words[-1] is found

    def test_reverse_path_is_not_a_win(self):
        """Reading a placed word backwards does not match it."""
        game = make_game(words=["abc"])
        current = game.start_round()
        path = list(reversed(current.placed_words[0].positions))
        before = len(current.placed_words)

        assert select(game, path) is None
        assert len(current.placed_words) == before

    def test_losing_selection_leaves_list_unchanged(self):
        """A string outside the known words adds nothing."""
        game = make_game()
        current = game.start_round()
        before = len(current.placed_words)

        assert select(game, [Coordinate(0, 0)]) is None
        assert select(game, [Coordinate(0, 0), Coordinate(1, 1)]) is None
        assert len(current.placed_words) == before

    def test_duplicate_find_appends_again(self):
        """Finding the same word twice records it twice."""
        game = make_game()
        current = game.start_round()
        path = list(current.placed_words[0].positions)
        before = len(current.placed_words)

        select(game, path)
        select(game, path)
        assert len(current.placed_words) == before + 2

    def test_end_without_begin(self):
        """Ending with no drag in progress does nothing."""
        game = make_game()
        game.start_round()
        assert game.end_selection() is None

    def test_begin_without_round(self):
        """Selecting before a round starts is an error."""
        game = make_game()
        with pytest.raises(ValueError):
            game.begin_selection(Coordinate(0, 0))

    def test_begin_off_grid(self):
        """Selections must start on the grid."""
        game = make_game()
        game.start_round()
        with pytest.raises(ValueError):
            game.begin_selection(Coordinate(4, 0))

    def test_extend_off_grid_ignored(self):
        """Moves off the grid are ignored."""
        game = make_game()
        game.start_round()
        game.begin_selection(Coordinate(3, 3))
        assert game.extend_selection(Coordinate(4, 4)) is False
        assert game.selection.cells == [Coordinate(3, 3)]

    def test_extend_without_round(self):
        """Moves before any round are ignored."""
        assert make_game().extend_selection(Coordinate(0, 0)) is False


class TestSnapshotsAndInfo:
    """Test cases for read-only views and stats."""

    def test_snapshot(self):
        """Snapshots show the grid, selection and placed words."""
        game = make_game()
        current = game.start_round()
        game.begin_selection(Coordinate(0, 0))
        game.extend_selection(Coordinate(0, 1))

        snap = game.snapshot()
        assert snap.round_number == 1
        assert list(snap.rows) == current.grid.rows()
        assert snap.selection == (Coordinate(0, 0), Coordinate(0, 1))
        assert snap.selection_text == snap.rows[0][:2]
        assert len(snap.placed_words) == len(current.placed_words)

    def test_snapshot_is_frozen(self):
        """Snapshots cannot be modified."""
        game = make_game()
        game.start_round()
        snap = game.snapshot()
        with pytest.raises(ValidationError):
            snap.round_number = 5

    def test_snapshot_does_not_track_later_finds(self):
        """A snapshot is a copy, not a live view."""
        game = make_game()
        current = game.start_round()
        snap = game.snapshot()
        select(game, list(current.placed_words[0].positions))
        assert len(snap.placed_words) == len(current.placed_words) - 1

    def test_info(self):
        """Info reports candidates, counts and bounds."""
        game = make_game()
        current = game.start_round()
        info = game.info()
        assert sorted(info.candidate_words) == ["CAT", "DOG"]
        assert info.placed_count == len(current.placed_words)
        assert info.found_word_count == len(enumerate_words(current.grid))
        assert info.min_words == 4
        assert info.max_words == 16

    def test_get_state(self):
        """State summary reflects the session."""
        game = make_game()
        assert game.get_state()["round_number"] is None
        game.start_round()
        state = game.get_state()
        assert state["rounds_started"] == 1
        assert state["round_number"] == 1
        assert state["selection_active"] is False

    def test_save_result(self, tmp_path):
        """The current round is exported as JSON."""
        game = make_game()
        current = game.start_round()
        path = tmp_path / "out" / "board.json"
        game.save_result(path)

        data = json.loads(path.read_text())
        assert data["rows"] == current.grid.rows()
        assert data["round_number"] == 1
        assert {p["word"] for p in data["placed_words"]} == {"CAT", "DOG"}
        assert "CAT" in data["found_words"]
        assert data["config"]["board_size"] == 4


class TestMain:
    """Test cases for the command-line entry point."""

    def test_main_writes_board(self, tmp_path, capsys):
        """The CLI builds a board and saves it."""
        words = tmp_path / "words.txt"
        words.write_text("cat\ndog\nemu\n", encoding="utf-8")
        output = tmp_path / "board.json"

        code = main(["--words", str(words), "--seed", "3", "--output", str(output)])

        assert code == 0
        assert output.exists()
        out = capsys.readouterr().out
        assert "Board Summary" in out

    def test_main_with_config(self, tmp_path):
        """Config files are honored."""
        words = tmp_path / "words.txt"
        words.write_text("cat\ndog\n", encoding="utf-8")
        config = tmp_path / "config.yaml"
        config.write_text(f"board_size: 5\nstrategy: greedy\nwords_path: {words}\n")
        output = tmp_path / "board.json"

        assert main([str(config), "-o", str(output)]) == 0
        data = json.loads(output.read_text())
        assert len(data["rows"]) == 5
        assert data["strategy"] == "greedy"

    def test_main_requires_words(self, capsys):
        """Without a word list the CLI fails."""
        assert main([]) == 1
        assert "word list" in capsys.readouterr().err

    def test_main_bad_word_file(self, tmp_path, capsys):
        """A missing word list fails the round start."""
        code = main(["--words", str(tmp_path / "missing.txt"), "-o", str(tmp_path / "b.json")])
        assert code == 1
        assert "Error starting round" in capsys.readouterr().err
