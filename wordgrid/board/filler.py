"""
Board filler: place a candidate word list on an empty grid, then back-fill.

Two strategies are available:

- greedy: each word takes the first legal placement in scan order; words
  with no legal placement are skipped.
- exhaustive: backtracking search for the assignment that places the most
  words. The search is bounded by a node budget and an optional time budget;
  when either runs out the best assignment found so far is used.

Both strategies permit overlapping placements that agree on shared letters,
and both finish by filling every remaining cell with a random letter.
"""

import random
import string
import time
from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from .grid import Grid
from .models import PlacedWord
from .placement import commit, find_placements


Strategy = Literal["greedy", "exhaustive"]

ALPHABET = string.ascii_uppercase
DEFAULT_MAX_NODES = 20_000


class FillResult(BaseModel):
    """Outcome of a board fill."""
    grid: Grid
    placed_words: List[PlacedWord] = Field(default_factory=list)
    strategy: Strategy
    nodes_explored: int = 0
    exhausted: bool = False  # True if the search budget ran out


def fill_random(grid: Grid, rng) -> int:
    """Fill every empty cell, row-major, with a letter from `rng.choice`. Returns the count."""
    empty = grid.empty_cells()
    for coord in empty:
        grid.set(coord, rng.choice(ALPHABET))
    return len(empty)


def fill_greedy(
    words: Sequence[str],
    size: int,
    rng,
    verbose: bool = False,
) -> FillResult:
    """Place words first-fit in input order, skipping any that do not fit."""
    grid = Grid(size=size)
    placed: List[PlacedWord] = []

    for word in words:
        placement = next(find_placements(grid, word), None)
        if placement is None:
            if verbose:
                print(f"  skip {word}: no legal placement")
            continue

        origin, direction, positions = placement
        commit(grid, word, positions)
        placed.append(PlacedWord(word=word, positions=tuple(positions)))
        if verbose:
            print(f"  place {word} at {tuple(origin)} going {direction.name}")

    fill_random(grid, rng)
    return FillResult(grid=grid, placed_words=placed, strategy="greedy")


class _ExhaustiveSearch:
    """Depth-first search over (word, cell, direction) choices, in input order."""

    def __init__(self, words: Sequence[str], max_nodes: int, time_budget: Optional[float]):
        self.words = list(words)
        self.max_nodes = max_nodes
        self.deadline = time.monotonic() + time_budget if time_budget is not None else None
        self.best: List[PlacedWord] = []
        self.nodes = 0
        self.exhausted = False

    @property
    def done(self) -> bool:
        return self.exhausted or len(self.best) == len(self.words)

    def _out_of_budget(self) -> bool:
        if self.nodes > self.max_nodes:
            return True
        return self.deadline is not None and time.monotonic() > self.deadline

    def run(self, grid: Grid) -> List[PlacedWord]:
        self._backtrack(0, grid, [])
        return self.best

    def _backtrack(self, idx: int, grid: Grid, placed: List[PlacedWord]) -> None:
        self.nodes += 1
        if self._out_of_budget():
            self.exhausted = True
            return

        # Strictly greater, so ties keep the first assignment found
        if len(placed) > len(self.best):
            self.best = list(placed)

        if idx >= len(self.words):
            return
        if len(placed) + len(self.words) - idx <= len(self.best):
            return

        word = self.words[idx]
        for _, _, positions in find_placements(grid, word):
            branch = grid.copy()
            commit(branch, word, positions)
            self._backtrack(idx + 1, branch, placed + [PlacedWord(word=word, positions=tuple(positions))])
            if self.done:
                return

        # Leaving this word out may let more of the later words fit
        self._backtrack(idx + 1, grid, placed)


def fill_exhaustive(
    words: Sequence[str],
    size: int,
    rng,
    max_nodes: int = DEFAULT_MAX_NODES,
    time_budget: Optional[float] = None,
    verbose: bool = False,
) -> FillResult:
    """
    Place the largest number of words the search can find.

    Exponential in the number of words; keep the candidate list short
    (around 10 words on a 4x4 grid).
    """
    search = _ExhaustiveSearch(words, max_nodes=max_nodes, time_budget=time_budget)
    best = search.run(Grid(size=size))

    if verbose:
        print(f"  explored {search.nodes} nodes, best assignment places {len(best)}/{len(words)} words")
        if search.exhausted:
            print("  search budget exhausted, using best assignment found so far")

    grid = Grid(size=size)
    for placed_word in best:
        commit(grid, placed_word.word, list(placed_word.positions))
    fill_random(grid, rng)

    return FillResult(
        grid=grid,
        placed_words=best,
        strategy="exhaustive",
        nodes_explored=search.nodes,
        exhausted=search.exhausted,
    )


def fill_board(
    words: Sequence[str],
    size: int,
    strategy: Strategy = "exhaustive",
    rng=None,
    max_nodes: int = DEFAULT_MAX_NODES,
    time_budget: Optional[float] = None,
    verbose: bool = False,
) -> FillResult:
    """
    Build a finished grid from a candidate word list.

    Args:
        words: Candidate words, uppercase, in the order they should be tried
        size: Grid dimension
        strategy: "greedy" or "exhaustive"
        rng: Random source with a `choice` method (defaults to random.Random())
        max_nodes: Node budget for the exhaustive search
        time_budget: Optional wall-clock budget in seconds for the exhaustive search
        verbose: If True, print placement progress to stdout

    Returns:
        FillResult with a grid that has no empty cells
    """
    if rng is None:
        rng = random.Random()

    if strategy == "greedy":
        return fill_greedy(words, size, rng, verbose=verbose)
    if strategy == "exhaustive":
        return fill_exhaustive(
            words, size, rng, max_nodes=max_nodes, time_budget=time_budget, verbose=verbose
        )
    raise ValueError(f"Unknown fill strategy: {strategy!r}")
