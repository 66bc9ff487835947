"""Word list loading and parsing."""

from functools import partial
from pathlib import Path
from typing import Callable, Iterable, List, Optional


def parse_word_list(
    lines: Iterable[str],
    min_length: int = 3,
    max_length: Optional[int] = None,
) -> List[str]:
    """
    Normalize raw word-list lines into usable grid words.

    Words are stripped and uppercased. Blank lines, entries containing
    anything other than cased letters (the only cells a Grid accepts),
    and words outside the length range are dropped.
    Duplicates are removed, keeping the first occurrence.
    """
    seen = set()
    words: List[str] = []

    for line in lines:
        word = line.strip().upper()
        if not word or not (word.isalpha() and word.isupper()):
            continue
        if len(word) < min_length:
            continue
        if max_length is not None and len(word) > max_length:
            continue
        if word in seen:
            continue
        seen.add(word)
        words.append(word)

    return words


def load_words(path: str | Path) -> List[str]:
    """Read a UTF-8 word list, one word per line."""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


def file_word_source(path: str | Path) -> Callable[[], List[str]]:
    """Word source that re-reads `path` each time a round starts."""
    return partial(load_words, path)
