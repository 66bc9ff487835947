"""
Main entry point for generating word-search boards.

Usage:
    python -m wordgrid.main config.yaml
    python -m wordgrid.main config.yaml --output results/board.json --verbose
    python -m wordgrid.main --words words.txt --seed 7
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

import yaml

from .board import render_grid
from .game import GameConfig, WordSearchGame


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a word-search board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  board_size: 4
  max_candidates: 10
  strategy: exhaustive
  max_nodes: 20000
  seed: 42
  words_path: words.txt
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--words",
        help="Path to a word list, one word per line (overrides words_path)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides the config seed)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the board JSON (default: results/board_<timestamp>.json)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {}
        if args.words:
            overrides["words_path"] = args.words
        if args.seed is not None:
            overrides["seed"] = args.seed
        if overrides:
            config = GameConfig(**{**config.model_dump(), **overrides})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if not config.words_path:
        print("Error: a word list is required (set words_path or pass --words)", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"board_{timestamp}.json"

    if args.verbose:
        print(f"Config: {args.config or '(defaults)'}")
        print(f"Words: {config.words_path}")
        print(f"Output: {output_path}")
        print()

    game = WordSearchGame.create(config=config)

    try:
        current = game.start_round(verbose=args.verbose)
    except Exception as e:
        print(f"Error starting round: {e}", file=sys.stderr)
        return 1

    game.save_result(output_path)
    info = game.info()

    if args.verbose:
        print()
        print(f"Results saved to: {output_path}")

    # Print summary
    print()
    print(render_grid(current.grid))
    print()
    print("=== Board Summary ===")
    print(f"Candidates: {', '.join(info.candidate_words)}")
    print(f"Placed ({info.placed_count}): {', '.join(p.word for p in current.placed_words)}")
    print(f"Readable strings: {info.found_word_count}")
    print(f"Word bounds: min {info.min_words}, max {info.max_words}")
    if current.exhausted:
        print(f"Search budget exhausted after {current.nodes_explored} nodes")

    return 0


if __name__ == "__main__":
    sys.exit(main())
