"""
Main entry point for playing wordgrid in a terminal.

Usage:
    python -m wordgrid.main
    python -m wordgrid.main config.yaml --seed 42 --output results/game.json --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import yaml

from .environment import Game, GameConfig, ConsolePresenter, parse_command, HELP_TEXT

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return GameConfig(**(data or {}))


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )


def play(game: Game, presenter: ConsolePresenter, lines: TextIO, prompt: bool = True) -> None:
    """
    Run the command loop until the player quits or input runs out.

    Args:
        game: A started game
        presenter: The console presenter attached to the game
        lines: Source of commands, one per line
        prompt: Print a prompt before reading each line
    """
    presenter.draw_board()
    while True:
        if prompt:
            print("> ", end="", file=presenter.out, flush=True)
        line = lines.readline()
        if not line:
            break
        if not line.strip():
            continue

        command = parse_command(line)

        if command.action == "QUIT":
            break
        elif command.action == "CLICK":
            result = game.on_tile_clicked(command.index)
            if result.valid:
                presenter.draw_board()
        elif command.action == "SUBMIT":
            result = game.on_submit_clicked()
            if result.valid:
                presenter.draw_board()
        elif command.action == "BOARD":
            presenter.draw_board()
        elif command.action == "HISTORY":
            presenter.draw_history()
        elif command.action == "HELP":
            print(HELP_TEXT, file=presenter.out)
        else:
            presenter.show_error(command.error)


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description="Play a 5x5 word-finding game in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  seed: 42
  log_level: INFO
  # board: "CATSX ABCDE FGHIJ KLMNO PQRST"
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for rolling the board"
    )
    parser.add_argument(
        "--board",
        help="Play a fixed board given as 25 letters (Q stands for Qu)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the game summary as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {}
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.board:
            overrides["board"] = args.board
        if args.verbose:
            overrides["log_level"] = "DEBUG"
        if overrides:
            config = GameConfig(**{**config.model_dump(), **overrides})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)

    presenter = ConsolePresenter()
    try:
        game = Game.create(config=config, presenter=presenter)
    except ValueError as e:
        print(f"Error creating board: {e}", file=sys.stderr)
        return 1

    game.start()
    print("Type 'help' for a list of commands.")

    try:
        play(game, presenter, sys.stdin, prompt=sys.stdin.isatty())
    except KeyboardInterrupt:
        print("\nGame interrupted by user")

    result = game.get_result()

    if args.output:
        game.save_result(args.output)
        logger.info("Results saved to %s", args.output)

    # Print summary
    print()
    print("=== Game Summary ===")
    presenter.draw_history()
    print(f"Words: {result.words_submitted}")
    print(f"Rejected moves: {result.rejected_moves}")
    print(f"Duration: {result.duration_seconds:.2f}s")

    return 0


if __name__ == "__main__":
    sys.exit(main())
