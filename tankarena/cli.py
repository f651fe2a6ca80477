"""Command-line entry point: play a game on a map file."""

from __future__ import annotations

import sys

from tankarena.board import BoardFormatError
from tankarena.controller import MyTankAlgorithmFactory
from tankarena.game import GameManager
from tankarena.player import MyPlayerFactory


def main(argv: list[str] | None = None) -> int:
    """Run a game on the given map; results go to '<map>.out'."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: tanks_game <game_board_input_file>", file=sys.stderr)
        return 1
    path = args[0]

    try:
        game = GameManager(MyPlayerFactory(), MyTankAlgorithmFactory())
        try:
            game.read_board(path)
        except (BoardFormatError, OSError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            print(f"Failed to read board from file: {path}", file=sys.stderr)
            return 2
        game.run()
        print("Game completed successfully!")
    except Exception as exc:  # noqa: BLE001 - report any failure as an exit code
        print(f"Error: {exc}", file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())