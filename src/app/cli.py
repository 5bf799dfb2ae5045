from __future__ import annotations

import argparse
import sys

from commit_reveal import EntropyFailure
from game import play_round
from help_table import render_help
from moves import MoveSet, UsageError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fair-rps",
        description="Provably fair rock-paper-scissors with any odd number of moves",
        epilog="Put -- before the moves if a move name starts with a dash, e.g. fair-rps -- -x -y -z",
    )
    parser.add_argument("moves", nargs="*", help="Move names in cyclic order, e.g. rock paper scissors")
    parser.add_argument("--table", action="store_true", help="Print the outcome table for the moves and exit")
    args = parser.parse_args(argv)

    try:
        moves = MoveSet.parse(args.moves)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Example: {exc.example}", file=sys.stderr)
        return 1

    if args.table:
        print(render_help(moves))
        return 0

    try:
        play_round(moves)
    except EntropyFailure as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # Interrupted before a move was locked in: nothing is disclosed.
        print()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
