"""Command line entry point: read move sequences and draw the resulting cube."""

from __future__ import annotations

import argparse
import sys

from .moves import parse_moves
from .render import export_state_to_image
from .state import State


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Read move sequences from standard input, one per line, "
        "and draw the cube each produces from the solved state."
    )
    parser.add_argument(
        "-o",
        "--output",
        default="out.png",
        help="image file written after each line (default: out.png)",
    )
    return parser


def main(argv=None) -> int:
    """Render the cube for each line of moves read from standard input."""
    args = _build_parser().parse_args(argv)
    for line in sys.stdin:
        line = line.removesuffix("\n")
        try:
            moves = parse_moves(line)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        state = State()
        state.apply(moves)
        export_state_to_image(state, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())