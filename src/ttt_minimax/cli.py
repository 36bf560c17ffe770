"""
Command line front end.

Usage:
    ttt-minimax -x -o                      # AI vs AI, one game
    ttt-minimax -o --o-depth 2             # Human X vs shallow AI O
    ttt-minimax -x -o -n --it 1000 --x-bad 3
"""

import argparse
from typing import List, Optional, Tuple

from .config import UNLIMITED_DEPTH, MatchConfig, SeatConfig
from .errors import ConfigError, GameAborted
from .match import play_match

# Accepted ranges; values outside them parse as missing
DEPTH_RANGE = (-128, 127)
KNOB_RANGE = (0, 255)
ITERATIONS_RANGE = (-2**31, 2**31 - 1)


def lenient_int(value: Optional[str], default: int, bounds: Tuple[int, int]) -> int:
    """Parse an int, falling back to default when missing, unparseable or out of bounds."""
    if value is None:
        return default
    try:
        n = int(value)
    except ValueError:
        return default
    low, high = bounds
    if not low <= n <= high:
        return default
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ttt-minimax", description="Tictactoe min-max AI")
    parser.add_argument("-n", "--no-verbose", action="store_true", help="Only print the final line of a game")
    parser.add_argument("--it", type=str, default=None, help="How many games to play")
    parser.add_argument("-x", "--x-ai", action="store_true", help="Is Player X an AI?")
    parser.add_argument("-o", "--o-ai", action="store_true", help="Is Player O an AI?")
    for seat in ("x", "o"):
        upper = seat.upper()
        parser.add_argument(f"--{seat}-depth", type=str, default=None,
                            help=f"How deep will {upper} search? (Default: infinite)")
        parser.add_argument(f"--{seat}-rand", type=str, default=None,
                            help=f"How often should {upper} choose a move just as good? (0 = never, 1 = 50%%, 2 = 33%%, etc)")
        parser.add_argument(f"--{seat}-bad", type=str, default=None,
                            help=f"How often should {upper} choose a random move? (0 = never, 1 = 50%%, 2 = 33%%, etc)")
        parser.add_argument(f"--{seat}-tie-break", choices=["walk", "uniform"], default="walk",
                            help=f"How {upper} breaks ties between equally good moves")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    return parser


def seat_from_args(args: argparse.Namespace, seat: str) -> SeatConfig:
    return SeatConfig(
        is_ai=getattr(args, f"{seat}_ai"),
        depth=lenient_int(getattr(args, f"{seat}_depth"), UNLIMITED_DEPTH, DEPTH_RANGE),
        tie_randomness=lenient_int(getattr(args, f"{seat}_rand"), 0, KNOB_RANGE),
        blunder_rate=lenient_int(getattr(args, f"{seat}_bad"), 0, KNOB_RANGE),
        tie_break=getattr(args, f"{seat}_tie_break"),
    )


def config_from_args(args: argparse.Namespace) -> MatchConfig:
    return MatchConfig(
        x=seat_from_args(args, "x"),
        o=seat_from_args(args, "o"),
        games=lenient_int(args.it, 1, ITERATIONS_RANGE),
        verbose=not args.no_verbose,
        seed=args.seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    try:
        if config.games < 0:
            # Seats are still checked, but a negative count plays nothing
            MatchConfig(x=config.x, o=config.o).validate()
            return 0
        config.validate()
    except ConfigError as e:
        print(e)
        return 0

    try:
        play_match(config)
    except GameAborted:
        print("\nGame aborted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
