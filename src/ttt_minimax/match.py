"""
Game loop: console moves for humans, search for AIs, N games in a row.

Output goes through a `write` callable (print by default, tqdm.write under a
progress bar) and human input through a `read` callable (input by default).
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import numpy as np
from tqdm.auto import tqdm

from .config import MatchConfig
from .errors import GameAborted
from .game import SYMBOLS, X, O, GameState, new_game, seat_name, to_index
from .minimax import choose_move

Reader = Callable[[], str]
Writer = Callable[[str], None]


@dataclass
class GameResult:
    """Outcome of one game."""
    winner: Optional[int]  # X, O, or None for a tie
    moves: List[int] = field(default_factory=list)

    @property
    def plies(self) -> int:
        return len(self.moves)


@dataclass
class MatchSummary:
    """Tally over a run of games."""
    results: List[GameResult] = field(default_factory=list)

    @property
    def games(self) -> int:
        return len(self.results)

    @property
    def x_wins(self) -> int:
        return sum(1 for r in self.results if r.winner == X)

    @property
    def o_wins(self) -> int:
        return sum(1 for r in self.results if r.winner == O)

    @property
    def ties(self) -> int:
        return sum(1 for r in self.results if r.winner is None)

    @property
    def mean_plies(self) -> float:
        if not self.results:
            return 0.0
        return float(np.mean([r.plies for r in self.results]))

    def report(self, write: Writer = print):
        n = max(1, self.games)
        write("")
        write(f"=== Results ({self.games} games) ===")
        write(f"  X wins: {self.x_wins / n:.2%}")
        write(f"  O wins: {self.o_wins / n:.2%}")
        write(f"  Ties:   {self.ties / n:.2%}")
        write(f"  Avg length: {self.mean_plies:.2f} plies")


def draw_board(state: GameState, write: Writer = print):
    """Pretty print board."""
    for row in range(3):
        write("|".join(SYMBOLS[state.cell(col, row)] for col in range(3)))
        if row < 2:
            write("-+-+-")


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """Parse 'x,y' into (col, row). Returns None if malformed."""
    parts = text.strip().split(",")
    if len(parts) != 2:
        return None
    try:
        col, row = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return col, row


def ask_for_move(state: GameState, read: Reader = input, write: Writer = print) -> int:
    """
    Prompt until the human enters a legal move, then play it.

    Returns:
        Index of the square played

    Raises:
        GameAborted: input closed or interrupted
    """
    while True:
        write("Please enter your move like 'x,y':")
        try:
            line = read()
        except (EOFError, KeyboardInterrupt):
            raise GameAborted("Game aborted") from None

        move = parse_move(line)
        if move is not None and state.apply_move(*move):
            return to_index(*move)
        write("You entered an invalid move")


def play_game(
    state: GameState,
    rng: np.random.Generator,
    verbose: bool = True,
    read: Reader = input,
    write: Writer = print,
) -> GameResult:
    """
    Play state to completion.

    The closing line ("Player x has won!" or "Tie!") is written even when
    verbose is off.
    """
    if state.has_winner() or state.is_draw():
        raise ValueError("game is already over")

    moves: List[int] = []
    while True:
        seat = state.turn
        config = state.config_for(seat)

        if verbose:
            write(f"It is Player {seat_name(seat)}'s turn")

        if config.is_ai:
            if verbose:
                write(
                    f"AI (Depth: {config.depth}, rand: {config.tie_randomness}, "
                    f"bad: {config.blunder_rate}) is thinking..."
                )
            moves.append(choose_move(state, seat, rng))
        else:
            moves.append(ask_for_move(state, read, write))

        if verbose:
            draw_board(state, write)

        if state.has_winner():
            write(f"Player {seat_name(seat)} has won!")
            return GameResult(winner=seat, moves=moves)
        if not state.legal_moves():
            write("Tie!")
            return GameResult(winner=None, moves=moves)


def play_match(
    config: MatchConfig,
    rng: Optional[np.random.Generator] = None,
    read: Reader = input,
    write: Optional[Writer] = None,
) -> MatchSummary:
    """
    Play config.games games from fresh boards.

    Non-verbose runs show a progress bar and route game output through
    tqdm.write so the bar stays intact.
    """
    config.validate()
    if rng is None:
        rng = np.random.default_rng(config.seed)

    summary = MatchSummary()
    if config.verbose:
        out = write or print
        games = range(config.games)
    else:
        out = write or tqdm.write
        games = tqdm(range(config.games), desc="Games", leave=False, disable=config.games == 1)

    for _ in games:
        state = new_game(config.x, config.o)
        summary.results.append(play_game(state, rng, verbose=config.verbose, read=read, write=out))

    if config.games > 1:
        summary.report(out)
    return summary
