"""
TicTacToe game rules and state management.

Board representation: list[int] of length 9, row-major (index = row * 3 + col)
  - 0: empty
  - +1: X
  - -1: O

Seat: +1 (X) or -1 (O). X always moves first.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .config import SeatConfig

EMPTY = 0
X = +1
O = -1

SYMBOLS = {EMPTY: " ", X: "x", O: "o"}

# Winning lines, scanned in this order (rows, columns, diagonals)
WIN_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
]


def seat_name(seat: int) -> str:
    return SYMBOLS[seat]


def opponent(seat: int) -> int:
    return -seat


def to_index(col: int, row: int) -> int:
    """Convert (col, row) to flat index."""
    return row * 3 + col


@dataclass
class GameState:
    """
    One board, the seat to move, and both seats' configuration.

    The live game mutates its state in place; search works on copies.
    """
    board: List[int] = field(default_factory=lambda: [EMPTY] * 9)
    turn: int = X
    x: SeatConfig = field(default_factory=SeatConfig)
    o: SeatConfig = field(default_factory=SeatConfig)

    def config_for(self, seat: int) -> SeatConfig:
        return self.x if seat == X else self.o

    def cell(self, col: int, row: int) -> int:
        return self.board[to_index(col, row)]

    def copy(self) -> "GameState":
        # Seat configs are frozen, so only the board needs copying
        return GameState(board=self.board[:], turn=self.turn, x=self.x, o=self.o)

    def apply_move(self, col: int, row: int) -> bool:
        """
        Place the mover's mark at (col, row) and pass the turn.

        Returns:
            False, leaving the state untouched, if the square is off the
            board or occupied; True otherwise.
        """
        if not (0 <= col <= 2 and 0 <= row <= 2):
            return False
        idx = to_index(col, row)
        if self.board[idx] != EMPTY:
            return False
        self.board[idx] = self.turn
        self.turn = opponent(self.turn)
        return True

    def play(self, index: int) -> bool:
        """Index form of apply_move."""
        if not 0 <= index < 9:
            return False
        return self.apply_move(index % 3, index // 3)

    def legal_moves(self) -> List[int]:
        """Return empty square indices in ascending order."""
        return [i for i, v in enumerate(self.board) if v == EMPTY]

    def winner(self) -> Optional[int]:
        """Return the mark on the first complete line, or None."""
        board = self.board
        for a, b, c in WIN_LINES:
            if board[a] != EMPTY and board[a] == board[b] == board[c]:
                return board[a]
        return None

    def has_winner(self) -> bool:
        return self.winner() is not None

    def is_draw(self) -> bool:
        return not self.has_winner() and EMPTY not in self.board


def new_game(x_config: Optional[SeatConfig] = None, o_config: Optional[SeatConfig] = None) -> GameState:
    """Fresh game: empty board, X to move."""
    return GameState(x=x_config or SeatConfig(), o=o_config or SeatConfig())


def apply_move(state: GameState, col: int, row: int) -> bool:
    return state.apply_move(col, row)


def legal_moves(state: GameState) -> List[int]:
    return state.legal_moves()


def has_winner(state: GameState) -> bool:
    return state.has_winner()


def is_draw(state: GameState) -> bool:
    return state.is_draw()


def from_rows(rows: str, turn: Optional[int] = None, x_config: Optional[SeatConfig] = None,
              o_config: Optional[SeatConfig] = None) -> GameState:
    """
    Build a state from a 9-character picture such as "xo.x.o...".

    '.' or ' ' is empty; separators '/' and '|' are ignored. When turn is not
    given it is inferred from the mark counts (X moves first).
    """
    cells = [ch for ch in rows.lower() if ch not in "/|\n"]
    if len(cells) != 9:
        raise ValueError(f"expected 9 cells, got {len(cells)}: {rows!r}")
    marks = {"x": X, "o": O, ".": EMPTY, " ": EMPTY}
    try:
        board = [marks[ch] for ch in cells]
    except KeyError as exc:
        raise ValueError(f"unknown cell {exc.args[0]!r} in {rows!r}") from None
    if turn is None:
        x_cnt = board.count(X)
        o_cnt = board.count(O)
        turn = X if x_cnt == o_cnt else O
    return GameState(board=board, turn=turn, x=x_config or SeatConfig(), o=o_config or SeatConfig())
