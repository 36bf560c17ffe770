"""
ttt-minimax - TicTacToe between humans and brute-force minimax AIs.

Each seat is a human at the console or an AI whose strength is tuned by
search depth, tie-break randomness and a blunder rate.
"""

from .config import SeatConfig, MatchConfig, UNLIMITED_DEPTH
from .errors import ConfigError, InvariantViolation, GameAborted
from .game import (
    EMPTY, X, O,
    GameState,
    new_game,
    apply_move,
    legal_moves,
    has_winner,
    is_draw,
)
from .minimax import SearchResult, SCORE_FLOOR, NO_MOVE, search, choose_move, random_move
from .match import GameResult, MatchSummary, play_game, play_match

__version__ = "0.1.0"
__all__ = [
    "SeatConfig",
    "MatchConfig",
    "UNLIMITED_DEPTH",
    "ConfigError",
    "InvariantViolation",
    "GameAborted",
    "EMPTY",
    "X",
    "O",
    "GameState",
    "new_game",
    "apply_move",
    "legal_moves",
    "has_winner",
    "is_draw",
    "SearchResult",
    "SCORE_FLOOR",
    "NO_MOVE",
    "search",
    "choose_move",
    "random_move",
    "GameResult",
    "MatchSummary",
    "play_game",
    "play_match",
]
