"""
Brute-force negamax search for TicTacToe, with tunable randomness.

No pruning and no caching: every reachable position below the root is
visited, each on its own copy of the game state.

The random source is injected. Anything with a numpy-style
`integers(low, high)` method works; the driver passes a
`numpy.random.Generator`.
"""

from typing import List, NamedTuple, Optional

import numpy as np

from .errors import InvariantViolation
from .game import GameState, opponent, seat_name

# Score a chooser sees for a branch cut off by the depth limit
SCORE_FLOOR = -10

# Returned when no candidate improved on SCORE_FLOOR
NO_MOVE = -1

# Longest possible game
MAX_PLIES = 9


class SearchResult(NamedTuple):
    score: int
    move: Optional[int]


def roll(rng: np.random.Generator, denominator: int) -> bool:
    """True with probability 1/(denominator+1); never when denominator is 0."""
    return denominator != 0 and int(rng.integers(0, denominator + 1)) == 1


def search(
    state: GameState,
    max_depth: int,
    evaluating_for: int,
    rng: np.random.Generator,
    acting: Optional[int] = None,
    depth: int = 0,
) -> SearchResult:
    """
    Negamax value and chosen move from the current state.

    Args:
        state: Position to evaluate. Never mutated.
        max_depth: Ply limit below the root, or -1 for unlimited
        evaluating_for: Seat whose perspective the score is in
        rng: Random source for tie-breaking
        acting: Seat whose tie-break settings apply (defaults to state.turn)
        depth: Plies already searched above this node

    Returns:
        (score, move) where:
        - score: +1 evaluating_for wins, -1 it loses, 0 draw
        - move: None at a terminal node, NO_MOVE if no candidate beat
          SCORE_FLOOR, otherwise a legal index
    """
    if acting is None:
        acting = state.turn

    if state.has_winner():
        # The winner is whoever just moved, so the seat on turn has lost
        return SearchResult(-1 if state.turn == evaluating_for else +1, None)

    moves = state.legal_moves()
    if not moves:
        return SearchResult(0, None)

    if depth == max_depth:
        # Negated by the chooser into SCORE_FLOOR
        return SearchResult(-SCORE_FLOOR, None)

    if depth >= MAX_PLIES:
        raise InvariantViolation(f"search reached depth {depth} with moves left: {state.board}")

    config = state.config_for(acting)
    randomness = config.tie_randomness
    uniform = config.tie_break == "uniform"

    best_score = SCORE_FLOOR
    best_move = NO_MOVE
    tied: List[int] = []

    for move in moves:
        child = state.copy()
        child.play(move)
        score = -search(child, max_depth, opponent(evaluating_for), rng, acting, depth + 1).score

        if uniform:
            if score > best_score:
                best_score = score
                tied = [move]
            elif score == best_score and tied:
                tied.append(move)
        elif score > best_score or (score == best_score and roll(rng, randomness)):
            best_score = score
            best_move = move

    if uniform and tied:
        if randomness != 0 and len(tied) > 1:
            best_move = tied[int(rng.integers(0, len(tied)))]
        else:
            best_move = tied[0]

    return SearchResult(best_score, best_move)


def random_move(state: GameState, rng: np.random.Generator) -> int:
    """Play a uniformly random legal move on state and return its index."""
    moves = state.legal_moves()
    if not moves:
        raise InvariantViolation("No moves left!")
    move = moves[int(rng.integers(0, len(moves)))]
    if not state.play(move):
        raise InvariantViolation(f"Invalid move {move}!")
    return move


def choose_move(state: GameState, seat: int, rng: np.random.Generator) -> int:
    """
    Pick and play a move for an AI seat on the live state.

    Rolls for a blunder first, then searches with the seat's depth. A search
    that found nothing better than SCORE_FLOOR falls back to a random move.

    Returns:
        Index of the square played
    """
    if seat != state.turn:
        raise ValueError(f"It is not Player {seat_name(seat)}'s turn")

    config = state.config_for(seat)
    if roll(rng, config.blunder_rate):
        return random_move(state, rng)

    result = search(state, config.depth, seat, rng, acting=seat)
    if result.move is None:
        raise InvariantViolation("No moves left!")
    if result.move == NO_MOVE:
        return random_move(state, rng)
    if not state.play(result.move):
        raise InvariantViolation(f"Invalid move {result.move}!")
    return result.move
