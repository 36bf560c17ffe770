"""
Seat and match configuration.

Randomness knobs are denominators: a value N > 0 means a 1/(N+1) chance,
0 means never.
"""

from dataclasses import dataclass, field
from typing import Optional

from .errors import ConfigError

UNLIMITED_DEPTH = -1
TIE_BREAK_MODES = ("walk", "uniform")


@dataclass(frozen=True)
class SeatConfig:
    """Configuration for one seat."""

    # Human seats read moves from the console
    is_ai: bool = False

    # Search ply limit, -1 for unlimited
    depth: int = UNLIMITED_DEPTH

    # Chance 1/(N+1) of replacing the best move on an exact tie
    tie_randomness: int = 0

    # Chance 1/(N+1) of skipping search and playing at random
    blunder_rate: int = 0

    # "walk": each later tie may overwrite the incumbent
    # "uniform": one pick among all tied moves
    tie_break: str = "walk"

    def validate(self, name: str = "seat") -> "SeatConfig":
        if self.depth == 0 or self.depth < UNLIMITED_DEPTH:
            raise ConfigError("Max depth cannot be 0, or less than -1")
        if self.tie_randomness < 0:
            raise ConfigError(f"{name} tie randomness must not be negative")
        if self.blunder_rate < 0:
            raise ConfigError(f"{name} blunder rate must not be negative")
        if self.tie_break not in TIE_BREAK_MODES:
            raise ConfigError(
                f"{name} tie break must be one of {', '.join(TIE_BREAK_MODES)}, got {self.tie_break!r}"
            )
        return self


@dataclass
class MatchConfig:
    """Configuration for a run of games."""

    x: SeatConfig = field(default_factory=SeatConfig)
    o: SeatConfig = field(default_factory=SeatConfig)

    # Number of games to play
    games: int = 1

    # Print every ply, or only the final line of each game
    verbose: bool = True

    # Seed for the random source, None for fresh entropy
    seed: Optional[int] = None

    def validate(self) -> "MatchConfig":
        self.x.validate("X")
        self.o.validate("O")
        if self.games < 1:
            raise ConfigError("Must be at least one iteration!")
        return self
