"""
Error types.

Rejected moves are not errors: `GameState.apply_move` reports them by
returning False.
"""


class ConfigError(ValueError):
    """Seat or match configuration that must be rejected before play starts."""


class InvariantViolation(RuntimeError):
    """A logic bug in the engine. Never caught; the process aborts."""


class GameAborted(Exception):
    """The human at the console closed input mid-game."""
