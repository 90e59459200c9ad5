"""Exceptions raised at the boundary between the search and a game."""

from typing import Any


class MCTSError(Exception):
    """Base class for every error raised by this package."""


class InvalidMove(MCTSError, ValueError):
    """A move was applied that is not in the state's legal moves."""

    def __init__(self, move: Any, message: str = ""):
        self.move = move
        super().__init__(message or f"Illegal move: {move!r}")


class PreconditionViolation(MCTSError, RuntimeError):
    """A game operation was called on a state where it is undefined."""


class EmptyMoveSet(MCTSError, ValueError):
    """Search was invoked on a terminal root state."""


class RolloutLimitExceeded(MCTSError, RuntimeError):
    """A rollout ran past the configured depth limit."""
