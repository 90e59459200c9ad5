"""Game-state contract consumed by the search.

Any two-player, perfect-information, turn-based game plugs into the
search by subclassing GameState. States are immutable: apply_move
returns a new state and never touches the receiver.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Optional

from ..errors import InvalidMove, PreconditionViolation


class Player(Enum):
    """The two sides of a game. A always moves first."""
    A = "A"
    B = "B"

    @property
    def other(self) -> "Player":
        return Player.B if self is Player.A else Player.A


class Outcome(Enum):
    """Result of a finished game."""
    WIN_A = "win_a"
    WIN_B = "win_b"
    DRAW = "draw"

    @property
    def winner(self) -> Optional[Player]:
        """Winning player, or None for a draw."""
        if self is Outcome.WIN_A:
            return Player.A
        if self is Outcome.WIN_B:
            return Player.B
        return None

    @staticmethod
    def win_for(player: Player) -> "Outcome":
        return Outcome.WIN_A if player is Player.A else Outcome.WIN_B


class GameState(ABC):
    """Abstract position of a two-player game.

    Subclasses implement:
        legal_moves: ordered legal moves, empty iff terminal
        is_terminal: whether the game is over
        player_to_move: side to move
        _play: the new state after a move already known to be legal
        _result: outcome of a state already known to be terminal

    apply_move and outcome wrap the last two with the contract checks,
    so a game never has to validate its own inputs.

    Moves may be any value that supports equality.
    """

    @abstractmethod
    def legal_moves(self) -> List[Any]:
        """Legal moves in a deterministic order."""

    @abstractmethod
    def is_terminal(self) -> bool:
        """True once the game has ended."""

    @abstractmethod
    def player_to_move(self) -> Player:
        """Side whose turn it is."""

    @abstractmethod
    def _play(self, move: Any) -> "GameState":
        """Return the state after a legal move."""

    @abstractmethod
    def _result(self) -> Outcome:
        """Return the outcome of a terminal state."""

    def apply_move(self, move: Any) -> "GameState":
        """Return the state reached by playing move.

        Raises:
            InvalidMove: move is not in legal_moves()
        """
        if move not in self.legal_moves():
            raise InvalidMove(move, f"Move {move!r} is not legal in this position")
        return self._play(move)

    def outcome(self) -> Outcome:
        """Return the result of a finished game.

        Raises:
            PreconditionViolation: the game is not over
        """
        if not self.is_terminal():
            raise PreconditionViolation("outcome() called on a non-terminal state")
        return self._result()
