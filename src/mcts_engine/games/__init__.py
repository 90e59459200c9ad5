"""Games and the GameState contract the search runs against."""

from .base import GameState, Outcome, Player
from .connect_four import ConnectFour
from .treblecross import Treblecross
from .validation import check_state, validate_game

GAMES = {
    "connect4": ConnectFour,
    "treblecross": Treblecross,
}

__all__ = [
    "GameState",
    "Outcome",
    "Player",
    "ConnectFour",
    "Treblecross",
    "check_state",
    "validate_game",
    "GAMES",
]
