"""Generic Monte Carlo Tree Search for two-player games.

Core loop, once per iteration:
1. Select: UCB1 descent to a node with untried moves
2. Expand: add one child for an untried move
3. Simulate: uniform random rollout to the end of the game
4. Backprop: update visits and scores back to the root

Components:
- games/ - GameState contract, Connect-Four, Treblecross
- mcts/ - Tree, UCB1 selection, expansion, rollout, backprop, driver
- comparison/ - Matches between players and their significance
"""

__version__ = "0.1.0"

from .errors import MCTSError, InvalidMove, PreconditionViolation, EmptyMoveSet, RolloutLimitExceeded
from .games.base import GameState, Outcome, Player
from .mcts.search import MCTS, SearchConfig, SearchResult, search
from .mcts.player import MCTSPlayer

__all__ = [
    "MCTSError",
    "InvalidMove",
    "PreconditionViolation",
    "EmptyMoveSet",
    "RolloutLimitExceeded",
    "GameState",
    "Outcome",
    "Player",
    "MCTS",
    "SearchConfig",
    "SearchResult",
    "search",
    "MCTSPlayer"
]
