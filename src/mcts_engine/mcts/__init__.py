"""MCTS module: tree search for two-player games.

Selection follows UCB1 through the expanded tree.
Expansion adds one untried move per iteration.
Uniform random rollouts estimate the new position.
Backpropagation credits each node from its own mover's perspective.
"""

from .node import SearchNode
from .tree import MCTSTree, ROOT
from .ucb import ucb_select, ucb_score, select_most_visited, DEFAULT_EXPLORATION
from .expand import expand
from .rollout import rollout
from .backprop import backpropagate, outcome_value
from .search import MCTS, SearchConfig, SearchResult, iterate, search
from .player import MCTSPlayer

__all__ = [
    "SearchNode",
    "MCTSTree",
    "ROOT",
    "ucb_select",
    "ucb_score",
    "select_most_visited",
    "DEFAULT_EXPLORATION",
    "expand",
    "rollout",
    "backpropagate",
    "outcome_value",
    "MCTS",
    "SearchConfig",
    "SearchResult",
    "iterate",
    "search",
    "MCTSPlayer"
]
