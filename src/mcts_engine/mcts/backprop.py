"""Backpropagation for game MCTS.

Each iteration updates every node on the path from the expanded node
to the root:
- Visit count goes up by one
- Value moves by +1, -1 or the draw value, judged by that node's mover
"""

from ..games.base import Outcome, Player
from .tree import MCTSTree


def outcome_value(outcome: Outcome, mover: Player, draw_value: float = 0.0) -> float:
    """Score of an outcome for the player who moved into a node."""
    winner = outcome.winner
    if winner is None:
        return draw_value
    return 1.0 if winner is mover else -1.0


def backpropagate(
    tree: MCTSTree,
    handle: int,
    outcome: Outcome,
    draw_value: float = 0.0
) -> None:
    """Backpropagate a rollout outcome from handle to root.

    Args:
        tree: Search tree
        handle: Node the rollout started from
        outcome: Result of the rollout
        draw_value: Score credited to both sides for a draw
    """
    current = handle

    while current is not None:
        node = tree[current]
        node.visit_count += 1
        node.total_value += outcome_value(outcome, node.mover, draw_value)
        current = node.parent
