"""UCB1 selection for game MCTS."""

import math
from typing import Optional

from .node import SearchNode
from .tree import ROOT, MCTSTree

DEFAULT_EXPLORATION = math.sqrt(2)


def ucb_score(
    child: SearchNode,
    parent: SearchNode,
    c: float = DEFAULT_EXPLORATION
) -> float:
    """Compute UCB1 score.

    UCB1 = W_child / N_child + c * sqrt(ln(N_parent) / N_child)

    W_child is stored from the perspective of the player who moved into
    the child, which is the player choosing at the parent.

    Args:
        child: Child node
        parent: Parent node
        c: Exploration constant

    Returns:
        UCB1 score
    """
    if child.visit_count == 0:
        return float('inf')

    exploitation = child.total_value / child.visit_count
    exploration = c * math.sqrt(
        math.log(parent.visit_count) / child.visit_count
    )

    return exploitation + exploration


def best_child(tree: MCTSTree, handle: int, c: float = DEFAULT_EXPLORATION) -> int:
    """Child of handle with the highest UCB1 score.

    Exact ties go to the child created first.
    """
    parent = tree[handle]
    best = None
    best_score = float('-inf')

    for child in parent.children:
        score = ucb_score(tree[child], parent, c)
        if best is None or score > best_score:
            best = child
            best_score = score

    return best


def ucb_select(tree: MCTSTree, c: float = DEFAULT_EXPLORATION) -> int:
    """Select node using UCB1.

    Traverse from root, selecting highest UCB1 child, until reaching a
    node with untried moves or a terminal node.

    Args:
        tree: Search tree
        c: Exploration constant

    Returns:
        Handle of the selected node
    """
    handle = ROOT

    while True:
        node = tree[handle]
        if node.untried_moves or not node.children:
            return handle
        handle = best_child(tree, handle, c)


def select_most_visited(tree: MCTSTree, handle: int = ROOT) -> Optional[int]:
    """Select most visited child (for final selection).

    Exact ties go to the child created first.
    """
    node = tree[handle]

    if not node.children:
        return None

    # max() keeps the first of equal keys
    return max(node.children, key=lambda child: tree[child].visit_count)
