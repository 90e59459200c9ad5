"""Expansion step for game MCTS."""

import numpy as np

from ..utils.seed import random_choice
from .tree import MCTSTree

EXPANSION_POLICIES = ("random", "first")


def expand(
    tree: MCTSTree,
    handle: int,
    rng: np.random.Generator,
    policy: str = "random"
) -> int:
    """Add one child for an untried move of the selected node.

    Policies:
        random: uniform over the untried moves, drawn from rng
        first: first untried move in enumeration order

    Args:
        tree: Search tree
        handle: Node returned by selection
        rng: Search random source
        policy: Move choice policy

    Returns:
        Handle of the new child, or handle itself if the node is terminal
    """
    node = tree[handle]
    if not node.untried_moves:
        return handle

    if policy == "random":
        move = random_choice(rng, node.untried_moves)
    elif policy == "first":
        move = node.untried_moves[0]
    else:
        raise ValueError(f"Unknown expansion policy: {policy}")

    return tree.add_child(handle, move)
