"""Test the tree grows by at most one node per iteration."""

import numpy as np
import pytest

from mcts_engine.games.connect_four import ConnectFour
from mcts_engine.games.treblecross import Treblecross
from mcts_engine.mcts.search import MCTS, SearchConfig, iterate
from mcts_engine.mcts.tree import MCTSTree


@pytest.mark.parametrize("start", [ConnectFour(), Treblecross(length=3), Treblecross(length=8)])
def test_node_count_bounded_and_monotone(start):
    tree = MCTSTree(start)
    config = SearchConfig(iterations=1)
    rng = np.random.default_rng(3)

    sizes = [len(tree)]
    for n in range(1, 401):
        iterate(tree, config, rng)
        sizes.append(len(tree))
        assert len(tree) <= n + 1

    assert all(a <= b for a, b in zip(sizes, sizes[1:]))


def test_small_game_tree_saturates(toy_game):
    """The 1x3 game has 1 + 3 + 6 + 6 positions along distinct move orders."""
    result = MCTS(SearchConfig(iterations=500, seed=0)).search(toy_game)
    assert len(result.tree) == 16
    assert result.tree_stats['terminal_nodes'] == 6
    assert result.tree_stats['max_depth'] == 3
