"""Pytest fixtures for testing."""

import pytest

from mcts_engine.games.base import Player
from mcts_engine.games.connect_four import ConnectFour
from mcts_engine.games.treblecross import Treblecross
from mcts_engine.mcts.search import SearchConfig


@pytest.fixture
def seed():
    """Fixed seed for reproducible searches."""
    return 42


@pytest.fixture
def toy_game():
    """Empty 1x3 Treblecross board: whoever fills the last cell wins."""
    return Treblecross(length=3)


@pytest.fixture
def winning_position():
    """Treblecross row XX____ with A to move; cell 2 wins, every other move loses."""
    return Treblecross.from_cells([0, 1], length=6, to_move=Player.A)


@pytest.fixture
def drawn_game():
    """Two-cell board with run 3: every game is a draw."""
    return Treblecross(length=2, run=3)


@pytest.fixture
def connect_four():
    return ConnectFour()


@pytest.fixture
def small_config(seed):
    """Quick deterministic search config."""
    return SearchConfig(iterations=200, seed=seed)
