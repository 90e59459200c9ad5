"""Test Treblecross rules."""

import pytest

from mcts_engine.errors import InvalidMove, PreconditionViolation
from mcts_engine.games.base import Outcome, Player
from mcts_engine.games.treblecross import Treblecross


def test_empty_board(toy_game):
    """Test a fresh board."""
    assert toy_game.legal_moves() == [0, 1, 2]
    assert not toy_game.is_terminal()
    assert toy_game.player_to_move() is Player.A
    assert str(toy_game) == "..."


def test_last_filler_wins_on_three_cells(toy_game):
    """On a 1x3 board the third fill completes the run."""
    state = toy_game.apply_move(1).apply_move(0)
    assert not state.is_terminal()
    assert state.player_to_move() is Player.A

    state = state.apply_move(2)
    assert state.is_terminal()
    assert state.legal_moves() == []
    assert state.outcome() is Outcome.WIN_A


def test_run_must_be_consecutive():
    """Filled cells separated by a gap do not count."""
    state = Treblecross.from_cells([0, 1, 3, 4], length=6)
    assert not state.is_terminal()

    state = state.apply_move(2)
    assert state.outcome() is Outcome.WIN_A


def test_apply_move_does_not_mutate(toy_game):
    """Test states are immutable."""
    toy_game.apply_move(0)
    assert toy_game.legal_moves() == [0, 1, 2]


def test_illegal_move_rejected(toy_game):
    """Test filled and out-of-range cells raise InvalidMove."""
    state = toy_game.apply_move(0)
    with pytest.raises(InvalidMove) as excinfo:
        state.apply_move(0)
    assert excinfo.value.move == 0

    with pytest.raises(InvalidMove):
        state.apply_move(7)


def test_outcome_requires_terminal(toy_game):
    """Test outcome() on a live game is a contract violation."""
    with pytest.raises(PreconditionViolation):
        toy_game.outcome()


def test_full_board_without_run_is_draw(drawn_game):
    """Test a board too short for a run ends drawn."""
    state = drawn_game.apply_move(0).apply_move(1)
    assert state.is_terminal()
    assert state.outcome() is Outcome.DRAW


def test_from_cells_rejects_finished_position():
    """Test a position that already holds a run is refused."""
    with pytest.raises(ValueError):
        Treblecross.from_cells([0, 1, 2], length=5)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_from_cells_rejects_off_board_index(index):
    with pytest.raises(ValueError):
        Treblecross.from_cells([index], length=3)


def test_from_cells_side_to_move(winning_position):
    assert winning_position.player_to_move() is Player.A
    assert winning_position.legal_moves() == [2, 3, 4, 5]
    assert str(winning_position) == "XX...."


def test_states_compare_by_value(toy_game):
    """Test equal positions are equal and hash alike."""
    a = toy_game.apply_move(0)
    b = Treblecross(length=3).apply_move(0)
    assert a == b
    assert hash(a) == hash(b)
    assert a != toy_game
