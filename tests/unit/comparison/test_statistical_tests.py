"""Test match statistics."""

import pytest

from mcts_engine.comparison.arena import MatchResult
from mcts_engine.comparison.statistical_tests import (
    confidence_interval,
    match_significance,
    score_rate,
    score_significance,
)


def test_score_rate():
    assert score_rate(3, 1, 2) == pytest.approx(4 / 6)
    assert score_rate(0, 0, 0) == 0.0


def test_lopsided_result_is_significant():
    test = score_significance(wins=18, losses=2, draws=0)
    assert test['significant']
    assert test['p_value'] < 0.001
    assert test['decisive_games'] == 20


def test_even_result_is_not_significant():
    test = score_significance(wins=10, losses=10, draws=5)
    assert not test['significant']
    assert test['score'] == 0.5


def test_all_draws():
    test = score_significance(wins=0, losses=0, draws=10)
    assert test['p_value'] == 1.0
    assert not test['significant']


def test_two_sided_p_value_is_larger():
    greater = score_significance(14, 6, 0, alternative="greater")
    two_sided = score_significance(14, 6, 0, alternative="two-sided")
    assert two_sided['p_value'] > greater['p_value']


def test_confidence_interval_contains_rate():
    lower, upper = confidence_interval(30, 10, 10)
    assert 0.0 <= lower < score_rate(30, 10, 10) < upper <= 1.0


def test_confidence_interval_narrows_with_games():
    small = confidence_interval(6, 4, 0)
    large = confidence_interval(600, 400, 0)
    assert (large[1] - large[0]) < (small[1] - small[0])


def test_confidence_interval_validation():
    with pytest.raises(ValueError):
        confidence_interval(1, 1, 1, confidence=1.5)
    assert confidence_interval(0, 0, 0) == (0.0, 1.0)


def test_match_significance():
    test = match_significance(MatchResult(wins=9, losses=1, draws=0))
    assert test['significant']
