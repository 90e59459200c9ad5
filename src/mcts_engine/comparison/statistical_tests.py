"""Statistical significance testing for match results."""

import math
from typing import Dict, Tuple

from scipy import stats

from .arena import MatchResult


def score_rate(wins: int, losses: int, draws: int) -> float:
    """Points per game: win 1, draw 0.5, loss 0."""
    games = wins + losses + draws
    if games == 0:
        return 0.0
    return (wins + 0.5 * draws) / games


def confidence_interval(
    wins: int,
    losses: int,
    draws: int,
    confidence: float = 0.95
) -> Tuple[float, float]:
    """Wilson score interval for the score rate.

    Draws count as half a win, the usual convention for game results.

    Args:
        wins: Games won
        losses: Games lost
        draws: Games drawn
        confidence: Confidence level in (0, 1)

    Returns:
        (lower, upper) bounds on the score rate
    """
    if not 0 < confidence < 1:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")

    n = wins + losses + draws
    if n == 0:
        return 0.0, 1.0

    p = score_rate(wins, losses, draws)
    z = stats.norm.ppf(0.5 + confidence / 2)

    denom = 1 + z**2 / n
    center = (p + z**2 / (2 * n)) / denom
    half_width = z * math.sqrt(p * (1 - p) / n + z**2 / (4 * n**2)) / denom

    return max(0.0, center - half_width), min(1.0, center + half_width)


def score_significance(
    wins: int,
    losses: int,
    draws: int,
    alternative: str = "greater",
    alpha: float = 0.05
) -> Dict:
    """Exact binomial test on decisive games.

    H_0: each decisive game is won with probability 0.5
    H_1: the win probability is > 0.5 (or <, or !=)

    Draws carry no information about which side is stronger and are
    left out of the test.

    Args:
        wins: Games won
        losses: Games lost
        draws: Games drawn
        alternative: "greater", "less", or "two-sided"
        alpha: Significance level

    Returns:
        Dict with test results:
        {
            'significant': bool,
            'p_value': float,
            'score': float,
            'decisive_games': int,
            'confidence_interval': (float, float)
        }
    """
    decisive = wins + losses
    if decisive == 0:
        p_value = 1.0
    else:
        p_value = float(stats.binomtest(wins, decisive, p=0.5, alternative=alternative).pvalue)

    return {
        'significant': p_value < alpha,
        'p_value': p_value,
        'score': score_rate(wins, losses, draws),
        'decisive_games': decisive,
        'confidence_interval': confidence_interval(wins, losses, draws, 1 - alpha)
    }


def match_significance(result: MatchResult, alternative: str = "greater", alpha: float = 0.05) -> Dict:
    """score_significance for a MatchResult."""
    return score_significance(result.wins, result.losses, result.draws, alternative, alpha)
