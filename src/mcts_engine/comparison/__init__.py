"""Engine-vs-engine matches and their statistics."""

from .arena import GameRecord, MatchResult, RandomPlayer, play_game, play_match
from .statistical_tests import confidence_interval, match_significance, score_rate, score_significance

__all__ = [
    "GameRecord",
    "MatchResult",
    "RandomPlayer",
    "play_game",
    "play_match",
    "confidence_interval",
    "match_significance",
    "score_rate",
    "score_significance",
]
