"""Random rollout to the end of the game."""

from typing import Optional

import numpy as np

from ..errors import RolloutLimitExceeded
from ..games.base import GameState, Outcome
from ..utils.seed import random_choice


def rollout(
    state: GameState,
    rng: np.random.Generator,
    max_depth: Optional[int] = None
) -> Outcome:
    """Play uniformly random legal moves until the game ends.

    Intermediate states are discarded; nothing is written to the tree.

    Args:
        state: Starting position
        rng: Search random source
        max_depth: Optional cap on plies; None trusts the game to end

    Returns:
        Outcome of the finished game

    Raises:
        RolloutLimitExceeded: max_depth plies were played without ending
    """
    plies = 0
    while not state.is_terminal():
        if max_depth is not None and plies >= max_depth:
            raise RolloutLimitExceeded(f"Rollout did not finish within {max_depth} plies")
        state = state.apply_move(random_choice(rng, state.legal_moves()))
        plies += 1

    return state.outcome()
