"""Main MCTS search for two-player games.

The algorithm:

def iterate(root):
    node = ucb_select(root)
    node = expand(node)
    outcome = rollout(node.state)
    backpropagate(node, outcome)

Each iteration starts and ends at the root. After the budget is spent
the most visited root child is played: visit counts reflect confidence,
win rates of rarely visited children reflect luck.
"""

import logging
import math
import time
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List, Mapping, Optional

import numpy as np

from ..errors import EmptyMoveSet
from ..games.base import GameState, Outcome
from ..utils.seed import make_rng
from .backprop import backpropagate
from .expand import EXPANSION_POLICIES, expand
from .rollout import rollout
from .tree import MCTSTree
from .ucb import DEFAULT_EXPLORATION, select_most_visited, ucb_select

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for MCTS search.

    The search stops when either budget runs out. Set iterations to None
    for a purely time-bounded search.
    """
    iterations: Optional[int] = 1000
    time_budget: Optional[float] = None  # seconds
    exploration: float = DEFAULT_EXPLORATION
    seed: Optional[int] = None
    # Score credited to both sides for a drawn rollout
    draw_value: float = 0.0
    expansion_policy: str = "random"
    max_rollout_depth: Optional[int] = None
    # Log progress every N iterations (0 disables)
    log_every: int = 0

    def __post_init__(self):
        if self.iterations is None and self.time_budget is None:
            raise ValueError("Either iterations or time_budget must be set")
        if self.iterations is not None and self.iterations <= 0:
            raise ValueError(f"iterations must be positive, got {self.iterations}")
        if self.time_budget is not None and self.time_budget <= 0:
            raise ValueError(f"time_budget must be positive, got {self.time_budget}")
        if self.exploration < 0 or not math.isfinite(self.exploration):
            raise ValueError(f"exploration must be a finite non-negative number, got {self.exploration}")
        if self.expansion_policy not in EXPANSION_POLICIES:
            raise ValueError(f"Unknown expansion policy: {self.expansion_policy}")
        if self.max_rollout_depth is not None and self.max_rollout_depth <= 0:
            raise ValueError(f"max_rollout_depth must be positive, got {self.max_rollout_depth}")

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "SearchConfig":
        """Build a config from a mapping, e.g. the 'search' section of a YAML file.

        Raises:
            ValueError: the mapping has keys that are not config fields
        """
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown search config keys: {sorted(unknown)}")
        return cls(**config)


@dataclass
class SearchResult:
    """Outcome of one search call."""
    move: Any
    iterations: int
    elapsed: float
    children: List[Dict]
    tree_stats: Dict
    tree: MCTSTree = field(repr=False)


def iterate(
    tree: MCTSTree,
    config: SearchConfig,
    rng: np.random.Generator
) -> Outcome:
    """Single MCTS iteration: select, expand, simulate, backpropagate.

    Returns:
        Outcome of the rollout
    """
    # 1. UCB1 selection from root
    handle = ucb_select(tree, config.exploration)

    # 2. Expand one untried move (no-op on terminal nodes)
    handle = expand(tree, handle, rng, config.expansion_policy)

    # 3. Rollout; a terminal node just reports its outcome
    outcome = rollout(tree[handle].state, rng, config.max_rollout_depth)

    # 4. Backpropagate
    backpropagate(tree, handle, outcome, config.draw_value)

    return outcome


class MCTS:
    """UCB1 Monte Carlo Tree Search with uniform random rollouts.

    Works with any GameState implementation.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        clock: Callable[[], float] = time.perf_counter
    ):
        self.config = config or SearchConfig()
        self.clock = clock

    def search(self, state: GameState, tree: Optional[MCTSTree] = None) -> SearchResult:
        """Run MCTS from state and return the most visited move.

        Args:
            state: Root position
            tree: Existing tree rooted at state to keep growing; a fresh
                tree is built if omitted

        Returns:
            SearchResult with the chosen move and search statistics

        Raises:
            EmptyMoveSet: state is terminal
            ValueError: tree is rooted at a different position
        """
        if state.is_terminal():
            raise EmptyMoveSet("Cannot search from a terminal position")
        if tree is not None and tree.root.state != state:
            raise ValueError("Tree root does not match the search position")

        config = self.config
        rng = make_rng(config.seed)
        if tree is None:
            tree = MCTSTree(state)

        start = self.clock()
        deadline = start + config.time_budget if config.time_budget is not None else None
        outcomes = {outcome: 0 for outcome in Outcome}

        iterations = 0
        while True:
            outcome = iterate(tree, config, rng)
            outcomes[outcome] += 1
            iterations += 1

            if config.log_every and iterations % config.log_every == 0:
                stats = tree.get_statistics()
                logger.debug(
                    f"Iter {iterations}: nodes={stats['total_nodes']}, "
                    f"depth={stats['max_depth']}, "
                    f"win_a={outcomes[Outcome.WIN_A]}, win_b={outcomes[Outcome.WIN_B]}, "
                    f"draw={outcomes[Outcome.DRAW]}"
                )

            # Budgets are only checked between whole iterations
            if config.iterations is not None and iterations >= config.iterations:
                break
            if deadline is not None and self.clock() >= deadline:
                break

        elapsed = self.clock() - start
        best = select_most_visited(tree)
        move = tree[best].move

        logger.info(
            f"Searched {iterations} iterations in {elapsed:.3f}s: "
            f"move={move!r}, visits={tree[best].visit_count}, nodes={len(tree)}"
        )

        return SearchResult(
            move=move,
            iterations=iterations,
            elapsed=elapsed,
            children=tree.child_statistics(),
            tree_stats=tree.get_statistics(),
            tree=tree
        )


def search(
    state: GameState,
    iterations: Optional[int] = None,
    time_budget: Optional[float] = None,
    exploration: float = DEFAULT_EXPLORATION,
    seed: Optional[int] = None,
    **kwargs
) -> Any:
    """Choose a move for the side to move in state.

    Runs 1000 iterations when neither budget is given.

    Args:
        state: Root position
        iterations: Iteration budget
        time_budget: Time budget in seconds
        exploration: UCB1 exploration constant
        seed: Seed for reproducible searches
        **kwargs: Further SearchConfig fields

    Returns:
        The chosen move

    Raises:
        EmptyMoveSet: state is terminal
    """
    if iterations is None and time_budget is None:
        iterations = 1000

    config = SearchConfig(
        iterations=iterations,
        time_budget=time_budget,
        exploration=exploration,
        seed=seed,
        **kwargs
    )
    return MCTS(config).search(state).move
