"""MCTS player that keeps its tree between the moves of one game."""

import logging
from typing import Any, Optional

from ..games.base import GameState
from .search import MCTS, SearchConfig, SearchResult
from .tree import ROOT, MCTSTree

logger = logging.getLogger(__name__)


class MCTSPlayer:
    """Plays a game move by move with MCTS.

    With reuse_tree, the subtree under each played move becomes the
    starting tree of the next search, so statistics gathered for the
    position actually reached are not thrown away. Every move played in
    the game, by either side, must be reported through observe_move.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        reuse_tree: bool = True,
        name: str = "mcts"
    ):
        self.engine = MCTS(config)
        self.reuse_tree = reuse_tree
        self.name = name
        self.tree: Optional[MCTSTree] = None
        self.last_result: Optional[SearchResult] = None

    @property
    def config(self) -> SearchConfig:
        return self.engine.config

    def reset(self) -> None:
        """Forget the kept tree, e.g. before a new game."""
        self.tree = None
        self.last_result = None

    def choose_move(self, state: GameState) -> Any:
        """Search from state and return the chosen move."""
        tree = None
        if self.reuse_tree and self.tree is not None:
            if self.tree.root.state == state:
                tree = self.tree
                logger.debug(f"{self.name}: reusing tree with {len(tree)} nodes")
            else:
                logger.debug(f"{self.name}: kept tree does not match position, discarding")

        self.last_result = self.engine.search(state, tree=tree)
        self.tree = self.last_result.tree if self.reuse_tree else None
        return self.last_result.move

    def observe_move(self, move: Any) -> None:
        """Advance the kept tree past a move played in the game."""
        if self.tree is None:
            return

        child = self.tree.find_child(ROOT, move)
        if child is None:
            self.tree = None
        else:
            self.tree = self.tree.reroot(child)

    def __repr__(self) -> str:
        return f"MCTSPlayer(name={self.name!r}, reuse_tree={self.reuse_tree})"
