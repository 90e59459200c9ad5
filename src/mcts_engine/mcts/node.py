"""MCTS node for game search."""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..games.base import GameState, Player


@dataclass
class SearchNode:
    """MCTS node for game search.

    Nodes live in an MCTSTree arena and refer to each other by integer
    handle, never by object reference.

    Attributes:
        state: Position this node represents
        mover: Player who made the move into this node; scores are
            accumulated from this player's perspective
        move: Move that produced this node (None for root)
        parent: Handle of the parent node (None for root)
        children: Handles of expanded children, in creation order
        untried_moves: Legal moves not yet expanded, in enumeration order
        visit_count: N - number of iterations through this node
        total_value: W - sum of backpropagated scores
    """
    state: GameState
    mover: Player
    move: Any = None
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    untried_moves: List[Any] = field(default_factory=list)
    visit_count: int = 0
    total_value: float = 0.0

    @classmethod
    def for_state(
        cls,
        state: GameState,
        mover: Player,
        move: Any = None,
        parent: Optional[int] = None
    ) -> "SearchNode":
        """Create an unvisited node with every legal move untried."""
        return cls(
            state=state,
            mover=mover,
            move=move,
            parent=parent,
            untried_moves=list(state.legal_moves())
        )

    @property
    def Q(self) -> float:
        """Average value (Q = W / N)."""
        if self.visit_count == 0:
            return 0.0
        return self.total_value / self.visit_count

    def is_terminal(self) -> bool:
        """No legal moves exist from this position."""
        return not self.untried_moves and not self.children

    def is_fully_expanded(self) -> bool:
        return not self.untried_moves

    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return (f"SearchNode(move={self.move!r}, mover={self.mover.value}, "
                f"visits={self.visit_count}, Q={self.Q:.3f}, "
                f"children={len(self.children)}, untried={len(self.untried_moves)})")
