"""MCTS tree structure for game search."""

from collections import deque
from typing import Any, Dict, List, Optional

import networkx as nx

from ..games.base import GameState
from .node import SearchNode

ROOT = 0


class MCTSTree:
    """Arena of search nodes grown from a single root position.

    Nodes are appended and never removed, so a handle stays valid for
    the life of the tree. The root is always handle 0.
    """

    def __init__(self, root_state: GameState):
        root = SearchNode.for_state(root_state, mover=root_state.player_to_move().other)
        self.nodes: List[SearchNode] = [root]

    @classmethod
    def _from_nodes(cls, nodes: List[SearchNode]) -> "MCTSTree":
        tree = cls.__new__(cls)
        tree.nodes = nodes
        return tree

    @property
    def root(self) -> SearchNode:
        return self.nodes[ROOT]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, handle: int) -> SearchNode:
        return self.nodes[handle]

    def add_child(self, parent: int, move: Any) -> int:
        """Expand an untried move of parent into a new child.

        Args:
            parent: Handle of the node being expanded
            move: One of the parent's untried moves

        Returns:
            Handle of the new child

        Raises:
            InvalidMove: move is not legal at the parent's position
            ValueError: move was already expanded
        """
        node = self.nodes[parent]
        if move not in node.untried_moves:
            raise ValueError(f"Move {move!r} is not untried at node {parent}")

        state = node.state.apply_move(move)
        node.untried_moves.remove(move)

        child = SearchNode.for_state(
            state,
            mover=node.state.player_to_move(),
            move=move,
            parent=parent
        )
        handle = len(self.nodes)
        self.nodes.append(child)
        node.children.append(handle)
        return handle

    def find_child(self, parent: int, move: Any) -> Optional[int]:
        """Handle of parent's child reached by move, if expanded."""
        for handle in self.nodes[parent].children:
            if self.nodes[handle].move == move:
                return handle
        return None

    def get_path_to_root(self, handle: int) -> List[int]:
        """Handles from node up to and including the root."""
        path = []
        current: Optional[int] = handle
        while current is not None:
            path.append(current)
            current = self.nodes[current].parent
        return path

    def depth(self, handle: int) -> int:
        return len(self.get_path_to_root(handle)) - 1

    def max_depth(self) -> int:
        """Depth of the deepest node (root has depth 0)."""
        depths = [0] * len(self.nodes)
        for handle in range(1, len(self.nodes)):
            # Parents are always created before their children
            depths[handle] = depths[self.nodes[handle].parent] + 1
        return max(depths)

    def count_terminal(self) -> int:
        return sum(1 for node in self.nodes if node.is_terminal())

    def child_statistics(self, handle: int = ROOT) -> List[Dict]:
        """Per-child statistics of a node, in creation order."""
        return [
            {
                'move': self.nodes[c].move,
                'visits': self.nodes[c].visit_count,
                'value': self.nodes[c].total_value,
                'Q': self.nodes[c].Q
            }
            for c in self.nodes[handle].children
        ]

    def get_statistics(self) -> dict:
        """Get tree statistics."""
        return {
            "total_nodes": len(self.nodes),
            "terminal_nodes": self.count_terminal(),
            "max_depth": self.max_depth(),
            "root_visits": self.root.visit_count,
            "root_Q": self.root.Q
        }

    def reroot(self, handle: int) -> "MCTSTree":
        """Build a new tree holding only the subtree below handle.

        Nodes are copied breadth-first so children of a node stay
        contiguous; the old tree is left untouched.
        """
        mapping = {handle: ROOT}
        order = [handle]
        queue = deque([handle])
        while queue:
            old = queue.popleft()
            for child in self.nodes[old].children:
                mapping[child] = len(order)
                order.append(child)
                queue.append(child)

        nodes = []
        for old in order:
            node = self.nodes[old]
            nodes.append(SearchNode(
                state=node.state,
                mover=node.mover,
                move=node.move if old != handle else None,
                parent=mapping[node.parent] if old != handle else None,
                children=[mapping[c] for c in node.children],
                untried_moves=list(node.untried_moves),
                visit_count=node.visit_count,
                total_value=node.total_value
            ))
        return MCTSTree._from_nodes(nodes)

    def to_networkx(self) -> nx.DiGraph:
        """Export the tree as a directed graph keyed by node handle.

        Node attributes: move, mover, visits, value.
        """
        graph = nx.DiGraph()
        for handle, node in enumerate(self.nodes):
            graph.add_node(
                handle,
                move=node.move,
                mover=node.mover.value,
                visits=node.visit_count,
                value=node.total_value
            )
            if node.parent is not None:
                graph.add_edge(node.parent, handle)
        return graph
