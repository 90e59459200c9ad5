"""Treblecross: one-row tic-tac-toe where both sides play the same mark.

A move fills an empty cell. The player who completes `run` consecutive
filled cells wins. With length=3 this is the smallest non-trivial game
for exercising the search: the player who fills the last cell wins.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Tuple

from .base import GameState, Outcome, Player


@dataclass(frozen=True)
class Treblecross(GameState):
    """Treblecross position.

    Attributes:
        length: Number of cells in the row
        run: Consecutive filled cells needed to win
        cells: Fill flag per cell
        turn: Side to move
        winner: Side that completed a run, if any
    """
    length: int = 3
    run: int = 3
    cells: Tuple[bool, ...] = field(default=())
    turn: Player = Player.A
    winner: Optional[Player] = None

    def __post_init__(self):
        if self.length <= 0:
            raise ValueError(f"length must be positive, got {self.length}")
        if self.run <= 0:
            raise ValueError(f"run must be positive, got {self.run}")
        if not self.cells:
            object.__setattr__(self, "cells", (False,) * self.length)
        elif len(self.cells) != self.length:
            raise ValueError(f"Expected {self.length} cells, got {len(self.cells)}")

    @classmethod
    def from_cells(
        cls,
        filled: Iterable[int],
        length: int = 3,
        run: int = 3,
        to_move: Player = Player.A
    ) -> "Treblecross":
        """Build a mid-game position from the indices of filled cells.

        Raises:
            ValueError: a cell index is off the board, or the filled cells
                already contain a winning run
        """
        cells = [False] * length
        for index in filled:
            if not 0 <= index < length:
                raise ValueError(f"Cell {index} is off a board of length {length}")
            cells[index] = True
        state = cls(length=length, run=run, cells=tuple(cells), turn=to_move)
        if _longest_run(state.cells) >= run:
            raise ValueError("Position already contains a completed run")
        return state

    def legal_moves(self) -> List[int]:
        if self.winner is not None:
            return []
        return [i for i, filled in enumerate(self.cells) if not filled]

    def is_terminal(self) -> bool:
        return self.winner is not None or all(self.cells)

    def player_to_move(self) -> Player:
        return self.turn

    def _play(self, move: int) -> "Treblecross":
        cells = self.cells[:move] + (True,) + self.cells[move + 1:]

        # Only runs through the new cell can be new
        left = move
        while left > 0 and cells[left - 1]:
            left -= 1
        right = move
        while right < self.length - 1 and cells[right + 1]:
            right += 1

        winner = self.turn if right - left + 1 >= self.run else None
        return replace(self, cells=cells, turn=self.turn.other, winner=winner)

    def _result(self) -> Outcome:
        if self.winner is None:
            return Outcome.DRAW
        return Outcome.win_for(self.winner)

    def __str__(self) -> str:
        return "".join("X" if filled else "." for filled in self.cells)


def _longest_run(cells: Tuple[bool, ...]) -> int:
    best = current = 0
    for filled in cells:
        current = current + 1 if filled else 0
        best = max(best, current)
    return best
