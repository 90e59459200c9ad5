"""Connect-Four rules engine.

Board is stored column-major with row 0 at the bottom, so a move is a
column index and the disc lands at the first free row.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from .base import GameState, Outcome, Player

Column = Tuple[Optional[Player], ...]

SYMBOLS = {Player.A: "R", Player.B: "Y", None: "."}

# (dx, dy) line directions; the opposite direction is walked too
DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))


@dataclass(frozen=True)
class ConnectFour(GameState):
    """Connect-Four position.

    Attributes:
        width: Number of columns
        height: Number of rows
        connect: Discs in a line needed to win
        board: One tuple per column, bottom row first
        turn: Side to move
        winner: Winning side once a line is made
    """
    width: int = 7
    height: int = 6
    connect: int = 4
    board: Tuple[Column, ...] = field(default=())
    turn: Player = Player.A
    winner: Optional[Player] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Board dimensions must be positive")
        if self.connect < 1:
            raise ValueError(f"connect must be at least 1, got {self.connect}")
        if not self.board:
            empty = tuple((None,) * self.height for _ in range(self.width))
            object.__setattr__(self, "board", empty)
        elif len(self.board) != self.width or any(len(c) != self.height for c in self.board):
            raise ValueError("Board shape does not match width and height")

    def legal_moves(self) -> List[int]:
        if self.winner is not None:
            return []
        return [col for col in range(self.width) if self.board[col][-1] is None]

    def is_terminal(self) -> bool:
        return self.winner is not None or all(c[-1] is not None for c in self.board)

    def player_to_move(self) -> Player:
        return self.turn

    def _play(self, move: int) -> "ConnectFour":
        column = self.board[move]
        row = column.index(None)
        new_column = column[:row] + (self.turn,) + column[row + 1:]
        board = self.board[:move] + (new_column,) + self.board[move + 1:]

        winner = self.turn if self._makes_line(board, move, row) else None
        return replace(self, board=board, turn=self.turn.other, winner=winner)

    def _result(self) -> Outcome:
        if self.winner is None:
            return Outcome.DRAW
        return Outcome.win_for(self.winner)

    def _makes_line(self, board: Tuple[Column, ...], col: int, row: int) -> bool:
        """Check whether the disc at (col, row) completes a line."""
        player = board[col][row]
        for dx, dy in DIRECTIONS:
            count = 1
            for sign in (1, -1):
                x, y = col + sign * dx, row + sign * dy
                while 0 <= x < self.width and 0 <= y < self.height and board[x][y] is player:
                    count += 1
                    x += sign * dx
                    y += sign * dy
            if count >= self.connect:
                return True
        return False

    def disc_at(self, col: int, row: int) -> Optional[Player]:
        """Disc at (col, row), row 0 being the bottom."""
        return self.board[col][row]

    def __str__(self) -> str:
        lines = []
        for row in reversed(range(self.height)):
            lines.append(" ".join(SYMBOLS[self.board[col][row]] for col in range(self.width)))
        lines.append(" ".join(str(col) for col in range(self.width)))
        return "\n".join(lines)
