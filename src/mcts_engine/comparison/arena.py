"""Head-to-head matches between players.

A player is anything with choose_move(state), observe_move(move) and
reset(). Both MCTSPlayer and RandomPlayer qualify.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..games.base import GameState, Outcome, Player
from ..utils.seed import make_rng, random_choice

logger = logging.getLogger(__name__)


class RandomPlayer:
    """Baseline that plays a uniformly random legal move."""

    def __init__(self, seed: Optional[int] = None, name: str = "random"):
        self.seed = seed
        self.name = name
        self.rng = make_rng(seed)

    def reset(self) -> None:
        pass

    def choose_move(self, state: GameState) -> Any:
        return random_choice(self.rng, state.legal_moves())

    def observe_move(self, move: Any) -> None:
        pass


@dataclass
class GameRecord:
    """Moves and result of one finished game."""
    moves: List[Any]
    outcome: Outcome
    final_state: GameState = field(repr=False)


@dataclass
class MatchResult:
    """Match tally from the first player's perspective."""
    wins: int = 0
    losses: int = 0
    draws: int = 0
    games: List[GameRecord] = field(default_factory=list, repr=False)

    @property
    def num_games(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def score(self) -> float:
        """Points per game: win 1, draw 0.5, loss 0."""
        if self.num_games == 0:
            return 0.0
        return (self.wins + 0.5 * self.draws) / self.num_games

    def summary(self) -> Dict:
        return {
            'games': self.num_games,
            'wins': self.wins,
            'losses': self.losses,
            'draws': self.draws,
            'score': self.score
        }


def play_game(
    state: GameState,
    players: Dict[Player, Any],
    on_move: Optional[Callable[[GameState, Any], None]] = None
) -> GameRecord:
    """Play one game to the end.

    Args:
        state: Starting position
        players: Player object for each side
        on_move: Called with (new_state, move) after every move

    Returns:
        GameRecord of the finished game
    """
    # The same object may play both sides
    participants = list({id(p): p for p in players.values()}.values())
    for player in participants:
        player.reset()

    moves = []
    while not state.is_terminal():
        mover = players[state.player_to_move()]
        move = mover.choose_move(state)
        state = state.apply_move(move)
        moves.append(move)

        for player in participants:
            player.observe_move(move)
        if on_move is not None:
            on_move(state, move)

    return GameRecord(moves=moves, outcome=state.outcome(), final_state=state)


def play_match(
    make_state: Callable[[], GameState],
    first: Any,
    second: Any,
    num_games: int,
    swap_sides: bool = True
) -> MatchResult:
    """Play a match and tally it from first's perspective.

    Args:
        make_state: Factory for the starting position of each game
        first: Player being evaluated
        second: Opponent
        num_games: Number of games
        swap_sides: Alternate which side first plays, starting as A

    Returns:
        MatchResult
    """
    if num_games <= 0:
        raise ValueError(f"num_games must be positive, got {num_games}")

    result = MatchResult()
    for game in range(num_games):
        side = Player.B if swap_sides and game % 2 == 1 else Player.A
        record = play_game(make_state(), {side: first, side.other: second})
        result.games.append(record)

        winner = record.outcome.winner
        if winner is None:
            result.draws += 1
        elif winner is side:
            result.wins += 1
        else:
            result.losses += 1

        logger.debug(f"Game {game + 1}/{num_games}: first as {side.value}, {record.outcome.value} "
                     f"in {len(record.moves)} moves")

    logger.info(f"Match {getattr(first, 'name', 'first')} vs {getattr(second, 'name', 'second')}: "
                f"{result.summary()}")
    return result
