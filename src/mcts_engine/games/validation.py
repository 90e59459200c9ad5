"""Contract checks for GameState implementations.

Plays random games from a start position and verifies at every step
that the state honours the contract the search relies on.
"""

from typing import Any, Dict, List, Optional

from ..errors import InvalidMove, PreconditionViolation
from ..utils.seed import make_rng, random_choice
from .base import GameState, Outcome, Player


def check_state(state: GameState) -> List[str]:
    """Check a single state against the contract.

    Returns:
        Human-readable violations, empty if the state conforms
    """
    violations = []
    moves = state.legal_moves()
    terminal = state.is_terminal()

    if terminal and moves:
        violations.append(f"terminal state lists legal moves: {moves}")
    if not terminal and not moves:
        violations.append("non-terminal state has no legal moves")
    if moves != state.legal_moves():
        violations.append("legal move enumeration is not deterministic")
    if not isinstance(state.player_to_move(), Player):
        violations.append(f"player_to_move returned {state.player_to_move()!r}")

    if terminal:
        if not isinstance(state.outcome(), Outcome):
            violations.append(f"outcome returned {state.outcome()!r}")
    else:
        try:
            state.outcome()
            violations.append("outcome() succeeded on a non-terminal state")
        except PreconditionViolation:
            pass

    return violations


def validate_game(
    start: GameState,
    num_games: int = 50,
    seed: Optional[int] = None,
    max_plies: int = 10_000,
    illegal_probe: Any = None
) -> Dict:
    """Random-walk fuzz test of a game implementation.

    Args:
        start: Initial position
        num_games: Number of random games to play
        seed: Random seed
        max_plies: Games longer than this are reported as non-terminating
        illegal_probe: A move value known never to be legal; if given, each
            state is checked to reject it with InvalidMove

    Returns:
        Dict with validation results:
        {
            'valid': bool,
            'violations': List[str],
            'states_checked': int,
            'games_played': int
        }
    """
    rng = make_rng(seed)
    violations: List[str] = []
    states_checked = 0

    for game in range(num_games):
        state = start
        for ply in range(max_plies + 1):
            states_checked += 1
            for problem in check_state(state):
                violations.append(f"game {game} ply {ply}: {problem}")

            if illegal_probe is not None:
                try:
                    state.apply_move(illegal_probe)
                    violations.append(f"game {game} ply {ply}: accepted illegal move {illegal_probe!r}")
                except InvalidMove:
                    pass

            moves = state.legal_moves()
            if not moves:
                break

            move = random_choice(rng, moves)
            next_state = state.apply_move(move)
            if state.legal_moves() != moves:
                violations.append(f"game {game} ply {ply}: apply_move mutated its receiver")
            state = next_state
        else:
            violations.append(f"game {game}: no terminal state within {max_plies} plies")

    return {
        'valid': not violations,
        'violations': violations,
        'states_checked': states_checked,
        'games_played': num_games
    }
