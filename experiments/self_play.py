#!/usr/bin/env python3
"""Play a game between two MCTS players and print every position.

Usage:
    python experiments/self_play.py \
        --config configs/self_play.yaml \
        --game connect4 \
        --time_budget 1.0 \
        --seed 0
"""

import argparse
import logging
from dataclasses import replace
from typing import Any, Dict

from mcts_engine.comparison.arena import play_game
from mcts_engine.games import GAMES
from mcts_engine.games.base import GameState, Player
from mcts_engine.mcts.player import MCTSPlayer
from mcts_engine.mcts.search import SearchConfig
from mcts_engine.utils.config import load_config
from mcts_engine.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge the YAML config file with command-line overrides."""
    config = load_config(args.config) if args.config else {}
    config.setdefault('game', {})
    config.setdefault('search', {})
    config.setdefault('player', {})

    if args.game is not None:
        if args.game != config['game'].get('name'):
            config['game']['params'] = {}
        config['game']['name'] = args.game
    if args.iterations is not None:
        config['search']['iterations'] = args.iterations
        if args.time_budget is None:
            config['search']['time_budget'] = None
    if args.time_budget is not None:
        config['search']['time_budget'] = args.time_budget
        if args.iterations is None:
            config['search']['iterations'] = None
    if args.exploration is not None:
        config['search']['exploration'] = args.exploration
    if args.seed is not None:
        config['search']['seed'] = args.seed
    if args.no_reuse:
        config['player']['reuse_tree'] = False

    return config


def make_game(game_config: Dict[str, Any]) -> GameState:
    name = game_config.get('name', 'connect4')
    if name not in GAMES:
        raise ValueError(f"Unknown game: {name} (choose from {sorted(GAMES)})")
    return GAMES[name](**game_config.get('params', {}))


def make_player(search_config: SearchConfig, reuse_tree: bool, side: Player) -> MCTSPlayer:
    # Offset the seed so the two sides do not mirror each other's draws
    seed = search_config.seed
    config = replace(search_config, seed=None if seed is None else seed + (0 if side is Player.A else 1))
    return MCTSPlayer(config, reuse_tree=reuse_tree, name=f"mcts-{side.value}")


def main():
    parser = argparse.ArgumentParser(description="MCTS self-play")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config file")
    parser.add_argument("--game", type=str, default=None, choices=sorted(GAMES),
                        help="Game to play")
    parser.add_argument("--iterations", type=int, default=None,
                        help="MCTS iterations per move")
    parser.add_argument("--time_budget", type=float, default=None,
                        help="Seconds of search per move")
    parser.add_argument("--exploration", type=float, default=None,
                        help="UCB1 exploration constant")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--no_reuse", action="store_true",
                        help="Start every search from a fresh tree")
    parser.add_argument("--log_file", type=str, default=None, help="Log file")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    config = build_config(args)
    search_config = SearchConfig.from_dict(config['search'])
    reuse_tree = config['player'].get('reuse_tree', True)

    state = make_game(config['game'])
    players = {
        side: make_player(search_config, reuse_tree, side)
        for side in Player
    }

    print(state)

    def show(new_state: GameState, move: Any) -> None:
        mover = players[new_state.player_to_move().other]
        result = mover.last_result
        print(f"\n{mover.name} played {move!r}")
        print(new_state)
        print(f"{result.iterations} rounds of MCTS")

    record = play_game(state, players, on_move=show)

    winner = record.outcome.winner
    print(f"\nGame ended, winner: {winner.value if winner is not None else 'None'}")
    logger.info(f"{len(record.moves)} moves played, outcome={record.outcome.value}")


if __name__ == "__main__":
    main()
