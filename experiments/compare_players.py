#!/usr/bin/env python3
"""Match an MCTS player against a baseline and test the result.

The baseline is either a uniformly random player or a second MCTS
player with its own iteration budget.

Usage:
    python experiments/compare_players.py \
        --game connect4 \
        --iterations 500 \
        --baseline mcts --baseline_iterations 50 \
        --num_games 40 \
        --seed 0
"""

import argparse
import logging
from functools import partial

from mcts_engine.comparison.arena import RandomPlayer, play_match
from mcts_engine.comparison.statistical_tests import match_significance
from mcts_engine.games import GAMES
from mcts_engine.mcts.player import MCTSPlayer
from mcts_engine.mcts.search import SearchConfig
from mcts_engine.utils.config import load_config
from mcts_engine.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Compare MCTS against a baseline")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config file (game and search sections are used)")
    parser.add_argument("--game", type=str, default=None, choices=sorted(GAMES),
                        help="Game to play")
    parser.add_argument("--iterations", type=int, default=500,
                        help="MCTS iterations per move")
    parser.add_argument("--baseline", type=str, default="random", choices=["random", "mcts"],
                        help="Opponent type")
    parser.add_argument("--baseline_iterations", type=int, default=50,
                        help="Opponent iterations per move (mcts baseline)")
    parser.add_argument("--num_games", type=int, default=20, help="Games in the match")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--alpha", type=float, default=0.05, help="Significance level")

    args = parser.parse_args()
    setup_logging()

    config = load_config(args.config) if args.config else {}
    game_config = config.get('game', {})
    name = args.game or game_config.get('name', 'connect4')
    params = game_config.get('params', {}) if name == game_config.get('name') else {}
    make_state = partial(GAMES[name], **params)

    search_section = dict(config.get('search', {}))
    search_section.update(iterations=args.iterations, time_budget=None, seed=args.seed)
    candidate = MCTSPlayer(SearchConfig.from_dict(search_section), name=f"mcts-{args.iterations}")

    if args.baseline == "random":
        baseline = RandomPlayer(seed=args.seed)
    else:
        baseline_section = dict(search_section)
        baseline_section.update(
            iterations=args.baseline_iterations,
            seed=None if args.seed is None else args.seed + 1
        )
        baseline = MCTSPlayer(SearchConfig.from_dict(baseline_section),
                              name=f"mcts-{args.baseline_iterations}")

    logger.info("=" * 60)
    logger.info(f"{candidate.name} vs {baseline.name} on {name}, "
                f"{args.num_games} games")
    logger.info("=" * 60)

    result = play_match(make_state, candidate, baseline, args.num_games)
    test = match_significance(result, alpha=args.alpha)

    lower, upper = test['confidence_interval']
    logger.info(f"W/L/D: {result.wins}/{result.losses}/{result.draws}")
    logger.info(f"Score: {test['score']:.3f} ({1 - args.alpha:.0%} CI {lower:.3f}-{upper:.3f})")
    logger.info(f"p-value: {test['p_value']:.4g} "
                f"({'significant' if test['significant'] else 'not significant'})")


if __name__ == "__main__":
    main()
