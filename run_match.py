import argparse
import logging
import os
import json
import random

from backend.app.ai import GOAT_STRATEGIES, TIGER_STRATEGIES
from backend.app.board import Piece
from backend.app.game import GameController

logger = logging.getLogger(__name__)

MAX_TURNS = 200

def play_single_game(goat_strategy="heuristic", tiger_strategy="capture", rng=None, max_turns=MAX_TURNS):
    """
    Plays one AI-vs-AI game.

    Returns (winner_code, turns, final_state, termination_reason) where
    winner_code is 'G', 'T' or None when the turn limit was hit.
    """
    rng = rng or random.Random()
    controller = GameController(
        human_role=None,
        chooser=rng.choice,
        goat_strategy=goat_strategy,
        tiger_strategy=tiger_strategy,
    )
    state = controller.snapshot()

    turns = 0
    while not state.game_over and turns < max_turns:
        state = controller.ai_move()
        turns += 1
        logger.debug(f"Turn {turns}: placed={state.goats_placed} captured={state.goats_captured}")

    if not state.game_over:
        return None, turns, state, "Turn limit"

    winner_code = 'G' if state.winner is Piece.GOAT else 'T'
    return winner_code, turns, state, state.win_reason

def run_match_logic(goat_strategy, tiger_strategy, games, seed=None, max_turns=MAX_TURNS):
    rng = random.Random(seed)

    goat_wins = 0
    tiger_wins = 0
    unfinished = 0
    reasons = {}
    lengths = []

    for game_idx in range(1, games + 1):
        winner, turns, state, reason = play_single_game(goat_strategy, tiger_strategy, rng, max_turns)
        lengths.append(turns)
        reasons[reason] = reasons.get(reason, 0) + 1

        if winner == 'G':
            goat_wins += 1
        elif winner == 'T':
            tiger_wins += 1
        else:
            unfinished += 1

        logger.info(f"Game {game_idx}/{games}: {winner or 'none'} ({reason}) after {turns} turns, {state.goats_captured} captured")

    logger.info(f"Match Result: goat[{goat_strategy}] {goat_wins}, tiger[{tiger_strategy}] {tiger_wins}, unfinished {unfinished}")

    return {
        "goat_strategy": goat_strategy,
        "tiger_strategy": tiger_strategy,
        "games": games,
        "goat_wins": goat_wins,
        "tiger_wins": tiger_wins,
        "unfinished": unfinished,
        "reasons": reasons,
        "average_turns": sum(lengths) / len(lengths) if lengths else 0.0,
    }

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run AI-vs-AI Bagh-Chal games")
    parser.add_argument("games", type=int, nargs='?', default=10, help="Number of games")
    parser.add_argument("--goat-strategy", choices=sorted(GOAT_STRATEGIES), default="heuristic")
    parser.add_argument("--tiger-strategy", choices=sorted(TIGER_STRATEGIES), default="capture")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games")
    parser.add_argument("--max-turns", type=int, default=MAX_TURNS, help="Turn limit per game")
    parser.add_argument("--output", metavar="FILE", help="Write the match summary as JSON to FILE")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format='%(asctime)s - %(message)s')

    result = run_match_logic(args.goat_strategy, args.tiger_strategy, args.games, args.seed, args.max_turns)

    if args.output:
        directory = os.path.dirname(args.output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(args.output, "w") as f:
            json.dump(result, f, indent=2)
        logger.info(f"Match result saved to {args.output}")
