import argparse
import sys
import logging
import os
import datetime
import pandas as pd
import seaborn as sns
import matplotlib.pyplot as plt
from itertools import product

from backend.app.ai import GOAT_STRATEGIES, TIGER_STRATEGIES
from run_match import run_match_logic, MAX_TURNS

# Configure logging
logger = logging.getLogger(__name__)

def setup_logging(experiment_name, log_dir=None, level=logging.INFO):
    root = logging.getLogger()
    if root.handlers:
        root.handlers = []

    root.setLevel(level)
    formatter = logging.Formatter('%(asctime)s - %(message)s')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.datetime.now().strftime("%Y_%m_%d")
        log_filename = os.path.join(log_dir, f"{timestamp}_{experiment_name}.log")
        file_handler = logging.FileHandler(log_filename)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        logger.info(f"Logging tournament to {log_filename}")

def run_tournament(games, seed=None, max_turns=MAX_TURNS, goat_strategies=None, tiger_strategies=None):
    """
    Plays every goat strategy against every tiger strategy.

    Returns (win_rates, average_turns): DataFrames indexed by goat strategy
    with one column per tiger strategy. Win rate is from the goats' side.
    """
    goat_strategies = goat_strategies or sorted(GOAT_STRATEGIES)
    tiger_strategies = tiger_strategies or sorted(TIGER_STRATEGIES)

    win_rates = pd.DataFrame(0.0, index=goat_strategies, columns=tiger_strategies)
    average_turns = pd.DataFrame(0.0, index=goat_strategies, columns=tiger_strategies)

    for i, (goat, tiger) in enumerate(product(goat_strategies, tiger_strategies)):
        logger.info(f"--- Starting Match: goat[{goat}] vs tiger[{tiger}] ---")
        match_seed = None if seed is None else seed + i
        result = run_match_logic(goat, tiger, games, match_seed, max_turns)
        win_rates.loc[goat, tiger] = result["goat_wins"] / games if games else 0.0
        average_turns.loc[goat, tiger] = result["average_turns"]

    win_rates.index.name = "goat"
    win_rates.columns.name = "tiger"
    average_turns.index.name = "goat"
    average_turns.columns.name = "tiger"
    return win_rates, average_turns

def save_heatmap(win_rates, experiment_name, plot_filename):
    plt.figure(figsize=(6, 5))
    sns.heatmap(win_rates, annot=True, cmap='coolwarm', vmin=0, vmax=1)
    plt.title(f'Goat win rate: {experiment_name}')
    plt.tight_layout()
    plt.savefig(plot_filename)
    plt.close()
    logger.info(f"Saved results plot to {plot_filename}")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play every AI strategy pairing against each other")
    parser.add_argument("experiment_name", help="Name of the experiment")
    parser.add_argument("games", nargs='?', type=int, default=20, help="Games per pairing")
    parser.add_argument("--seed", type=int, default=None, help="Base seed for reproducible runs")
    parser.add_argument("--max-turns", type=int, default=MAX_TURNS, help="Turn limit per game")
    parser.add_argument("--log-dir", default="logs/tournament_logs", help="Directory for the log file and plot")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    setup_logging(args.experiment_name, args.log_dir, logging.DEBUG if args.debug else logging.INFO)

    win_rates, average_turns = run_tournament(args.games, args.seed, args.max_turns)

    logger.info("\nTournament Results (Goat win rate):")
    logger.info("\n" + str(win_rates))
    logger.info("\nAverage game length (turns):")
    logger.info("\n" + str(average_turns.round(1)))

    timestamp = datetime.datetime.now().strftime('%Y_%m_%d')
    try:
        save_heatmap(win_rates, args.experiment_name, os.path.join(args.log_dir, f"{timestamp}_{args.experiment_name}_results.png"))
    except (OSError, ValueError) as e:
        logger.error(f"Failed to save plot: {e}")
