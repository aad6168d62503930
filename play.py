import argparse
import logging
import time

from backend.app.board import Piece
from backend.app.display import format_board, status_message
from backend.app.game import GameController

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

def parse_position(text):
    """'2 3', '2,3' or '23' -> (2, 3). Returns None if unreadable."""
    digits = text.replace(",", " ").split()
    if len(digits) == 1 and len(digits[0]) == 2:
        digits = list(digits[0])
    if len(digits) != 2:
        return None
    try:
        return int(digits[0]), int(digits[1])
    except ValueError:
        return None

def make_delayed_hook(delay):
    # Pause so the human can follow the AI's reply
    def hook(controller):
        logger.info(f"AI is moving the {controller.turn.value}s...")
        if delay > 0:
            time.sleep(delay)
        controller.ai_move()
    return hook

def show(state):
    logger.info(f"\n{format_board(state)}\n{status_message(state)}")

def play_game(role, ai_delay=0.5, goat_strategy="heuristic", tiger_strategy="capture"):
    controller = GameController(
        human_role=role,
        on_ai_turn=make_delayed_hook(ai_delay),
        goat_strategy=goat_strategy,
        tiger_strategy=tiger_strategy,
    )
    state = controller.snapshot()
    show(state)

    while True:
        if state.game_over:
            answer = input("Play again? [y/N] ").strip().lower()
            if answer != "y":
                return state
            state = controller.initialize(role)
            show(state)
            continue

        text = input("Cell (row col), or q to quit: ").strip()
        if text.lower() in ("q", "quit", "exit"):
            return state

        pos = parse_position(text)
        if pos is None:
            logger.info("Could not read that. Enter a row and column, e.g. '2 3'.")
            continue

        before = state
        state = controller.submit_click(pos)
        if state == before:
            logger.info("Nothing happened. Pick a legal cell.")
            continue
        show(state)

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play Bagh-Chal against the computer")
    parser.add_argument("--role", choices=["goat", "tiger"], default="goat", help="Side you play (goats move first)")
    parser.add_argument("--ai-delay", type=float, default=0.5, help="Seconds to wait before the AI replies")
    parser.add_argument("--goat-strategy", choices=["heuristic", "random"], default="heuristic")
    parser.add_argument("--tiger-strategy", choices=["capture", "random"], default="capture")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    play_game(Piece(args.role), args.ai_delay, args.goat_strategy, args.tiger_strategy)
