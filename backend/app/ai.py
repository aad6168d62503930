import logging
import random
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from .board import Board, Piece, Position
from .evaluator import evaluate_mobility
from .moves import Move, all_moves

logger = logging.getLogger(__name__)

Chooser = Callable[[Sequence[Any]], Any]


def empty_cells(board: Board) -> List[Position]:
    return list(board.positions(Piece.EMPTY))


def simulate_placement(board: Board, pos: Position) -> Board:
    sim = board.clone()
    sim[pos] = Piece.GOAT
    return sim


def simulate_move(board: Board, move: Move) -> Board:
    sim = board.clone()
    sim[move.destination] = sim[move.origin]
    sim[move.origin] = Piece.EMPTY
    if move.capture:
        sim[move.captured] = Piece.EMPTY
    return sim


def best_candidates(candidates: Sequence[Any], score: Callable[[Any], int]) -> Tuple[List[Any], Optional[int]]:
    """Candidates sharing the minimum score, in their original order."""
    best: List[Any] = []
    best_score = None
    for candidate in candidates:
        s = score(candidate)
        if best_score is None or s < best_score:
            best, best_score = [candidate], s
        elif s == best_score:
            best.append(candidate)
    return best, best_score


# --- Tiger ---

def choose_tiger_move(board: Board, chooser: Chooser = random.choice) -> Optional[Move]:
    """Random tiger move, restricted to captures when any capture exists."""
    moves = all_moves(board, Piece.TIGER)
    if not moves:
        return None
    captures = [m for m in moves if m.capture]
    if captures:
        return chooser(captures)
    return chooser(moves)


def random_tiger_move(board: Board, chooser: Chooser = random.choice) -> Optional[Move]:
    moves = all_moves(board, Piece.TIGER)
    return chooser(moves) if moves else None


# --- Goat ---

def choose_goat_placement(board: Board, chooser: Chooser = random.choice) -> Optional[Position]:
    """Empty cell whose placement leaves the tigers the fewest moves."""
    best, score = best_candidates(empty_cells(board), lambda pos: evaluate_mobility(simulate_placement(board, pos)))
    if not best:
        return None
    logger.debug(f"Goat placement: {len(best)} candidates at tiger mobility {score}")
    return chooser(best)


def choose_goat_move(board: Board, chooser: Chooser = random.choice) -> Optional[Move]:
    """Goat move that leaves the tigers the fewest moves."""
    best, score = best_candidates(all_moves(board, Piece.GOAT), lambda m: evaluate_mobility(simulate_move(board, m)))
    if not best:
        return None
    logger.debug(f"Goat move: {len(best)} candidates at tiger mobility {score}")
    return chooser(best)


def random_goat_placement(board: Board, chooser: Chooser = random.choice) -> Optional[Position]:
    cells = empty_cells(board)
    return chooser(cells) if cells else None


def random_goat_move(board: Board, chooser: Chooser = random.choice) -> Optional[Move]:
    moves = all_moves(board, Piece.GOAT)
    return chooser(moves) if moves else None


class GoatStrategy(NamedTuple):
    place: Callable[[Board, Chooser], Optional[Position]]
    move: Callable[[Board, Chooser], Optional[Move]]


GOAT_STRATEGIES: Dict[str, GoatStrategy] = {
    "heuristic": GoatStrategy(choose_goat_placement, choose_goat_move),
    "random": GoatStrategy(random_goat_placement, random_goat_move),
}

TIGER_STRATEGIES: Dict[str, Callable[[Board, Chooser], Optional[Move]]] = {
    "capture": choose_tiger_move,
    "random": random_tiger_move,
}

DEFAULT_GOAT_STRATEGY = "heuristic"
DEFAULT_TIGER_STRATEGY = "capture"
