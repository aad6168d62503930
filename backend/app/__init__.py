"""
Bagh-Chal game engine and its adapters.
"""

from .board import Board, Piece, BOARD_SIZE, TOTAL_GOATS, CAPTURES_TO_WIN
from .moves import Move, generate_moves, all_moves
from .evaluator import evaluate_mobility
from .game import GameController, GameState, Stage

__all__ = [
    'Board', 'Piece', 'BOARD_SIZE', 'TOTAL_GOATS', 'CAPTURES_TO_WIN',
    'Move', 'generate_moves', 'all_moves', 'evaluate_mobility',
    'GameController', 'GameState', 'Stage',
]
