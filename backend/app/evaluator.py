from .board import Board, Piece
from .moves import generate_moves


def evaluate_mobility(board: Board) -> int:
    """Number of legal tiger moves on `board`. Lower is better for the goats."""
    return sum(len(generate_moves(board, pos, Piece.TIGER)) for pos in board.positions(Piece.TIGER))
