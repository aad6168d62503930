from dataclasses import dataclass
from typing import List, Optional

from .board import Board, Piece, Position, in_bounds

# Fixed enumeration order: orthogonal first, then diagonals.
DIRECTIONS = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)


@dataclass(frozen=True)
class Move:
    origin: Position
    destination: Position
    capture: bool = False
    captured: Optional[Position] = None


def generate_moves(board: Board, position: Position, piece: Piece) -> List[Move]:
    """
    Legal moves for `piece` standing at `position`.

    Every piece may step to an empty neighbour in any of the eight directions.
    Tigers may also jump over an adjacent goat onto the empty cell behind it.
    An off-board position yields no moves.
    """
    if not in_bounds(position):
        return []

    r, c = position
    moves = []
    for dr, dc in DIRECTIONS:
        step = (r + dr, c + dc)
        if not in_bounds(step):
            continue
        if board[step] is Piece.EMPTY:
            moves.append(Move(position, step))

        if piece is not Piece.TIGER:
            continue
        landing = (r + 2 * dr, c + 2 * dc)
        if not in_bounds(landing):
            continue
        if board[step] is Piece.GOAT and board[landing] is Piece.EMPTY:
            moves.append(Move(position, landing, capture=True, captured=step))
    return moves


def all_moves(board: Board, piece: Piece) -> List[Move]:
    moves = []
    for pos in board.positions(piece):
        moves.extend(generate_moves(board, pos, piece))
    return moves
