from enum import Enum
from typing import Iterator, List, Tuple

BOARD_SIZE = 5
TOTAL_GOATS = 20
CAPTURES_TO_WIN = 5

Position = Tuple[int, int]

TIGER_START: Tuple[Position, ...] = (
    (0, 0),
    (0, BOARD_SIZE - 1),
    (BOARD_SIZE - 1, 0),
    (BOARD_SIZE - 1, BOARD_SIZE - 1),
)


class Piece(str, Enum):
    EMPTY = "empty"
    GOAT = "goat"
    TIGER = "tiger"

    @property
    def opponent(self) -> "Piece":
        if self is Piece.GOAT:
            return Piece.TIGER
        if self is Piece.TIGER:
            return Piece.GOAT
        raise ValueError("EMPTY has no opponent")


def in_bounds(pos) -> bool:
    """True if `pos` is a (row, col) pair of ints inside the grid."""
    try:
        r, c = pos
    except (TypeError, ValueError):
        return False
    if not isinstance(r, int) or not isinstance(c, int) or isinstance(r, bool) or isinstance(c, bool):
        return False
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


class Board:
    """5x5 occupancy grid. Starts empty apart from a tiger in every corner."""

    def __init__(self):
        self.cells: List[List[Piece]] = [[Piece.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for r, c in TIGER_START:
            self.cells[r][c] = Piece.TIGER

    def _check(self, r: int, c: int):
        # negative indices would silently wrap around a list
        if not (0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE):
            raise IndexError(f"({r}, {c}) is off the {BOARD_SIZE}x{BOARD_SIZE} board")

    def get(self, r: int, c: int) -> Piece:
        self._check(r, c)
        return self.cells[r][c]

    def set(self, r: int, c: int, piece: Piece):
        self._check(r, c)
        self.cells[r][c] = piece

    def __getitem__(self, pos: Position) -> Piece:
        return self.get(*pos)

    def __setitem__(self, pos: Position, piece: Piece):
        self.set(pos[0], pos[1], piece)

    def clone(self) -> "Board":
        copy = Board.__new__(Board)
        copy.cells = [row[:] for row in self.cells]
        return copy

    def positions(self, piece: Piece) -> Iterator[Position]:
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                if self.cells[r][c] is piece:
                    yield (r, c)

    def count(self, piece: Piece) -> int:
        return sum(row.count(piece) for row in self.cells)

    def rows(self) -> Tuple[Tuple[Piece, ...], ...]:
        return tuple(tuple(row) for row in self.cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self):
        marks = {Piece.EMPTY: ".", Piece.GOAT: "G", Piece.TIGER: "T"}
        return "\n".join(" ".join(marks[p] for p in row) for row in self.cells)
