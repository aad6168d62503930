"""
Move generator tests.
"""

import random

import pytest

from backend.app.board import BOARD_SIZE, Board, Piece, in_bounds
from backend.app.moves import DIRECTIONS, Move, all_moves, generate_moves

from conftest import make_board


def destinations(moves):
    return {m.destination for m in moves}


def random_board(rng):
    cells = [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
    rng.shuffle(cells)
    goats = cells[4:4 + rng.randint(0, 20)]
    return make_board(tigers=cells[:4], goats=goats)


class TestSimpleMoves:
    """Single steps in the eight directions"""

    def test_corner_tiger_after_center_goat(self):
        board = Board()
        board[(2, 2)] = Piece.GOAT

        moves = generate_moves(board, (0, 0), Piece.TIGER)

        assert destinations(moves) == {(0, 1), (1, 0), (1, 1)}
        assert not any(m.capture for m in moves)

    def test_center_piece_has_eight_moves_in_direction_order(self):
        board = make_board()
        moves = generate_moves(board, (2, 2), Piece.GOAT)

        assert [m.destination for m in moves] == [(2 + dr, 2 + dc) for dr, dc in DIRECTIONS]

    def test_occupied_neighbours_are_skipped(self):
        board = make_board(tigers=[(0, 0)], goats=[(0, 1), (1, 0)])
        moves = generate_moves(board, (0, 0), Piece.TIGER)

        assert (0, 1) not in destinations(moves)
        assert (1, 0) not in destinations(moves)
        assert (1, 1) in destinations(moves)

    def test_off_board_position_yields_nothing(self):
        board = Board()
        assert generate_moves(board, (5, 0), Piece.TIGER) == []
        assert generate_moves(board, (-1, -1), Piece.GOAT) == []


class TestCaptures:
    """Tiger jumps over goats"""

    def test_horizontal_capture(self):
        board = make_board(tigers=[(2, 0)], goats=[(2, 1)])
        moves = generate_moves(board, (2, 0), Piece.TIGER)

        assert Move((2, 0), (2, 2), capture=True, captured=(2, 1)) in moves

    def test_diagonal_capture(self):
        board = make_board(tigers=[(0, 0)], goats=[(1, 1)])
        moves = generate_moves(board, (0, 0), Piece.TIGER)

        assert Move((0, 0), (2, 2), capture=True, captured=(1, 1)) in moves

    def test_capture_blocked_by_occupied_landing(self):
        board = make_board(tigers=[(2, 0)], goats=[(2, 1), (2, 2)])
        moves = generate_moves(board, (2, 0), Piece.TIGER)

        assert not any(m.capture for m in moves)

    def test_tigers_do_not_jump_tigers(self):
        board = make_board(tigers=[(2, 0), (2, 1)])
        moves = generate_moves(board, (2, 0), Piece.TIGER)

        assert not any(m.capture for m in moves)

    def test_no_capture_off_the_edge(self):
        board = make_board(tigers=[(0, 1)], goats=[(0, 0)])
        moves = generate_moves(board, (0, 1), Piece.TIGER)

        assert not any(m.capture for m in moves)

    def test_goats_never_capture(self):
        board = make_board(tigers=[(2, 1)], goats=[(2, 0)])
        moves = generate_moves(board, (2, 0), Piece.GOAT)

        assert (2, 2) not in destinations(moves)
        assert not any(m.capture for m in moves)


class TestMoveProperties:
    """Every generated move is legal on random boards"""

    @pytest.mark.parametrize("seed", range(5))
    def test_generated_moves_are_legal(self, seed):
        rng = random.Random(seed)
        for _ in range(40):
            board = random_board(rng)
            for piece in (Piece.GOAT, Piece.TIGER):
                for move in all_moves(board, piece):
                    assert in_bounds(move.destination)
                    assert board[move.destination] is Piece.EMPTY
                    assert board[move.origin] is piece
                    if move.capture:
                        assert piece is Piece.TIGER
                        assert in_bounds(move.captured)
                        assert board[move.captured] is Piece.GOAT
                        r, c = move.origin
                        mr, mc = move.captured
                        assert move.destination == (2 * mr - r, 2 * mc - c)
                    else:
                        assert move.captured is None

    def test_generation_does_not_mutate(self):
        board = make_board(tigers=[(2, 0)], goats=[(2, 1)])
        before = board.clone()
        all_moves(board, Piece.TIGER)
        all_moves(board, Piece.GOAT)
        assert board == before
