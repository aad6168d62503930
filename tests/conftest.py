"""
Shared fixtures and board builders.
"""

import pytest

from backend.app.board import BOARD_SIZE, Board, Piece
from backend.app.game import GameController


def make_board(tigers=(), goats=()):
    """Board holding exactly the given pieces."""
    board = Board()
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            board.set(r, c, Piece.EMPTY)
    for pos in tigers:
        board[pos] = Piece.TIGER
    for pos in goats:
        board[pos] = Piece.GOAT
    return board


def first(candidates):
    return candidates[0]


def last(candidates):
    return candidates[-1]


def no_ai(controller):
    """Hook that leaves the AI turn pending so tests can drive it."""


def arrange(controller, board, turn, goats_placed=0, goats_captured=0):
    controller.board = board
    controller.turn = turn
    controller.goats_placed = goats_placed
    controller.goats_captured = goats_captured
    controller.selected = None


CORNERS = [(0, 0), (0, 4), (4, 0), (4, 4)]


@pytest.fixture
def goat_game():
    """Human plays goat, AI tiger always takes the first candidate."""
    return GameController(human_role=Piece.GOAT, chooser=first)


@pytest.fixture
def tiger_game():
    """Human plays tiger; the AI turn is left to the test."""
    return GameController(human_role=Piece.TIGER, chooser=first, on_ai_turn=no_ai)
