import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .ai import (
    DEFAULT_GOAT_STRATEGY,
    DEFAULT_TIGER_STRATEGY,
    GOAT_STRATEGIES,
    TIGER_STRATEGIES,
    Chooser,
)
from .board import CAPTURES_TO_WIN, TOTAL_GOATS, Board, Piece, Position, in_bounds
from .moves import Move, all_moves, generate_moves

logger = logging.getLogger(__name__)

GOATS_CAPTURED = "goats_captured"
TIGERS_TRAPPED = "tigers_trapped"


class Stage(str, Enum):
    AWAITING_PLACEMENT = "awaiting_placement"
    AWAITING_SELECTION = "awaiting_selection"
    AWAITING_DESTINATION = "awaiting_destination"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of a game, handed to adapters for rendering."""

    board: Tuple[Tuple[Piece, ...], ...]
    turn: Piece
    goats_placed: int
    goats_captured: int
    selected: Optional[Position]
    game_over: bool
    winner: Optional[Piece]
    win_reason: Optional[str]
    human_role: Optional[Piece]
    ply: int = 0
    legal_destinations: Tuple[Position, ...] = ()

    @property
    def goat_phase(self) -> str:
        return "placement" if self.goats_placed < TOTAL_GOATS else "movement"

    @property
    def phase(self) -> str:
        """Phase of the side to move. Tigers are always in movement."""
        if self.turn is Piece.GOAT:
            return self.goat_phase
        return "movement"

    @property
    def stage(self) -> Stage:
        if self.game_over:
            return Stage.GAME_OVER
        if self.phase == "placement":
            return Stage.AWAITING_PLACEMENT
        if self.selected is not None:
            return Stage.AWAITING_DESTINATION
        return Stage.AWAITING_SELECTION

    @property
    def is_human_turn(self) -> bool:
        return not self.game_over and self.turn is self.human_role

    def piece_at(self, r: int, c: int) -> Piece:
        return self.board[r][c]


AiHook = Callable[["GameController"], None]


class GameController:
    """
    Owns the live board and turn state of one game.

    Human actions come in through the submit_* methods; anything illegal is
    ignored and the unchanged state is returned. Whenever the turn passes to
    the side not played by the human, `on_ai_turn` is called with the
    controller. The default hook plays the AI move straight away; adapters
    that want a visible pause pass their own hook that waits and then calls
    `ai_move()`.
    """

    def __init__(
        self,
        human_role: Optional[Piece] = Piece.GOAT,
        chooser: Chooser = random.choice,
        on_ai_turn: Optional[AiHook] = None,
        goat_strategy: str = DEFAULT_GOAT_STRATEGY,
        tiger_strategy: str = DEFAULT_TIGER_STRATEGY,
    ):
        if goat_strategy not in GOAT_STRATEGIES:
            raise ValueError(f"Unknown goat strategy '{goat_strategy}'")
        if tiger_strategy not in TIGER_STRATEGIES:
            raise ValueError(f"Unknown tiger strategy '{tiger_strategy}'")
        self.chooser = chooser
        self.on_ai_turn: AiHook = on_ai_turn or GameController.ai_move
        self.goat_strategy = GOAT_STRATEGIES[goat_strategy]
        self.tiger_strategy = TIGER_STRATEGIES[tiger_strategy]
        self.initialize(human_role)

    # --- lifecycle ---

    def initialize(self, human_role: Optional[Piece]) -> GameState:
        """
        Start a fresh game. Goats always move first.

        `human_role=None` starts a self-play game: no hook fires and the
        caller drives both sides through `ai_move()`.
        """
        if human_role is not None:
            human_role = Piece(human_role)
            if human_role is Piece.EMPTY:
                raise ValueError("human_role must be goat, tiger or None")
        self.human_role = human_role
        self.board = Board()
        self.turn = Piece.GOAT
        self.goats_placed = 0
        self.goats_captured = 0
        self.selected: Optional[Position] = None
        self.game_over = False
        self.winner: Optional[Piece] = None
        self.win_reason: Optional[str] = None
        self.ply = 0
        logger.debug(f"New game, human plays {human_role.value if human_role else 'nobody'}")

        if self.human_role is not None and self.turn is not self.human_role:
            self.on_ai_turn(self)
        return self.snapshot()

    def snapshot(self) -> GameState:
        destinations: Tuple[Position, ...] = ()
        if self.selected is not None:
            destinations = tuple(m.destination for m in generate_moves(self.board, self.selected, self.turn))
        return GameState(
            board=self.board.rows(),
            turn=self.turn,
            goats_placed=self.goats_placed,
            goats_captured=self.goats_captured,
            selected=self.selected,
            game_over=self.game_over,
            winner=self.winner,
            win_reason=self.win_reason,
            human_role=self.human_role,
            ply=self.ply,
            legal_destinations=destinations,
        )

    # --- human actions ---

    def _human_can_act(self) -> bool:
        return not self.game_over and self.human_role is not None and self.turn is self.human_role

    def _placing(self) -> bool:
        return self.turn is Piece.GOAT and self.goats_placed < TOTAL_GOATS

    def submit_placement(self, pos) -> GameState:
        if self._human_can_act() and self._placing() and in_bounds(pos) and self.board[pos] is Piece.EMPTY:
            self._place(tuple(pos))
            self._end_turn()
        return self.snapshot()

    def submit_selection(self, pos) -> GameState:
        if self._human_can_act() and not self._placing() and in_bounds(pos) and self.board[pos] is self.turn:
            self.selected = tuple(pos)
        return self.snapshot()

    def submit_destination(self, pos) -> GameState:
        if self._human_can_act() and self.selected is not None and in_bounds(pos):
            move = self._find_move(self.selected, tuple(pos))
            if move is not None:
                self._apply(move)
                self._end_turn()
        return self.snapshot()

    def submit_click(self, pos) -> GameState:
        """Route a single cell click the way a board UI does."""
        if not self._human_can_act() or not in_bounds(pos):
            return self.snapshot()
        if self._placing():
            return self.submit_placement(pos)
        if self.board[pos] is self.turn:
            return self.submit_selection(pos)
        return self.submit_destination(pos)

    def _find_move(self, origin: Position, destination: Position) -> Optional[Move]:
        for move in generate_moves(self.board, origin, self.turn):
            if move.destination == destination:
                return move
        return None

    # --- AI ---

    def ai_move(self) -> GameState:
        """Play one AI move for the side to move and pass the turn."""
        if self.game_over:
            return self.snapshot()

        if self.turn is Piece.TIGER:
            move = self.tiger_strategy(self.board, self.chooser)
            if move is None:
                self._finish(Piece.GOAT, TIGERS_TRAPPED)
                return self.snapshot()
            self._apply(move)
        elif self._placing():
            pos = self.goat_strategy.place(self.board, self.chooser)
            if pos is not None:
                self._place(pos)
        else:
            move = self.goat_strategy.move(self.board, self.chooser)
            if move is not None:
                self._apply(move)
            else:
                logger.debug("Goats have no legal move, passing")

        self._end_turn()
        return self.snapshot()

    # --- transitions ---

    def _place(self, pos: Position):
        self.board[pos] = Piece.GOAT
        self.goats_placed += 1
        self.ply += 1
        logger.debug(f"Goat placed at {pos} ({self.goats_placed}/{TOTAL_GOATS})")

    def _apply(self, move: Move):
        piece = self.board[move.origin]
        self.board[move.destination] = piece
        self.board[move.origin] = Piece.EMPTY
        if move.capture:
            self.board[move.captured] = Piece.EMPTY
            self.goats_captured += 1
        self.ply += 1
        logger.debug(
            f"{piece.value} {move.origin} -> {move.destination}"
            + (f" captures {move.captured}" if move.capture else "")
        )

    def _end_turn(self):
        self.selected = None
        if self._check_win():
            return
        self.turn = self.turn.opponent
        if self.human_role is not None and self.turn is not self.human_role:
            self.on_ai_turn(self)

    def _check_win(self) -> bool:
        if self.goats_captured >= CAPTURES_TO_WIN:
            self._finish(Piece.TIGER, GOATS_CAPTURED)
            return True
        if not all_moves(self.board, Piece.TIGER):
            self._finish(Piece.GOAT, TIGERS_TRAPPED)
            return True
        return False

    def _finish(self, winner: Piece, reason: str):
        self.game_over = True
        self.winner = winner
        self.win_reason = reason
        self.selected = None
        logger.debug(f"Game over: {winner.value} wins ({reason})")
