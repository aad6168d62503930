from .board import TOTAL_GOATS, Piece
from .game import GOATS_CAPTURED, GameState

MARKS = {Piece.EMPTY: ".", Piece.GOAT: "G", Piece.TIGER: "T"}


def format_board(state: GameState) -> str:
    """Plain-text grid with row/column indices. The selected piece is bracketed."""
    size = len(state.board)
    lines = ["    " + "   ".join(str(c) for c in range(size))]
    for r, row in enumerate(state.board):
        cells = []
        for c, piece in enumerate(row):
            mark = MARKS[piece]
            cells.append(f"[{mark}]" if state.selected == (r, c) else f" {mark} ")
        lines.append(f"{r} " + " ".join(cells))
    return "\n".join(lines)


def status_message(state: GameState) -> str:
    if state.game_over:
        if state.win_reason == GOATS_CAPTURED:
            return f"Tigers win! (Captured {state.goats_captured} goats)"
        return "Goats win! Tigers are trapped!"

    side = state.turn.value.capitalize()
    if state.human_role is not None and state.turn is state.human_role:
        msg = f"Your turn as {side}. "
    else:
        msg = f"AI's turn as {side}. "

    if state.phase == "placement":
        msg += f"Place a goat ({state.goats_placed}/{TOTAL_GOATS} placed)."
    else:
        msg += f"Select and move a {state.turn.value}."
    return msg
