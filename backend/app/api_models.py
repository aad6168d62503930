from pydantic import BaseModel
from typing import List, Literal, Optional

class GameConfig(BaseModel):
    role: Literal["goat", "tiger"] = "goat" # side played by the human
    goat_strategy: Literal["heuristic", "random"] = "heuristic"
    tiger_strategy: Literal["capture", "random"] = "capture"

class PositionRequest(BaseModel):
    row: int
    col: int

class RestartRequest(BaseModel):
    role: Optional[Literal["goat", "tiger"]] = None # keep current role if omitted

class GameState(BaseModel):
    board: List[List[str]] # 5x5 grid of "", "goat", "tiger"
    turn: str
    phase: str
    stage: str
    human_role: str
    goats_placed: int
    goats_captured: int
    selected: Optional[List[int]] = None
    legal_destinations: List[List[int]]
    game_over: bool
    winner: Optional[str] = None
    win_reason: Optional[str] = None
    message: str
