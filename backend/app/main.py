from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import logging
import uuid
from typing import Dict, Optional
import os

from .board import Piece
from .display import status_message
from .game import GameController, GameState as CoreState
from .api_models import GameConfig, PositionRequest, RestartRequest, GameState

logger = logging.getLogger(__name__)

app = FastAPI(title="Bagh Chal API")

# Enable CORS
app.add_middleware(
    CORSMiddleware, # type: ignore
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# In-memory store, lost on restart
games: Dict[str, GameController] = {}

def serialize_state(state: CoreState) -> GameState:
    # Piece enums are not what the frontend expects, flatten to plain strings
    board_data = [["" if p is Piece.EMPTY else p.value for p in row] for row in state.board]

    return GameState(
        board=board_data,
        turn=state.turn.value,
        phase=state.phase,
        stage=state.stage.value,
        human_role=state.human_role.value,
        goats_placed=state.goats_placed,
        goats_captured=state.goats_captured,
        selected=list(state.selected) if state.selected is not None else None,
        legal_destinations=[list(p) for p in state.legal_destinations],
        game_over=state.game_over,
        winner=state.winner.value if state.winner else None,
        win_reason=state.win_reason,
        message=status_message(state),
    )

def get_controller(game_id: str) -> GameController:
    if game_id not in games:
        raise HTTPException(status_code=404, detail="Game not found")
    return games[game_id]

@app.post("/api/games", response_model=Dict[str, str])
async def create_game(config: GameConfig):
    game_id = str(uuid.uuid4())
    # The AI answers inside the same request; any pause before showing
    # its move is up to the frontend.
    games[game_id] = GameController(
        human_role=Piece(config.role),
        goat_strategy=config.goat_strategy,
        tiger_strategy=config.tiger_strategy,
    )
    logger.info(f"Created game {game_id} (human plays {config.role})")
    return {"game_id": game_id}

@app.get("/api/games/{game_id}", response_model=GameState)
async def get_game(game_id: str):
    return serialize_state(get_controller(game_id).snapshot())

def _submit(game_id: str, pos: PositionRequest, action: str) -> GameState:
    # Illegal actions are no-ops in the controller, so this never fails
    controller = get_controller(game_id)
    state = getattr(controller, action)((pos.row, pos.col))
    return serialize_state(state)

@app.post("/api/games/{game_id}/place", response_model=GameState)
async def place(game_id: str, pos: PositionRequest):
    return _submit(game_id, pos, "submit_placement")

@app.post("/api/games/{game_id}/select", response_model=GameState)
async def select(game_id: str, pos: PositionRequest):
    return _submit(game_id, pos, "submit_selection")

@app.post("/api/games/{game_id}/move", response_model=GameState)
async def move(game_id: str, pos: PositionRequest):
    return _submit(game_id, pos, "submit_destination")

@app.post("/api/games/{game_id}/click", response_model=GameState)
async def click(game_id: str, pos: PositionRequest):
    return _submit(game_id, pos, "submit_click")

@app.post("/api/games/{game_id}/restart", response_model=GameState)
async def restart(game_id: str, req: Optional[RestartRequest] = None):
    controller = get_controller(game_id)
    role = Piece(req.role) if req and req.role else controller.human_role
    logger.info(f"Restarting game {game_id} (human plays {role.value})")
    return serialize_state(controller.initialize(role))

# Serve Frontend
frontend_path = os.path.join(os.path.dirname(__file__), "../../frontend")
if os.path.exists(frontend_path):
    app.mount("/", StaticFiles(directory=frontend_path, html=True), name="frontend")

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
    uvicorn.run(app, host="0.0.0.0", port=8000)
