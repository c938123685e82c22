from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional

from .config import EngineConfig, load_config
from .game import Game, GameError

class MoveRequest(BaseModel):
    x: int
    y: int

class GameState(BaseModel):
    grid: List[List[int]]
    to_move: int
    black: int
    white: int
    legal: List[List[int]]
    terminal: bool
    winner: Optional[int]
    last_move: Optional[MoveRequest] = None

def create_app(config: Optional[EngineConfig] = None) -> FastAPI:
    app = FastAPI(title="Reversi AI Engine")

    # Enable CORS for local development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allow all origins for local dev
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One game per process
    app.state.game = Game(config if config is not None else load_config())

    def current_state() -> GameState:
        return GameState(**app.state.game.state())

    @app.post("/new", response_model=GameState)
    async def new_game():
        """Start a new game"""
        app.state.game.reset()
        return current_state()

    @app.get("/state", response_model=GameState)
    async def get_state():
        """Get current game state"""
        return current_state()

    @app.post("/move", response_model=GameState)
    async def make_move(move: MoveRequest):
        """Commit a human move"""
        game = app.state.game
        try:
            game.play(move.x, move.y)
        except GameError as e:
            raise HTTPException(
                status_code=400,
                detail={
                    "error": str(e),
                    "requested": {"x": move.x, "y": move.y},
                    "to_move": game.board.to_move,
                    "legal": game.board.legal_moves(),
                },
            )
        return current_state()

    @app.post("/ai_move", response_model=GameState)
    async def ai_move():
        """AI plays its side, passing if it has no legal move"""
        try:
            app.state.game.ai_turn()
        except GameError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return current_state()

    @app.post("/pass", response_model=GameState)
    async def pass_move():
        """Perform a human pass if no legal moves exist"""
        try:
            app.state.game.pass_turn()
        except GameError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return current_state()

    @app.get("/info")
    async def get_info():
        """Get engine information"""
        game = app.state.game
        return {
            "engine": game.ai.kind.value.capitalize(),
            "strategy": game.ai.kind.value,
            "max_depth": game.ai.max_depth,
            "size": game.board.size,
            "human_color": game.human_color,
        }

    return app
