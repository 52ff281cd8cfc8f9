from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Tuple
from ..models.game import GoGame
from ..models.go_board import GroupInfo
from ..services.input_gate import FrameGate
import logging

logger = logging.getLogger(__name__)

router = APIRouter()  # No prefix here

UNDO_KEYS = {"z", "Z"}
REDO_KEYS = {"x", "X"}


class NewGameRequest(BaseModel):
    size: Optional[int] = Field(default=None, ge=1)


class MoveRequest(BaseModel):
    x: int
    y: int


class KeyRequest(BaseModel):
    key: str


class WheelRequest(BaseModel):
    delta_y: float


class LegalResponse(BaseModel):
    x: int
    y: int
    legal: bool


class GameState(BaseModel):
    board: List[List[str]]
    size: int
    current_color: str
    captures: Dict[str, int]
    can_undo: bool
    can_redo: bool
    last_move: Optional[Tuple[int, int]] = None
    captured: Optional[List[Tuple[int, int]]] = None
    changed: Optional[bool] = None


def get_current_game(request: Request) -> GoGame:
    """Get current game or raise error if no game exists"""
    game = getattr(request.app.state, "game", None)
    if game is None:
        raise HTTPException(
            status_code=400, detail="No game exists. Please create a new game first."
        )
    return game


def build_state(game: GoGame, **extra) -> GameState:
    return GameState(
        board=game.get_board_state(),
        size=game.size,
        current_color=game.current_color.value,
        captures={color.value: count for color, count in game.captures.items()},
        can_undo=game.can_undo(),
        can_redo=game.can_redo(),
        last_move=game.get_last_move(),
        **extra,
    )


@router.post("/game/new")
async def create_new_game(request: Request, body: Optional[NewGameRequest] = None) -> GameState:
    """Create a new game"""
    size = body.size if body is not None and body.size is not None else request.app.state.settings.board_size
    game = GoGame(size)
    request.app.state.game = game
    request.app.state.wheel_gate.reset()
    logger.info(f"Created new {size}x{size} game")
    return build_state(game)


@router.get("/state")
async def get_state(request: Request) -> GameState:
    return build_state(get_current_game(request))


@router.get("/legal")
async def check_move(request: Request, x: int, y: int) -> LegalResponse:
    game = get_current_game(request)
    return LegalResponse(x=x, y=y, legal=game.can_play(x, y))


@router.post("/move")
async def make_move(request: Request, move: MoveRequest) -> GameState:
    game = get_current_game(request)

    # Validate coordinates
    if not game.board.is_valid_position(move.x, move.y):
        raise HTTPException(status_code=400, detail="Invalid coordinates")

    if not game.can_play(move.x, move.y):
        logger.info(f"Rejected {game.current_color.value} move at ({move.x}, {move.y})")
        raise HTTPException(status_code=400, detail="Illegal move")

    captured = game.play(move.x, move.y)
    return build_state(game, captured=captured)


@router.post("/undo")
async def undo_move(request: Request) -> GameState:
    game = get_current_game(request)

    if not game.undo():
        raise HTTPException(status_code=400, detail="No moves to undo")

    return build_state(game)


@router.post("/redo")
async def redo_move(request: Request) -> GameState:
    game = get_current_game(request)

    if not game.redo():
        raise HTTPException(status_code=400, detail="No moves to redo")

    return build_state(game)


@router.post("/key")
async def handle_key(request: Request, event: KeyRequest) -> GameState:
    """Keyboard shortcuts: z undoes, x redoes, anything else is ignored"""
    game = get_current_game(request)

    if event.key in UNDO_KEYS:
        changed = game.undo()
    elif event.key in REDO_KEYS:
        changed = game.redo()
    else:
        changed = False

    return build_state(game, changed=changed)


@router.post("/wheel")
async def handle_wheel(request: Request, event: WheelRequest) -> GameState:
    """Scrolling down undoes, scrolling up redoes, one step per frame"""
    game = get_current_game(request)
    gate: FrameGate = request.app.state.wheel_gate

    if not gate.admit():
        logger.debug("Dropped wheel event within the current frame")
        return build_state(game, changed=False)

    changed = game.undo() if event.delta_y > 0 else game.redo()
    return build_state(game, changed=changed)


@router.get("/group")
async def get_group(request: Request, x: int, y: int) -> GroupInfo:
    game = get_current_game(request)

    if not game.board.is_valid_position(x, y):
        raise HTTPException(status_code=400, detail="Invalid coordinates")

    info = game.board.analyze_group(x, y)
    if info is None:
        raise HTTPException(status_code=404, detail="No stone at this position")
    return info
