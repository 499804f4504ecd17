import logging

from fastapi import APIRouter, HTTPException, status

from gamedeals.dependencies import ActiveEngine
from gamedeals.logic.errors import GameError, NotFound
from gamedeals.logic.games import (
    create_game,
    delete_game,
    delete_games,
    get_game,
    select_games,
    update_game,
)
from gamedeals.models.games import GamePayload, GameResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/games",
    tags=["games"],
    responses={status.HTTP_404_NOT_FOUND: {"description": "Not found"}},
)


def _rejection(error: GameError) -> HTTPException:
    logger.warning(f"Error: {error}")
    if isinstance(error, NotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def add_game(engine: ActiveEngine, game: GamePayload):
    """Create a new game"""
    try:
        game_id = create_game(engine, game.model_dump())
    except GameError as e:
        raise _rejection(e)
    return MessageResponse(message=f"Game added with ID: {game_id}", id=game_id)


@router.put("/{game_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def edit_game(engine: ActiveEngine, game_id: int, game: GamePayload):
    """Replace an existing game"""
    try:
        update_game(engine, game_id, game.model_dump())
    except GameError as e:
        raise _rejection(e)
    return MessageResponse(message=f"Game updated with ID: {game_id}", id=game_id)


@router.get("", response_model=list[GameResponse], status_code=status.HTTP_200_OK)
async def get_games(engine: ActiveEngine):
    return select_games(engine)


@router.get("/{game_id}", response_model=GameResponse, status_code=status.HTTP_200_OK)
async def get_game_by_id(engine: ActiveEngine, game_id: int):
    try:
        return get_game(engine, game_id)
    except GameError as e:
        raise _rejection(e)


@router.delete("", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def remove_games(engine: ActiveEngine):
    deleted = delete_games(engine)
    return MessageResponse(message=f"{deleted} games deleted successfully", deleted=deleted)


@router.delete("/{game_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def remove_game(engine: ActiveEngine, game_id: int):
    try:
        delete_game(engine, game_id)
    except GameError as e:
        raise _rejection(e)
    return MessageResponse(message="Game deleted successfully", id=game_id)
