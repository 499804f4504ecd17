import logging
from typing import Mapping

from sqlalchemy import Engine, or_

from gamedeals.logic.errors import DuplicateGame, NoChange, NotFound
from gamedeals.logic.store import GameStore
from gamedeals.logic.validation import (
    is_same_game,
    normalize_game,
    validate_deals,
    validate_game_attributes,
)
from gamedeals.models.games import GameRecord

logger = logging.getLogger(__name__)


def validate_game(game: Mapping) -> dict:
    """Run both validators on an inbound payload and return its stored form."""
    validate_game_attributes(game)
    deals = validate_deals(game.get("deals"))
    return normalize_game({**game, "deals": deals})


def find_conflicting_game(store: GameStore, game: Mapping) -> dict | None:
    """Find a stored game sharing the (non-null) gameID or the title of `game`."""
    conditions = [GameRecord.title == game["title"]]
    if game.get("gameID") is not None:
        conditions.append(GameRecord.gameID == game["gameID"])
    return store.find_one(or_(*conditions))


def create_game(engine: Engine, game: Mapping) -> int:
    """Validate and insert a new game; return its key"""
    new_game = validate_game(game)
    store = GameStore(engine)

    # Not atomic: two concurrent creates may both pass this check
    if find_conflicting_game(store, new_game):
        raise DuplicateGame()

    game_id = store.insert_one(new_game)
    logger.info(f"Game added with ID: {game_id}")
    return game_id


def update_game(engine: Engine, game_id: int, game: Mapping) -> None:
    """Replace the game stored at `game_id` with a validated payload"""
    new_game = validate_game(game)
    store = GameStore(engine)

    existing_game = store.find_one(GameRecord.id == game_id)
    if not existing_game:
        raise NotFound()

    if is_same_game(existing_game, new_game):
        raise NoChange()

    # Zero modified also covers a record deleted since the lookup above
    if store.update_one(game_id, new_game) == 0:
        raise NotFound("Game not found or no changes made.")

    logger.info(f"Game updated with ID: {game_id}")


def select_games(engine: Engine) -> list[dict]:
    games = GameStore(engine).find_all()
    logger.info("Fetched all games")
    return games


def get_game(engine: Engine, game_id: int) -> dict:
    game = GameStore(engine).find_one(GameRecord.id == game_id)
    if not game:
        raise NotFound()
    logger.info(f"Fetched game with ID: {game_id}")
    return game


def delete_games(engine: Engine) -> int:
    """Delete every game; an empty collection reports 0"""
    deleted = GameStore(engine).delete_many()
    logger.info(f"{deleted} games deleted")
    return deleted


def delete_game(engine: Engine, game_id: int) -> None:
    if GameStore(engine).delete_one(game_id) == 0:
        raise NotFound()
    logger.info(f"Game deleted with ID: {game_id}")
