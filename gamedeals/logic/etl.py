"""
Fetch-and-store pipeline for a single game from the CheapShark API.

Extract: Pull one game lookup payload from the configured endpoint
Transform: Reshape it into a game record
Load: Insert it unless a game with the same gameID is already stored
"""
import logging

import httpx
from sqlalchemy import Engine

from gamedeals.logic.errors import UpstreamFailure
from gamedeals.logic.store import GameStore
from gamedeals.logic.validation import normalize_game
from gamedeals.models.games import GameRecord

logger = logging.getLogger(__name__)


# ============== EXTRACT ==============

async def extract_game(client: httpx.AsyncClient, url: str) -> dict | None:
    """Fetch the lookup payload; None when the API answers with an empty body."""
    try:
        response = await client.get(url)
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        raise UpstreamFailure(f"CheapShark request to {url} failed: {e}") from e

    if not data:
        return None
    if not isinstance(data, dict):
        raise UpstreamFailure(f"Expected a JSON object but got {type(data).__name__}")
    return data


# ============== TRANSFORM ==============

def transform_game(game_data: dict) -> dict:
    """Select the stored fields and drop deals without a storeID or price."""
    info = game_data["info"]
    if not info.get("title"):
        raise UpstreamFailure("Lookup payload has no title")
    return {
        "gameID": info.get("gameID"),
        "title": info["title"],
        "thumb": info.get("thumb"),
        "cheapestPrice": game_data["cheapestPriceEver"]["price"],
        "deals": [
            {"storeID": deal["storeID"], "price": deal["price"]}
            for deal in game_data.get("deals", [])
            if deal.get("storeID") is not None and deal.get("price") is not None
        ],
    }


# ============== LOAD ==============

def load_game(store: GameStore, game: dict) -> dict:
    existing_game = store.find_one(GameRecord.gameID == game["gameID"])
    if existing_game:
        logger.info("Game already exists in database.")
        return {"message": "Game already exists"}

    game_id = store.insert_one(game)
    logger.info(f"Game successfully inserted: {game_id}")
    return {"message": "Game inserted successfully!", "id": game_id}


# ============== PIPELINE ==============

async def fetch_and_store_game(engine: Engine, client: httpx.AsyncClient, url: str) -> dict:
    """
    Run the pipeline for one game.

    Never raises: network, payload and storage errors are logged and
    reported in the returned dict under "error".
    """
    try:
        game_data = await extract_game(client, url)
        if game_data is None:
            logger.warning("No valid data received from API.")
            return {"error": "Invalid API response"}

        game = normalize_game(transform_game(game_data))
        return load_game(GameStore(engine), game)
    except Exception:
        logger.exception("Error fetching and storing game data")
        return {"error": "Failed to fetch/store game data"}
