from typing import Any, Dict

from fastapi import APIRouter, status

from gamedeals.core.config import settings
from gamedeals.dependencies import ActiveEngine, ActiveHttpClient
from gamedeals.logic.etl import fetch_and_store_game

router = APIRouter(tags=["fetch"])


@router.post("/fetch-store", status_code=status.HTTP_200_OK)
async def trigger_fetch(engine: ActiveEngine, client: ActiveHttpClient) -> Dict[str, Any]:
    """
    Fetch one game from the CheapShark API and store it.

    Always answers 200; failures are reported in the body under "error".
    """
    return await fetch_and_store_game(engine, client, settings.CHEAPSHARK_API)
