import httpx
import pytest
from fastapi.testclient import TestClient

from gamedeals.core.database import build_engine, create_db_and_tables
from gamedeals.dependencies import get_engine, get_http_client
from gamedeals.server import app


LOOKUP_PAYLOAD = {
    "info": {
        "gameID": "612",
        "title": "LEGO Batman",
        "thumb": "https://cdn.cloudflare.steamstatic.com/steam/apps/21000/capsule_sm_120.jpg",
    },
    "cheapestPriceEver": {"price": "3.99", "date": 1543028665},
    "deals": [
        {"storeID": "1", "dealID": "tyTH88J0PXRvYALBjV3cNHd5Juq1qKcu4tG4lBiUCt4%3D", "price": "19.99"},
        {"storeID": "25", "dealID": "xVr3cYrzDjpXf3Mn8vbSbnD4E0WgTf3nYwHozVh9BQk%3D", "price": "7.99"},
        {"storeID": None, "dealID": "broken", "price": "1.00"},
        {"storeID": "3", "dealID": "no-price", "price": None},
    ],
}


def make_game(**overrides):
    game = {
        "gameID": "146",
        "title": "Batman: Arkham Asylum",
        "thumb": "https://cdn.cloudflare.steamstatic.com/steam/apps/35140/capsule_sm_120.jpg",
        "cheapestPrice": "4.99",
        "deals": [
            {"storeID": "1", "price": "19.99"},
            {"storeID": "7", "price": "4.99"},
        ],
    }
    game.update(overrides)
    return game


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://")
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def lookup_handler():
    """Replaceable handler for the mocked CheapShark transport."""
    state = {"handler": lambda request: httpx.Response(200, json=LOOKUP_PAYLOAD)}

    def dispatch(request: httpx.Request) -> httpx.Response:
        return state["handler"](request)

    dispatch.state = state
    return dispatch


@pytest.fixture()
def http_client(lookup_handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(lookup_handler))


@pytest.fixture()
def client(engine, http_client):
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_http_client] = lambda: http_client
    yield TestClient(app)
    app.dependency_overrides.clear()
