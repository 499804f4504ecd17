import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gamedeals.core.config import settings
from gamedeals.core.database import build_engine, create_db_and_tables
from gamedeals.logic.errors import StorageFailure
from gamedeals.routers.fetch import fetch
from gamedeals.routers.games import games

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    create_db_and_tables(engine)
    async with httpx.AsyncClient(timeout=settings.CHEAPSHARK_TIMEOUT) as http_client:
        yield {"engine": engine, "http_client": http_client}
    engine.dispose()

app = FastAPI(
    title="Game Deals API",
    description="Game deal records with CheapShark refresh",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(games.router)
app.include_router(fetch.router)


@app.exception_handler(StorageFailure)
async def storage_failure_handler(request: Request, exc: StorageFailure):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/")
async def root():
    return {"message": "Game Deals API"}
