from typing import Annotated

import httpx
from fastapi import Depends
from sqlalchemy import Engine
from starlette.requests import HTTPConnection


async def get_engine(request: HTTPConnection) -> Engine:
    return request.state.engine


async def get_http_client(request: HTTPConnection) -> httpx.AsyncClient:
    return request.state.http_client


ActiveEngine = Annotated[Engine, Depends(get_engine)]

ActiveHttpClient = Annotated[httpx.AsyncClient, Depends(get_http_client)]
