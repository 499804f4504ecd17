from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class GameRecord(SQLModel, table=True):
    """Games table model"""
    __tablename__ = "games"
    id: int | None = Field(default=None, primary_key=True)
    gameID: Optional[str] = Field(default=None, index=True, max_length=64)
    title: str = Field(index=True, max_length=255)
    thumb: Optional[str] = None
    cheapestPrice: float
    deals: list[dict] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))


class GamePayload(BaseModel):
    """Inbound game body. Fields stay loose so the validators decide what is acceptable."""
    gameID: Any = None
    title: Any = None
    thumb: Any = None
    cheapestPrice: Any = None
    deals: Any = None


class Deal(BaseModel):
    storeID: str
    price: float


class GameResponse(BaseModel):
    """Game response model for API"""
    id: int
    gameID: Optional[str] = None
    title: str
    thumb: Optional[str] = None
    cheapestPrice: float
    deals: list[Deal]


class MessageResponse(BaseModel):
    message: str
    id: Optional[int] = None
    deleted: Optional[int] = None
