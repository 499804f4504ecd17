from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from gamedeals.core.config import settings


def build_engine(database_url: str = settings.DATABASE_URL, echo: bool = settings.SQL_ECHO) -> Engine:
    """Create the process-wide engine for the games store."""
    if database_url.startswith("sqlite"):
        # In-memory SQLite must share one connection across threads
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def create_db_and_tables(engine: Engine) -> None:
    # Register the table models on the metadata before creating them
    import gamedeals.models.games  # noqa: F401

    SQLModel.metadata.create_all(engine)
