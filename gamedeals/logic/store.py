"""Store adapter for the games collection."""
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy import Engine, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from gamedeals.logic.errors import StorageFailure
from gamedeals.models.games import GameRecord

REPLACEABLE_FIELDS = ("gameID", "title", "thumb", "cheapestPrice", "deals")


class GameStore:
    """Document-style access to the ``games`` table.

    Records go in and come out as plain dicts keyed by field name, with the
    store-assigned key under ``id``. Every call opens its own session on the
    shared engine; the engine itself is created once at startup.

    Driver errors are re-raised as :class:`StorageFailure`.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._log = logging.getLogger(f"gamedeals.store.{type(self).__name__}")

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with Session(self._engine) as session:
                yield session
        except SQLAlchemyError as exc:
            self._log.error("Store operation failed: %s", exc)
            raise StorageFailure(str(exc)) from exc

    def find_one(self, *conditions: Any) -> Optional[dict]:
        with self._session() as session:
            record = session.exec(select(GameRecord).where(*conditions)).first()
            return record.model_dump() if record else None

    def find_all(self) -> list[dict]:
        with self._session() as session:
            records = session.exec(select(GameRecord).order_by(GameRecord.id)).all()
            return [record.model_dump() for record in records]

    def insert_one(self, document: dict) -> int:
        """Insert a new record and return its store-assigned key."""
        with self._session() as session:
            record = GameRecord(**{field: document.get(field) for field in REPLACEABLE_FIELDS})
            session.add(record)
            session.commit()
            session.refresh(record)
            return record.id

    def update_one(self, key: int, replacement: dict) -> int:
        """Replace every field of the record at ``key``; return the number of records modified."""
        with self._session() as session:
            record = session.get(GameRecord, key)
            if record is None:
                return 0

            changed = False
            for field in REPLACEABLE_FIELDS:
                value = replacement.get(field)
                if getattr(record, field) != value:
                    setattr(record, field, value)
                    changed = True

            if not changed:
                return 0

            session.add(record)
            session.commit()
            return 1

    def delete_one(self, key: int) -> int:
        with self._session() as session:
            result = session.execute(delete(GameRecord).where(GameRecord.id == key))
            session.commit()
            return result.rowcount

    def delete_many(self, *conditions: Any) -> int:
        with self._session() as session:
            statement = delete(GameRecord)
            if conditions:
                statement = statement.where(*conditions)
            result = session.execute(statement)
            session.commit()
            return result.rowcount
