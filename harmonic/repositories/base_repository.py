"""
Base Repository.

Thin accessor over one table. Receives its SQLAlchemy session via __init__;
every write commits immediately and database failures are rolled back and
re-raised as StorageError.
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from harmonic.database import Base, StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Base class for all repositories."""

    MODEL: type[ModelT]

    def __init__(self, db: Session) -> None:
        self._db = db

    def _fail(self, operation: str, exc: SQLAlchemyError) -> StorageError:
        self._db.rollback()
        logger.exception("%s on %s failed", operation, self.MODEL.__tablename__)
        return StorageError(f"{operation} on {self.MODEL.__tablename__} failed")

    def _query(self, **filters: Any):
        query = self._db.query(self.MODEL)
        for field, value in filters.items():
            query = query.filter(getattr(self.MODEL, field) == value)
        return query

    def _all(self, query, operation: str) -> list[ModelT]:
        try:
            return query.all()
        except SQLAlchemyError as exc:
            raise self._fail(operation, exc) from exc

    def find_all(self, **filters: Any) -> list[ModelT]:
        return self._all(self._query(**filters), "find_all")

    def find_one(self, **filters: Any) -> ModelT | None:
        try:
            return self._query(**filters).first()
        except SQLAlchemyError as exc:
            raise self._fail("find_one", exc) from exc

    def get_by_id(self, record_id: int) -> ModelT | None:
        try:
            return self._db.get(self.MODEL, record_id)
        except SQLAlchemyError as exc:
            raise self._fail("get_by_id", exc) from exc

    def insert(self, values: dict[str, Any]) -> ModelT:
        record = self.MODEL(**values)
        try:
            self._db.add(record)
            self._db.commit()
            self._db.refresh(record)
        except SQLAlchemyError as exc:
            raise self._fail("insert", exc) from exc
        return record

    def update_by_id(self, record_id: int, values: dict[str, Any]) -> ModelT | None:
        try:
            record = self._db.get(self.MODEL, record_id)
            if record is None:
                return None
            for field, value in values.items():
                setattr(record, field, value)
            self._db.commit()
            self._db.refresh(record)
        except SQLAlchemyError as exc:
            raise self._fail("update_by_id", exc) from exc
        return record

    def upsert_by_key(self, key_field: str, key: Any, values: dict[str, Any]) -> ModelT:
        try:
            record = self._query(**{key_field: key}).first()
            if record is None:
                record = self.MODEL(**{**values, key_field: key})
                self._db.add(record)
            else:
                for field, value in values.items():
                    setattr(record, field, value)
            self._db.commit()
            self._db.refresh(record)
        except SQLAlchemyError as exc:
            raise self._fail("upsert_by_key", exc) from exc
        return record

    def delete_by_id(self, record_id: int) -> int:
        """Delete one record; returns how many rows went away (0 or 1)."""
        try:
            deleted = self._db.query(self.MODEL).filter(self.MODEL.id == record_id).delete(
                synchronize_session=False
            )
            self._db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("delete_by_id", exc) from exc
        return deleted
