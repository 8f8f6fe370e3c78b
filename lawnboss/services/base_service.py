"""Shared service base with robust session lifecycle behavior."""

from __future__ import annotations

from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from lawnboss.core.exceptions import ConflictError, DatabaseError, NotFoundError
from lawnboss.database import db as database

ModelT = TypeVar("ModelT")


class BaseService:
    """Base class for services that operate on a SQLAlchemy session."""

    def __init__(self, db: Session | None = None) -> None:
        self.db = db or database.SessionLocal()

    def commit(self) -> None:
        """Commit current transaction and rollback on failure.

        Integrity violations surface as ConflictError, any other driver
        error as DatabaseError.
        """
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise DatabaseError(str(exc)) from exc
        except Exception:
            self.db.rollback()
            raise

    def rollback(self) -> None:
        self.db.rollback()

    def close(self) -> None:
        self.db.close()

    def get_or_raise(self, model: type[ModelT], record_id: str, label: str | None = None) -> ModelT:
        record = self.db.get(model, record_id)
        if record is None:
            raise NotFoundError(f"{label or model.__name__} not found")
        return record

    def save(self, record: ModelT) -> ModelT:
        """Add, commit and refresh a single row."""
        self.db.add(record)
        self.commit()
        self.db.refresh(record)
        return record

    def apply_updates(self, record: Any, updates: dict[str, Any]) -> Any:
        for key, value in updates.items():
            setattr(record, key, value)
        self.commit()
        self.db.refresh(record)
        return record

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type:
            self.rollback()
        self.close()
