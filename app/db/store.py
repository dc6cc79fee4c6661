"""
Row store: the single persistence seam used by every repository.

The adaptive services never talk to the database directly.  They go
through typed repositories, which in turn call a :class:`RowStore`:

    get(model, **filters)            -> StoreResult[row]
    select(model, ..., **filters)    -> StoreResult[list[row]]
    upsert(row)                      -> StoreResult[row]
    insert(row) / insert_many(rows)  -> StoreResult[row | list[row]]

``filters`` are equality matches.  ``select`` also takes ``at_least``, a
mapping of column to lower bound (``column >= value``) used for date
windows, so old rows are never read.

No method raises for storage problems.  Each one returns a
:class:`StoreResult` carrying either the data or a :class:`StoreErrorKind`,
so callers can apply the degrade-to-defaults policy explicitly.

:class:`SQLModelRowStore` is the concrete adapter over a SQLModel
``Session``.  Upserts use ``Session.merge`` on the primary key, which
gives last-write-wins semantics with no optimistic concurrency check.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Mapping, Optional, Sequence, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

logger = logging.getLogger(__name__)

T = TypeVar("T")
RowT = TypeVar("RowT", bound=SQLModel)


class StoreErrorKind(str, Enum):
    """Why a store call produced no data."""
    NOT_FOUND = "not_found"
    READ_FAILED = "read_failed"
    WRITE_FAILED = "write_failed"
    INVALID_ROW = "invalid_row"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Either ``data`` or an ``error`` (never both)."""

    data: Optional[T] = None
    error: Optional[StoreErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: T) -> "StoreResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: StoreErrorKind, message: str = "") -> "StoreResult[T]":
        return cls(error=error, message=message)


class RowStore(ABC):
    """Abstract per-table read/write interface."""

    @abstractmethod
    def get(self, model: Type[RowT], **filters: Any) -> StoreResult[RowT]:
        """Return the single row matching ``filters`` (``NOT_FOUND`` if none)."""

    @abstractmethod
    def select(
        self,
        model: Type[RowT],
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        at_least: Optional[Mapping[str, Any]] = None,
        **filters: Any,
    ) -> StoreResult[list[RowT]]:
        """Return all rows matching ``filters`` and ``at_least`` (possibly empty)."""

    @abstractmethod
    def upsert(self, row: RowT) -> StoreResult[RowT]:
        """Insert or replace ``row`` by primary key."""

    @abstractmethod
    def insert(self, row: RowT) -> StoreResult[RowT]:
        """Insert a new row."""

    @abstractmethod
    def insert_many(self, rows: Sequence[RowT]) -> StoreResult[list[RowT]]:
        """Insert several rows in one transaction."""


class SQLModelRowStore(RowStore):
    """:class:`RowStore` backed by a SQLModel session."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, model: Type[RowT], **filters: Any) -> StoreResult[RowT]:
        statement = select(model)
        for column, value in filters.items():
            statement = statement.where(getattr(model, column) == value)
        try:
            row = self.session.exec(statement).first()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Read from %s failed: %s", model.__tablename__, exc)
            return StoreResult.failure(StoreErrorKind.READ_FAILED, str(exc))

        if row is None:
            return StoreResult.failure(
                StoreErrorKind.NOT_FOUND,
                f"No {model.__tablename__} row for {filters}",
            )
        return StoreResult.success(row)

    def select(
        self,
        model: Type[RowT],
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        at_least: Optional[Mapping[str, Any]] = None,
        **filters: Any,
    ) -> StoreResult[list[RowT]]:
        statement = select(model)
        for column, value in filters.items():
            statement = statement.where(getattr(model, column) == value)
        for column, value in (at_least or {}).items():
            statement = statement.where(getattr(model, column) >= value)
        if order_by is not None:
            column = getattr(model, order_by)
            statement = statement.order_by(column.desc() if descending else column)
        if limit is not None:
            statement = statement.limit(limit)
        try:
            rows = list(self.session.exec(statement).all())
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Select from %s failed: %s", model.__tablename__, exc)
            return StoreResult.failure(StoreErrorKind.READ_FAILED, str(exc))
        return StoreResult.success(rows)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def upsert(self, row: RowT) -> StoreResult[RowT]:
        try:
            merged = self.session.merge(row)
            self.session.commit()
            self.session.refresh(merged)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Upsert into %s failed: %s", row.__tablename__, exc)
            return StoreResult.failure(StoreErrorKind.WRITE_FAILED, str(exc))
        return StoreResult.success(merged)

    def insert(self, row: RowT) -> StoreResult[RowT]:
        try:
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Insert into %s failed: %s", row.__tablename__, exc)
            return StoreResult.failure(StoreErrorKind.WRITE_FAILED, str(exc))
        return StoreResult.success(row)

    def insert_many(self, rows: Sequence[RowT]) -> StoreResult[list[RowT]]:
        try:
            self.session.add_all(list(rows))
            self.session.commit()
            for row in rows:
                self.session.refresh(row)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Bulk insert failed: %s", exc)
            return StoreResult.failure(StoreErrorKind.WRITE_FAILED, str(exc))
        return StoreResult.success(list(rows))
