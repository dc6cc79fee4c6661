"""Shared fixtures: in-memory database, row stores and an API client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.db.session import get_db
from app.db.store import RowStore, SQLModelRowStore, StoreErrorKind, StoreResult
from app.main import app


class FailingStore(RowStore):
    """RowStore whose reads and/or writes always fail."""

    def __init__(self, fail_reads: bool = True, fail_writes: bool = True):
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.writes = []

    def get(self, model, **filters):
        if self.fail_reads:
            return StoreResult.failure(StoreErrorKind.READ_FAILED, "connection refused")
        return StoreResult.failure(StoreErrorKind.NOT_FOUND, "empty")

    def select(self, model, order_by=None, descending=False, limit=None, at_least=None, **filters):
        if self.fail_reads:
            return StoreResult.failure(StoreErrorKind.READ_FAILED, "connection refused")
        return StoreResult.success([])

    def upsert(self, row):
        return self._write(row)

    def insert(self, row):
        return self._write(row)

    def insert_many(self, rows):
        if self.fail_writes:
            return StoreResult.failure(StoreErrorKind.WRITE_FAILED, "disk full")
        self.writes.extend(rows)
        return StoreResult.success(list(rows))

    def _write(self, row):
        if self.fail_writes:
            return StoreResult.failure(StoreErrorKind.WRITE_FAILED, "disk full")
        self.writes.append(row)
        return StoreResult.success(row)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session) -> SQLModelRowStore:
    return SQLModelRowStore(session)


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def client(engine):
    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
