"""Shared fixtures: in-memory database, controllable clock and API client."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789abcdef0123")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import bloghub.db.base  # noqa: F401
from bloghub.api.dependencies import get_token_service
from bloghub.core.security import TokenService
from bloghub.db.session import get_db
from bloghub.main import app

TEST_SECRET = "test-secret-key-0123456789abcdef0123"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def clock():
    return FakeClock(datetime.now(timezone.utc).replace(microsecond=0))


@pytest.fixture
def token_service(clock):
    return TokenService(secret_key=TEST_SECRET, expires_delta=timedelta(hours=1), clock=clock)


@pytest.fixture
def client(engine, token_service):
    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_token_service] = lambda: token_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
