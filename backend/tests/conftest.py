"""
Shared fixtures: an isolated in-memory SQLite database per test and a
TestClient whose get_db dependency points at it.
"""
import os

# Must be set before storefront is imported
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jwt-tokens")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "0"

from typing import Generator, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront import models
from storefront.api.deps import get_db
from storefront.database.database import enable_sqlite_foreign_keys
from storefront.main import app
from tests.helpers.auth import create_test_token, get_auth_headers


@pytest.fixture(scope="function")
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    models.Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(session_factory) -> Generator[TestClient, None, None]:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return get_auth_headers(create_test_token())


@pytest.fixture
def statements(engine) -> List[str]:
    """SQL statements issued against the test engine from this point on."""
    issued: List[str] = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        issued.append(statement)

    event.listen(engine, "before_cursor_execute", _record)
    yield issued
    event.remove(engine, "before_cursor_execute", _record)


@pytest.fixture
def store(db_session):
    owner = models.User(full_name="Store Owner", phone="+1-555-0100")
    db_session.add(owner)
    db_session.flush()
    shop = models.Store(name="Main Street", user_id=owner.id)
    db_session.add(shop)
    db_session.commit()
    db_session.refresh(shop)
    return shop
