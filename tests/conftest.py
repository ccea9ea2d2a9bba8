"""
Shared fixtures for Cart Service tests.

Every test gets its own in-memory SQLite database (StaticPool keeps the
single connection alive, foreign keys enabled) with the tables created.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cart_api.api import create_app
from cart_api.data.database import Base, enable_sqlite_foreign_keys, get_db
from cart_api.data import models  # noqa: F401
from cart_api.repos.cart_repo import CartRepo
from cart_api.services.cart_service import CartService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def repo(db):
    return CartRepo(db)


@pytest.fixture
def service(db, repo):
    return CartService(db, repo=repo)


@pytest.fixture
def test_client(session_factory):
    """
    FastAPI TestClient with get_db overridden to use the test database.
    Lifespan is skipped, tables already exist.
    """
    app = create_app(init_database=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
