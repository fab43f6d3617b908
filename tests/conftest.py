import os

# Keep the import-time engine in memory instead of creating ./cafe.db
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import cafe.db as db
from cafe.main import app
from cafe.models import Base, Product, User

# Seeded demo account
TEST_USERNAME = "matthew"
TEST_PASSWORD = "latte"


@pytest.fixture
def engine():
    """In-memory SQLite engine with tables created and a minimal menu seeded.

    Uses StaticPool so all connections share the same in-memory database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    session.add(Product(name="Flat White", price=3.8, description="Double ristretto with steamed milk."))
    session.add(Product(name="Butter Croissant", price=3.2))
    session.add(User(username=TEST_USERNAME, password=TEST_PASSWORD))
    session.add(User(username="alice", password="mocha"))
    session.commit()
    session.close()

    yield engine

    engine.dispose()


@pytest.fixture
def db_session(engine):
    """SQLAlchemy session on the test engine, for service tests and assertions."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    """Shared FastAPI TestClient backed by the in-memory test database."""
    original_engine = db.engine
    original_session_local = db.SessionLocal

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    # Patch the db module used by the app
    db.engine = engine
    db.SessionLocal = TestingSessionLocal

    # Override FastAPI DB dependency
    def override_get_db():
        db_sess = TestingSessionLocal()
        try:
            yield db_sess
        finally:
            db_sess.close()

    app.dependency_overrides[db.get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()

    db.engine = original_engine
    db.SessionLocal = original_session_local


@pytest.fixture
def credentials():
    """Form body for a valid login."""
    return {"username": TEST_USERNAME, "password": TEST_PASSWORD}
