import os

# Configure before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models.movie import Movie
from app.models.user import User
from app.utils.security import hash_password

SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Provide a clean database session for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session, monkeypatch):
    """FastAPI test client with the database dependency overridden."""

    def override_get_db():
        test_db = TestingSessionLocal()
        try:
            yield test_db
        finally:
            test_db.close()

    app.dependency_overrides[get_db] = override_get_db
    monkeypatch.setenv("AUTO_CREATE_TABLES", "false")

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def make_user(db_session):
    """Factory inserting a user directly into the database."""

    def _make_user(email="viewer@example.com", password="Secret123", username=None):
        user = User(
            email=email,
            password_hash=hash_password(password),
            username=username or email.split("@")[0],
            watchlist=[],
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_movie(db_session):
    """Factory inserting a catalog movie directly into the database."""

    def _make_movie(title="Test Movie", **fields):
        fields.setdefault("genres", ["Drama"])
        fields.setdefault("release_year", 2000)
        movie = Movie(title=title, **fields)
        db_session.add(movie)
        db_session.commit()
        db_session.refresh(movie)
        return movie

    return _make_movie
