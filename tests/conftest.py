import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-do-not-use")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import models  # noqa: F401
from database import get_session
from main import app
from models import User
from utils.password import hash_password


@pytest.fixture()
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


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    def get_test_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_test_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(session):
    def _make_user(username: str, password: str = "Passw0rd!") -> User:
        user = User(username=username, password_hash=hash_password(password))
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def auth_headers(client):
    """Register a user over HTTP and return the Authorization header for them"""
    def _auth_headers(username: str, password: str = "Passw0rd!") -> dict:
        resp = client.post("/auth/signup", json={"username": username, "password": password})
        assert resp.status_code == 201, resp.text
        resp = client.post("/auth/signin", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['data']['access_token']}"}

    return _auth_headers


@pytest.fixture()
def broken_db(monkeypatch):
    """Make every query or commit on a Session fail like an unreachable database"""
    def _break(*methods: str) -> None:
        def fail(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("database is unavailable"))

        for method in methods or ("exec", "commit"):
            monkeypatch.setattr(Session, method, fail)

    return _break
