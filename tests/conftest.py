import pytest
from fastapi.testclient import TestClient

from string_analyzer.database import Database
from string_analyzer.main import create_app


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(tmp_path):
    app = create_app(database_url=f"sqlite:///{tmp_path / 'strings.db'}")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client):
    for value in ["racecar", "hello", "A man a plan", "noon", "stats", "level up now", "xyz"]:
        assert client.post("/strings", json={"value": value}).status_code == 201
    return client
