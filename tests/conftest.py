import pytest
from fastapi.testclient import TestClient

from shared.config import Settings
from gateway.main import create_app

# bcrypt's minimum cost keeps the suite fast
TEST_ROUNDS = 4


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'feedback.db'}",
        bcrypt_rounds=TEST_ROUNDS,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()
