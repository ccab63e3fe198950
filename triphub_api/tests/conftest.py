import os

import pytest

# Point the app at a shared in-memory SQLite database before anything imports src.db
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREATE_SCHEMA_ON_STARTUP"] = "true"
os.environ["AUTO_SEED"] = "false"
os.environ["ENVIRONMENT"] = "test"
os.environ["CORS_ORIGINS"] = "http://testserver"

from sqlalchemy.orm import Session  # noqa: E402

from src.db import Base, get_engine  # noqa: E402


@pytest.fixture()
def engine():
    eng = get_engine()
    Base.metadata.drop_all(eng)
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)


@pytest.fixture()
def session(engine):
    with Session(engine, expire_on_commit=False) as s:
        yield s


@pytest.fixture()
def client(engine):
    from fastapi.testclient import TestClient
    from src.api.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def lenient_client(engine):
    """Client that returns 500 responses instead of re-raising server errors."""
    from fastapi.testclient import TestClient
    from src.api.main import app

    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
