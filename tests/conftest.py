from __future__ import annotations

import os
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DATABASE_URL"] = "sqlite:///./test.db"
    # Ensure a local .env cannot leak into tests.
    os.environ["ENVIRONMENT"] = "test"


def reset_database() -> None:
    from skill_api.database import Base, engine
    import skill_api.models  # noqa: F401  # ensure all models are registered

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def db() -> Generator[Any, None, None]:
    from skill_api.database import SessionLocal

    reset_database()
    with SessionLocal() as session:
        yield session


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    from skill_api.main import create_app

    reset_database()
    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def python_skill() -> dict[str, Any]:
    return {
        "key": "python",
        "name": "Python",
        "description": "Python is an interpreted, high-level, general-purpose programming language.",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/c/c3/Python-logo-notext.svg",
        "tags": ["programming language", "scripting"],
    }
