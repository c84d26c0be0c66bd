from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # settings are read at import time, so the in-memory database must be chosen first
    os.environ["DATABASE_URL"] = "sqlite://"
    os.environ["AUTH_SECRET"] = "test-secret"
    os.environ["RESEND_API_KEY"] = ""
    os.environ["APP_BASE_URL"] = "https://studylink.test"
    os.environ["SEED_DEMO_DATA"] = "false"
    os.environ["LOG_LEVEL"] = "WARNING"


@pytest.fixture()
def database() -> Any:
    from studylink import models  # noqa: F401
    from studylink.database import Base, engine

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine


@pytest.fixture()
def db(database) -> Any:
    from studylink.database import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def mailer() -> Any:
    from factories import RecordingMailer

    return RecordingMailer()


@pytest.fixture()
def client(database, mailer) -> Any:
    from studylink.main import app
    from studylink.services.mailer import get_mailer

    app.dependency_overrides[get_mailer] = lambda: mailer
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
