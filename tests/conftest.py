import os

# Settings are read at import time, so point them at an in-memory DB first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import datetime

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine
from main import app
from routers.finance import get_today

# Mid January: default academic year is 2024-2025
TODAY = datetime.date(2025, 1, 15)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
