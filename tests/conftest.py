# tests/conftest.py

import os

# Must be set before gradebook.core.config builds its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from gradebook.core.database import SessionLocal, create_database_tables, drop_database_tables
from gradebook.main import app
from gradebook.seed import seed_data


@pytest.fixture
def db():
    create_database_tables()
    session = SessionLocal()
    seed_data(session)
    try:
        yield session
    finally:
        session.close()
        drop_database_tables()


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def new_student_payload():
    return {
        "firstname": "Solomon",
        "lastname": "Chow",
        "emailAddress": "solomon1d24@gmail.com",
    }
