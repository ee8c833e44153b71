"""Shared fixtures: stores on temporary files and a Flask test client."""

import pytest

from spotfinder.app import create_app
from spotfinder.store import LocationStore


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "locations.db")


@pytest.fixture
def store(db_path):
    """Seeded store on a fresh file."""
    s = LocationStore.open(db_path)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def empty_store(db_path):
    """Store with the schema but no seed data."""
    s = LocationStore.open(db_path, seed=False)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def app(db_path):
    app = create_app(db_path=db_path, seed=True)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client
