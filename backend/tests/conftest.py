# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

import pytest

from db import create_db_engine, create_session_factory
from models import Base
from models.location import Location  # noqa: F401 - register with Base
from models.schema_version import SchemaVersion  # noqa: F401
from store_core import LocationStore
from utils.config import DATABASE_URL


@pytest.fixture
def engine():
    """Fresh in-memory engine per test with the location tables created."""
    eng = create_db_engine(DATABASE_URL)
    Base.metadata.create_all(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def db_session(engine):
    """Session on the per-test engine; closed on teardown."""
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store():
    """Open, seeded in-memory location store; closed on teardown."""
    with LocationStore(DATABASE_URL) as s:
        yield s


@pytest.fixture
def file_db_url(tmp_path):
    """SQLite file URL under tmp_path, for tests that reopen the same database."""
    return f"sqlite:///{tmp_path / 'test_locations.db'}"
