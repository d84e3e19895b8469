"""Database engine and session factory for the embedded SQLite store."""
import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


def _guard_test_database(url: str) -> None:
    """Runtime safety: when TESTING=true, never open the real database."""
    if os.environ.get("TESTING") != "true":
        return
    if "spotfinder.db" in url or (":memory:" not in url and "test" not in url.lower().split("?")[0]):
        raise RuntimeError(
            "Tests must not run against the real store. Set TESTING_DATABASE_URL to sqlite:///:memory: "
            "(or another test URL containing :memory: or 'test')."
        )


def create_db_engine(url: str) -> Engine:
    """Create an engine for url. In-memory SQLite shares one connection so all sessions see the same DB."""
    _guard_test_database(url)
    engine_kw = {"echo": False}
    if url.startswith("sqlite"):
        engine_kw["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            engine_kw["poolclass"] = StaticPool
    return create_engine(url, **engine_kw)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to engine; objects stay readable after commit."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
