"""Location store: explicit open/close lifecycle around the location table.

A LocationStore owns one engine. The first open of a database creates the
location table and loads the seed asset; later opens reuse whatever is stored.
When the stored schema version differs from the store's, the table is dropped
and rebuilt from the seed, which discards every record including user-added
ones.

Each operation runs in its own session and maps to one SQL statement.
Not-found and duplicate outcomes are return values. Non-finite coordinates
raise ValueError; database failures raise StoreUnavailableError.
"""
from __future__ import annotations

import logging
from pathlib import Path
import math
from collections.abc import Callable
from typing import Optional, TypeVar

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from models import Base
from models.location import Location
from models.schema_version import SchemaVersion
from repositories.location_repository import (
    bulk_insert_locations,
    count_locations,
    delete_location,
    get_location_by_address,
    insert_location,
    search_addresses,
    update_location,
)
from schemas.locations import LocationRecord
from store_core.errors import StoreClosedError, StoreUnavailableError
from utils.config import DATABASE_URL, SCHEMA_VERSION, SEED_DATA_PATH, SUGGESTION_LIMIT
from utils.seed_loader import load_seed_data, seed_rows

LOG = logging.getLogger(__name__)

T = TypeVar("T")

_VERSION_ROW_ID = 1


def _check_coordinates(latitude: float, longitude: float) -> None:
    """Raise ValueError for nan or infinite coordinates; SQLite would store nan as NULL."""
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise ValueError(f"Coordinates must be finite numbers, got ({latitude}, {longitude})")


class LocationStore:
    """Named map locations in an embedded SQLite database."""

    def __init__(
        self,
        database_url: str = DATABASE_URL,
        *,
        seed_path: Path | str = SEED_DATA_PATH,
        schema_version: int = SCHEMA_VERSION,
        suggestion_limit: int = SUGGESTION_LIMIT,
    ) -> None:
        self.database_url = database_url
        self.seed_path = Path(seed_path)
        self.schema_version = schema_version
        self.suggestion_limit = suggestion_limit
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> LocationStore:
        """Open the database, creating and seeding it on first use. No-op if already open."""
        if self._engine is not None:
            return self
        try:
            engine = create_db_engine(self.database_url)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Cannot open location store at {self.database_url}: {e}") from e
        session_factory = create_session_factory(engine)
        try:
            self._initialize(engine, session_factory)
        except (SQLAlchemyError, ValueError) as e:
            engine.dispose()
            raise StoreUnavailableError(f"Cannot initialize location store at {self.database_url}: {e}") from e
        self._engine = engine
        self._session_factory = session_factory
        return self

    def close(self) -> None:
        """Dispose of the engine. Safe to call more than once."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None

    def __enter__(self) -> LocationStore:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _initialize(self, engine: Engine, session_factory: sessionmaker) -> None:
        inspector = inspect(engine)
        has_table = inspector.has_table(Location.__tablename__)
        stored_version = None
        if inspector.has_table(SchemaVersion.__tablename__):
            db = session_factory()
            try:
                row = db.get(SchemaVersion, _VERSION_ROW_ID)
                stored_version = row.version if row is not None else None
            finally:
                db.close()

        if has_table and stored_version == self.schema_version:
            LOG.debug("Opened location store (schema version %s)", stored_version)
            return

        # Read the asset before touching the schema so a bad asset leaves the database as it was.
        dataset = load_seed_data(self.seed_path)

        if has_table:
            LOG.warning(
                "Location schema version changed (%s -> %s); dropping location table, all stored records are discarded",
                stored_version,
                self.schema_version,
            )
            Base.metadata.drop_all(engine)
        Base.metadata.create_all(engine)
        LOG.info("Created location table (schema version %s)", self.schema_version)

        db = session_factory()
        try:
            # Version row is committed together with the seed rows.
            db.merge(SchemaVersion(id=_VERSION_ROW_ID, version=self.schema_version))
            inserted = bulk_insert_locations(db, seed_rows(dataset))
        finally:
            db.close()
        LOG.info("Seeded %d locations (seed version %s)", inserted, dataset.version)

    def _run(self, fn: Callable[..., T], *args) -> T:
        """Run a repository call in a fresh session; database failures become StoreUnavailableError."""
        if self._session_factory is None:
            raise StoreClosedError("Location store is not open")
        db: Session = self._session_factory()
        try:
            return fn(db, *args)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"{fn.__name__} failed: {e}") from e
        finally:
            db.close()

    def insert(self, address: str, latitude: float, longitude: float) -> bool:
        """Add a location. Returns False if the normalized address already exists."""
        _check_coordinates(latitude, longitude)
        return self._run(insert_location, address, latitude, longitude)

    def find_by_address(self, address: str) -> Optional[LocationRecord]:
        """Return the location matching address (trimmed, case-insensitive), or None."""
        loc = self._run(get_location_by_address, address)
        if loc is None:
            LOG.debug("No location for address %r", address)
            return None
        return LocationRecord(
            id=loc.id,
            address=loc.address,
            latitude=loc.latitude,
            longitude=loc.longitude,
        )

    def update(self, address: str, latitude: float, longitude: float) -> bool:
        """Overwrite coordinates of an existing location. Returns False if not found."""
        _check_coordinates(latitude, longitude)
        return self._run(update_location, address, latitude, longitude)

    def delete(self, address: str) -> bool:
        """Delete a location. Returns False if not found."""
        return self._run(delete_location, address)

    def search_prefix(self, prefix: str) -> list[str]:
        """Addresses starting with prefix, sorted, at most suggestion_limit. Empty prefix gives []."""
        return self._run(search_addresses, prefix, self.suggestion_limit)

    def count(self) -> int:
        """Number of stored locations."""
        return self._run(count_locations)
