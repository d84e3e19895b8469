"""Location repository: insert, get, update, delete, prefix search."""
import logging
from typing import Iterable, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.location import Location
from utils.config import SUGGESTION_LIMIT

LOG = logging.getLogger(__name__)


def normalize_address(address: str) -> str:
    """Trim surrounding whitespace and lowercase; the form every address is stored and matched in."""
    return address.strip().lower()


def insert_location(session: Session, address: str, latitude: float, longitude: float) -> bool:
    """Insert a location under its normalized address. Returns False if that address already exists."""
    try:
        session.execute(
            insert(Location).values(
                address=normalize_address(address),
                latitude=latitude,
                longitude=longitude,
            )
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if "unique" not in str(e.orig).lower():
            raise
        LOG.debug("Duplicate address %r not inserted", normalize_address(address))
        return False
    return True


def get_location_by_address(session: Session, address: str) -> Optional[Location]:
    """Return the location whose normalized address matches, or None."""
    return session.execute(
        select(Location).where(Location.address == normalize_address(address))
    ).scalar_one_or_none()


def update_location(session: Session, address: str, latitude: float, longitude: float) -> bool:
    """Overwrite coordinates of the matching location. Returns False if not found (no upsert)."""
    result = session.execute(
        update(Location)
        .where(Location.address == normalize_address(address))
        .values(latitude=latitude, longitude=longitude)
    )
    session.commit()
    return result.rowcount > 0


def delete_location(session: Session, address: str) -> bool:
    """Delete the location by normalized address. Returns True if deleted, False if not found."""
    result = session.execute(
        delete(Location).where(Location.address == normalize_address(address))
    )
    session.commit()
    return result.rowcount > 0


def search_addresses(session: Session, prefix: str, limit: int = SUGGESTION_LIMIT) -> list[str]:
    """Return up to limit addresses starting with prefix (case-insensitive), sorted. Empty prefix matches nothing."""
    needle = normalize_address(prefix)
    if not needle:
        return []
    result = session.execute(
        select(Location.address)
        .where(Location.address.startswith(needle, autoescape=True))
        .order_by(Location.address)
        .limit(limit)
    )
    return list(result.scalars().all())


def count_locations(session: Session) -> int:
    """Return the number of locations."""
    result = session.execute(select(func.count()).select_from(Location))
    return result.scalar() or 0


def bulk_insert_locations(session: Session, rows: Iterable[tuple[str, float, float]]) -> int:
    """Insert (address, latitude, longitude) rows in one statement and commit. Returns rows inserted."""
    values = [
        {"address": normalize_address(address), "latitude": latitude, "longitude": longitude}
        for address, latitude, longitude in rows
    ]
    if not values:
        return 0
    session.execute(insert(Location), values)
    session.commit()
    return len(values)
