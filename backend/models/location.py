"""Location model for DB persistence."""
from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Location(Base):
    """Location table: id, address, latitude, longitude."""

    __tablename__ = "location"
    # AUTOINCREMENT so ids of deleted rows are never handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Stored normalized (trimmed, lowercase).
    address: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
