"""Schema version model: one row recording which layout the location table was built with."""
from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class SchemaVersion(Base):
    """Schema version table: id, version."""

    __tablename__ = "schema_version"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
