"""Pydantic schemas for location records and the seed data asset."""
from pydantic import BaseModel, Field, field_validator


class LocationRecord(BaseModel):
    """Location returned by store lookups."""

    id: int
    address: str
    latitude: float
    longitude: float


class SeedLocation(BaseModel):
    """One (address, latitude, longitude) entry of the seed asset."""

    address: str = Field(min_length=1)
    latitude: float
    longitude: float

    @field_validator("address")
    @classmethod
    def address_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("address must not be blank")
        return v


class SeedDataset(BaseModel):
    """Seed asset: versioned list of named locations."""

    version: int
    region: str = ""
    locations: list[SeedLocation]
