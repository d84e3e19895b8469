# Schemas package
from .locations import LocationRecord, SeedDataset, SeedLocation

__all__ = [
    "LocationRecord",
    "SeedDataset",
    "SeedLocation",
]
