"""Load and validate the seed location asset (JSON)."""
import json
from pathlib import Path

from pydantic import ValidationError

from repositories.location_repository import normalize_address
from schemas.locations import SeedDataset


def parse_seed_data(content: bytes) -> SeedDataset:
    """Parse seed JSON bytes into a SeedDataset. Raises ValueError if invalid or if addresses collide."""
    try:
        data = json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Seed data is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Seed data must be a JSON object")
    try:
        dataset = SeedDataset.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Seed data is malformed: {e}") from e

    seen: set[str] = set()
    for i, loc in enumerate(dataset.locations):
        key = normalize_address(loc.address)
        if key in seen:
            raise ValueError(f"Seed entry {i + 1} duplicates address '{key}'")
        seen.add(key)
    return dataset


def load_seed_data(path: Path | str) -> SeedDataset:
    """Read and parse the seed asset at path. Raises ValueError if it cannot be read or parsed."""
    try:
        content = Path(path).read_bytes()
    except OSError as e:
        raise ValueError(f"Cannot read seed data {path}: {e}") from e
    return parse_seed_data(content)


def seed_rows(dataset: SeedDataset) -> list[tuple[str, float, float]]:
    """Return (address, latitude, longitude) triples for bulk insert."""
    return [(loc.address, loc.latitude, loc.longitude) for loc in dataset.locations]
