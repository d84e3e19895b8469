"""Configuration from environment."""
import os
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent.parent

# When TESTING=true, use test DB URL so tests never touch the real store.
if os.environ.get("TESTING") == "true":
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./spotfinder.db",
    )

SEED_DATA_PATH = Path(
    os.environ.get("SEED_DATA_PATH", str(BACKEND_DIR / "data" / "seed_locations.json"))
)

# Bump to drop and recreate the location table (all rows, user-added included, are lost).
SCHEMA_VERSION = 1

# Max suggestions returned by prefix search.
SUGGESTION_LIMIT = 10
