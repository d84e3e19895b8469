"""SpotFinder location store: prepare the database before any screen uses it."""
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logging.getLogger("store_core").setLevel(logging.INFO)

from store_core import LocationStore, StoreError
from utils.config import DATABASE_URL

LOG = logging.getLogger("spotfinder")


def main() -> int:
    """Open the store at DATABASE_URL (creating and seeding it on first run) and report its size."""
    try:
        with LocationStore(DATABASE_URL) as store:
            LOG.info("Location store ready at %s with %d locations", DATABASE_URL, store.count())
    except StoreError as e:
        LOG.error("Location store unavailable: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
