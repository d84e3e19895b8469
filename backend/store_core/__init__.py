# Store core: location store lifecycle, CRUD and prefix search
from store_core.errors import StoreClosedError, StoreError, StoreUnavailableError
from store_core.store import LocationStore

__all__ = [
    "LocationStore",
    "StoreClosedError",
    "StoreError",
    "StoreUnavailableError",
]
