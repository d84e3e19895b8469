"""Store errors. Not-found and duplicate outcomes are return values, not errors."""


class StoreError(Exception):
    """Base class for location store failures."""


class StoreClosedError(StoreError):
    """Operation called on a store that is not open."""


class StoreUnavailableError(StoreError):
    """Backing database could not be opened, initialized or queried."""
