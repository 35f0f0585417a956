"""Lazy-initialized store handle, reused across warm Lambda invocations."""

from functools import lru_cache

from tripboard.config import get_config
from tripboard.db import PostgresTripStore, TripStore


@lru_cache(maxsize=1)
def get_trip_store() -> TripStore | None:
    """Return the configured store, or None when database settings are missing."""
    config = get_config()
    if not config.store_configured:
        return None
    return PostgresTripStore(config)
