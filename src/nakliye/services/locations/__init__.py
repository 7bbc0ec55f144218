"""Location cascade helpers."""

from functools import lru_cache

from ...data.reference_repository import load_reference_data
from .cascade import ADDRESS_SIDES, FREE_TEXT, LocationCascadeResolver


@lru_cache(maxsize=1)
def get_location_resolver() -> LocationCascadeResolver:
    return LocationCascadeResolver(load_reference_data())


__all__ = ["ADDRESS_SIDES", "FREE_TEXT", "LocationCascadeResolver", "get_location_resolver"]
