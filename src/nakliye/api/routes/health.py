"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/reference-data", status_code=status.HTTP_200_OK)
def health_reference_data() -> dict:
    """Check that the location reference tables load."""
    from ...services.locations import get_location_resolver

    try:
        reference = get_location_resolver().reference
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Reference data unavailable: {exc}",
        ) from exc
    return {
        "status": "ok",
        "countries": len(reference.countries),
        "enumerated_countries": sorted(reference.cities_by_country),
        "district_lists": sum(len(by_city) for by_city in reference.districts_by_city.values()),
    }
