"""Country, city and district lookups plus the cascade endpoint used by address fields."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from ...models.domain import AddressState
from ...schemas.locations import (
    AddressModel,
    CascadeRequest,
    CascadeResponse,
    CitiesResponse,
    CountryModel,
    DistrictsResponse,
)
from ...services.locations import FREE_TEXT, get_location_resolver

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("/countries", response_model=list[CountryModel], status_code=status.HTTP_200_OK)
def list_countries() -> list[CountryModel]:
    resolver = get_location_resolver()
    return [CountryModel(code=country.code, name=country.name) for country in resolver.reference.countries]


@router.get("/cities", response_model=CitiesResponse, status_code=status.HTTP_200_OK)
def list_cities(country: str = Query(..., description="Country code, e.g. TR")) -> CitiesResponse:
    resolver = get_location_resolver()
    cities = resolver.cities_for(country)
    if cities is FREE_TEXT:
        return CitiesResponse(country=country, input=FREE_TEXT.value, cities=[])
    return CitiesResponse(country=country, input="select", cities=list(cities))


@router.get("/districts", response_model=DistrictsResponse, status_code=status.HTTP_200_OK)
def list_districts(
    country: str = Query(..., description="Country code, e.g. TR"),
    city: str = Query(..., description="City name as listed by /locations/cities"),
) -> DistrictsResponse:
    resolver = get_location_resolver()
    return DistrictsResponse(
        country=country,
        city=city,
        input=resolver.district_input(country, city).value,
        districts=list(resolver.districts_for(country, city)),
    )


@router.post("/cascade", response_model=CascadeResponse, status_code=status.HTTP_200_OK)
def apply_cascade(payload: CascadeRequest) -> CascadeResponse:
    """Apply one address edit and return the corrected triple with the inputs to render."""
    resolver = get_location_resolver()
    record = resolver.write({}, "address", AddressState(**payload.address.model_dump()))
    try:
        updated = resolver.read(resolver.apply(record, "address", payload.level, payload.value), "address")
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    cities = resolver.cities_for(updated.country)
    return CascadeResponse(
        address=AddressModel(country=updated.country, city=updated.city, district=updated.district),
        city_input=resolver.city_input(updated.country).value,
        district_input=resolver.district_input(updated.country, updated.city).value,
        cities=[] if cities is FREE_TEXT else list(cities),
        districts=list(resolver.districts_for(updated.country, updated.city)),
    )
