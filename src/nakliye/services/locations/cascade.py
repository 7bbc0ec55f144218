"""Country -> city -> district cascade shared by every address-collecting form."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Union

from ...config import settings
from ...models.domain import AddressState, Affordance, ReferenceData

FREE_TEXT = Affordance.FREE_TEXT

ADDRESS_SIDES = ("origin", "destination", "address")


class LocationCascadeResolver:
    """Keeps a ``{country, city, district}`` triple consistent as it is edited.

    Every operation is pure: it returns a new ``AddressState`` and never
    touches the reference tables it was built with.
    """

    def __init__(self, reference: ReferenceData, *, default_country: Optional[str] = None) -> None:
        self.reference = reference
        self.default_country = default_country if default_country is not None else settings.default_country

    def cities_for(self, country: str) -> Union[tuple[str, ...], Affordance]:
        cities = self.reference.cities_by_country.get(country)
        if not cities:
            return FREE_TEXT
        return cities

    def districts_for(self, country: str, city: str) -> tuple[str, ...]:
        by_city = self.reference.districts_by_city.get(country)
        if not by_city:
            return ()
        return by_city.get(city, ())

    def is_enumerated(self, country: str) -> bool:
        return bool(self.reference.cities_by_country.get(country))

    def city_input(self, country: str) -> Affordance:
        return Affordance.SELECT if self.is_enumerated(country) else Affordance.FREE_TEXT

    def district_input(self, country: str, city: str) -> Affordance:
        cities = self.cities_for(country)
        if cities is FREE_TEXT or not city or city not in cities:
            return Affordance.HIDDEN
        if self.districts_for(country, city):
            return Affordance.SELECT
        return Affordance.FREE_TEXT

    def new_address(self) -> AddressState:
        return AddressState(country=self.default_country)

    def on_country_changed(self, new_country: str, state: AddressState) -> AddressState:
        if new_country == state.country:
            return state
        return AddressState(country=new_country)

    def on_city_changed(self, new_city: str, state: AddressState) -> AddressState:
        if new_city == state.city:
            return state
        if state.district and state.district in self.districts_for(state.country, new_city):
            return replace(state, city=new_city)
        return replace(state, city=new_city, district="")

    def on_district_changed(self, new_district: str, state: AddressState) -> AddressState:
        """Accept a district only where the current city allows one."""
        affordance = self.district_input(state.country, state.city)
        if affordance is Affordance.HIDDEN:
            return replace(state, district="")
        if affordance is Affordance.SELECT and new_district not in self.districts_for(state.country, state.city):
            return replace(state, district="")
        return replace(state, district=new_district)

    def revalidate(self, state: AddressState) -> AddressState:
        """Re-check a triple loaded from a stored record against the current tables."""
        cities = self.cities_for(state.country)
        if cities is FREE_TEXT:
            if state.district:
                logging.info(f"Dropping district '{state.district}' for non-enumerated country '{state.country}'")
                return replace(state, district="")
            return state

        if state.city and state.city not in cities:
            logging.warning(f"Clearing unknown city '{state.city}' for country '{state.country}'")
            return AddressState(country=state.country)

        districts = self.districts_for(state.country, state.city)
        # an enumerated list always wins over a previously typed district
        if state.district and districts and state.district not in districts:
            logging.warning(f"Clearing district '{state.district}' not listed for city '{state.city}'")
            return replace(state, district="")
        if state.district and not state.city:
            return replace(state, district="")
        return state

    def read(self, record: Mapping[str, Any], side: str) -> AddressState:
        _check_side(side)
        return AddressState(
            country=str(record.get(f"{side}Country") or ""),
            city=str(record.get(f"{side}City") or ""),
            district=str(record.get(f"{side}District") or ""),
        )

    def write(self, record: Mapping[str, Any], side: str, state: AddressState) -> dict[str, Any]:
        _check_side(side)
        updated = dict(record)
        updated[f"{side}Country"] = state.country
        updated[f"{side}City"] = state.city
        updated[f"{side}District"] = state.district
        return updated

    def apply(self, record: Mapping[str, Any], side: str, level: str, value: str) -> dict[str, Any]:
        """Run one address edit against one side of a flat form record."""
        state = self.read(record, side)
        match level:
            case "country":
                new_state = self.on_country_changed(value, state)
            case "city":
                new_state = self.on_city_changed(value, state)
            case "district":
                new_state = self.on_district_changed(value, state)
            case _:
                raise ValueError(f"Unknown address level '{level}'.")
        return self.write(record, side, new_state)


def _check_side(side: str) -> None:
    if side not in ADDRESS_SIDES:
        raise ValueError(f"Unknown address side '{side}'.")
