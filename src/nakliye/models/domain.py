"""Domain models for location reference data and form state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True, slots=True)
class Country:
    code: str
    name: str


@dataclass(frozen=True, slots=True)
class ReferenceData:
    """Immutable country/city/district tables handed to the location resolver.

    ``cities_by_country`` only holds countries with an enumerated city list and
    ``districts_by_city`` is keyed by country code, then by city name.
    """

    countries: tuple[Country, ...]
    cities_by_country: Mapping[str, tuple[str, ...]]
    districts_by_city: Mapping[str, Mapping[str, tuple[str, ...]]]

    def country_name(self, code: str) -> Optional[str]:
        for country in self.countries:
            if country.code == code:
                return country.name
        return None


class Affordance(str, Enum):
    """Input widget a form should render for one level of an address."""

    SELECT = "select"
    FREE_TEXT = "free-text"
    HIDDEN = "hidden"


@dataclass(frozen=True, slots=True)
class AddressState:
    country: str = ""
    city: str = ""
    district: str = ""


class FieldType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    CHOICE = "choice"
    DATE = "date"
    BOOLEAN = "boolean"


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """One entry of a form's field table."""

    key: str
    type: FieldType
    required: bool = False
    options: tuple[str, ...] = ()
    positive: bool = False
    default: Any = ""


@dataclass(frozen=True, slots=True)
class FormState:
    """Discriminated form value: a ``kind`` plus the payload shaped for it."""

    kind: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def as_dict(self) -> dict[str, Any]:
        return dict(self.payload)
