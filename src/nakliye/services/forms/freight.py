"""Field tables for freight listings: commercial, residential and empty-vehicle."""

from __future__ import annotations

from typing import Any

from ...config import settings
from ...data import options
from ...models.domain import FieldDescriptor, FieldType
from .base import ConditionalFormShapeResolver

TEXT = FieldType.TEXT
NUMBER = FieldType.NUMBER
CHOICE = FieldType.CHOICE
DATE = FieldType.DATE
BOOLEAN = FieldType.BOOLEAN

SHARED_FIELDS = (
    FieldDescriptor("companyName", TEXT, required=True),
    FieldDescriptor("contactPerson", TEXT, required=True),
    FieldDescriptor("contactEmail", TEXT),
    FieldDescriptor("workPhone", TEXT),
    FieldDescriptor("mobilePhone", TEXT, required=True),
    FieldDescriptor("originCountry", TEXT, required=True, default=settings.default_country),
    FieldDescriptor("originCity", TEXT, required=True),
    FieldDescriptor("originDistrict", TEXT),
    FieldDescriptor("destinationCountry", TEXT, required=True, default=settings.default_country),
    FieldDescriptor("destinationCity", TEXT, required=True),
    FieldDescriptor("destinationDistrict", TEXT),
    FieldDescriptor("loadingDate", DATE, required=True),
    FieldDescriptor("description", TEXT, required=True),
    FieldDescriptor("isActive", BOOLEAN, default=True),
)

COMMERCIAL_FIELDS = (
    FieldDescriptor("cargoType", CHOICE, required=True, options=options.CARGO_TYPES),
    FieldDescriptor("vehicleNeeded", CHOICE, required=True, options=options.VEHICLES_NEEDED),
    FieldDescriptor("loadingType", CHOICE, required=True, options=options.LOADING_TYPES),
    FieldDescriptor("cargoForm", CHOICE, required=True, options=options.CARGO_FORMS),
    FieldDescriptor("cargoWeight", NUMBER, required=True, positive=True, default=None),
    FieldDescriptor("cargoWeightUnit", CHOICE, required=True, options=options.WEIGHT_UNITS, default="Ton"),
    FieldDescriptor("isContinuousLoad", BOOLEAN, default=False),
    FieldDescriptor(
        "shipmentScope", CHOICE, options=options.SHIPMENT_SCOPES, default=options.DOMESTIC_SCOPE
    ),
)

RESIDENTIAL_FIELDS = (
    FieldDescriptor(
        "residentialTransportType", CHOICE, required=True, options=options.RESIDENTIAL_TRANSPORT_TYPES
    ),
    FieldDescriptor("residentialPlaceType", CHOICE, required=True, options=options.RESIDENTIAL_PLACE_TYPES),
    FieldDescriptor(
        "residentialElevatorStatus", CHOICE, required=True, options=options.RESIDENTIAL_ELEVATOR_STATUSES
    ),
    FieldDescriptor("residentialFloorLevel", CHOICE, required=True, options=options.RESIDENTIAL_FLOOR_LEVELS),
)

EMPTY_VEHICLE_FIELDS = (
    FieldDescriptor("advertisedVehicleType", CHOICE, required=True, options=options.VEHICLES_NEEDED),
    FieldDescriptor(
        "serviceTypeForLoad", CHOICE, required=True, options=options.EMPTY_VEHICLE_SERVICE_TYPES
    ),
    FieldDescriptor("vehicleStatedCapacity", NUMBER, required=True, positive=True, default=None),
    FieldDescriptor(
        "vehicleStatedCapacityUnit", CHOICE, required=True, options=options.WEIGHT_UNITS, default="Ton"
    ),
)

CARRY_OVER = tuple(descriptor.key for descriptor in SHARED_FIELDS)

FIELDS_BY_TYPE = {
    options.COMMERCIAL: COMMERCIAL_FIELDS,
    options.RESIDENTIAL: RESIDENTIAL_FIELDS,
    options.EMPTY_VEHICLE: EMPTY_VEHICLE_FIELDS,
}


def derive_shipment_scope(record: dict[str, Any]) -> dict[str, Any]:
    """Commercial listings are domestic only when both ends are in the home country."""
    if record.get("freightType") != options.COMMERCIAL:
        return record
    home = settings.home_country
    domestic = record.get("originCountry") == home and record.get("destinationCountry") == home
    record["shipmentScope"] = options.DOMESTIC_SCOPE if domestic else options.INTERNATIONAL_SCOPE
    return record


def build_freight_resolver() -> ConditionalFormShapeResolver:
    return ConditionalFormShapeResolver(
        "freight",
        kind_key="freightType",
        shared=SHARED_FIELDS,
        variants={kind: FIELDS_BY_TYPE[kind] for kind in options.FREIGHT_TYPES},
        carry_over=CARRY_OVER,
        default_kind=options.COMMERCIAL,
        finalize=derive_shipment_scope,
    )
