"""Conversion between form state and the flat records the persistence layer stores."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ...models.domain import FieldDescriptor, FieldType, FormState
from ..locations.cascade import ADDRESS_SIDES, LocationCascadeResolver
from .base import ConditionalFormShapeResolver, FormValidationError, coerce_date, coerce_number


def _address_sides(keys: tuple[str, ...]) -> list[str]:
    return [side for side in ADDRESS_SIDES if f"{side}Country" in keys]


def _serialize_value(descriptor: FieldDescriptor, value: Any) -> Any:
    match descriptor.type:
        case FieldType.BOOLEAN:
            return descriptor.default if value is None else bool(value)
        case FieldType.NUMBER:
            return coerce_number(value) if value not in (None, "") else None
        case FieldType.DATE:
            if value in (None, ""):
                return None
            parsed = coerce_date(value)
            if parsed is None:
                raise FormValidationError(f"Invalid date '{value}' for field '{descriptor.key}'.")
            return parsed.isoformat()
        case _:
            text = "" if value is None else str(value).strip()
            return text or None


def to_record(
    resolver: ConditionalFormShapeResolver,
    locations: LocationCascadeResolver,
    state: FormState,
) -> dict[str, Any]:
    """Validate ``state`` and flatten it into a record ready to be stored.

    Address sides are re-checked before validation, so a city missing from an
    enumerated list is reported as a missing field and stale districts are
    dropped. Empty optional values are left out.
    """
    fields = resolver.fields_for(state.kind)
    payload = state.as_dict()
    for side in _address_sides(tuple(descriptor.key for descriptor in fields)):
        payload = locations.write(payload, side, locations.revalidate(locations.read(payload, side)))
    state = FormState(kind=state.kind, payload=payload)

    resolver.validate(state)

    record: dict[str, Any] = {resolver.kind_key: state.kind}
    for descriptor in fields:
        value = _serialize_value(descriptor, state.payload.get(descriptor.key, descriptor.default))
        if value is not None:
            record[descriptor.key] = value

    if resolver.finalize is not None:
        record = resolver.finalize(record)
    return record


def from_record(
    resolver: ConditionalFormShapeResolver,
    locations: LocationCascadeResolver,
    record: Mapping[str, Any],
) -> FormState:
    """Re-hydrate an edit form from a stored record.

    Unknown kinds degrade to a view holding only the shared fields.
    """
    kind = str(record.get(resolver.kind_key) or "")
    if not resolver.is_known(kind):
        logging.warning(
            f"{resolver.name}: record has unknown {resolver.kind_key} '{kind}', loading shared fields only"
        )
        fields = resolver.shared
    else:
        fields = resolver.fields_for(kind)

    payload = {descriptor.key: descriptor.default for descriptor in fields}
    for descriptor in fields:
        if descriptor.key not in record or record[descriptor.key] is None:
            continue
        value = record[descriptor.key]
        if descriptor.type is FieldType.DATE:
            parsed = coerce_date(value)
            value = parsed.isoformat() if parsed else ""
        payload[descriptor.key] = value

    keys = tuple(descriptor.key for descriptor in fields)
    for side in _address_sides(keys):
        address = locations.revalidate(locations.read(payload, side))
        payload = locations.write(payload, side, address)

    return FormState(kind=kind, payload=payload)
