"""Table-driven resolver mapping a discriminator value to its form shape."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ...models.domain import FieldDescriptor, FieldType, FormState


class FormValidationError(ValueError):
    """Raised when a form state cannot be submitted."""


class MissingRequiredFieldError(FormValidationError):
    def __init__(self, field: str, kind: str) -> None:
        super().__init__(f"Missing required field '{field}' for kind '{kind}'.")
        self.field = field
        self.kind = kind


class UnknownKindError(FormValidationError):
    def __init__(self, kind: str, known: Sequence[str]) -> None:
        super().__init__(f"Unknown kind '{kind}'. Expected one of: {', '.join(known)}.")
        self.kind = kind


def _is_missing(descriptor: FieldDescriptor, value: Any) -> bool:
    if descriptor.type is FieldType.BOOLEAN:
        return False
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    if descriptor.type is FieldType.NUMBER:
        number = coerce_number(value)
        if number is None:
            return True
        if descriptor.positive and number <= 0:
            return True
    return False


def coerce_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(str(value).replace(",", "."))
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def coerce_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


class ConditionalFormShapeResolver:
    """Decides which fields a form collects for each ``kind``.

    ``shared`` fields are declared once and lead every kind's field list;
    ``variants`` holds the kind-specific tail. ``carry_over`` is the allowlist
    of keys copied across a kind switch.
    """

    def __init__(
        self,
        name: str,
        *,
        kind_key: str,
        shared: Sequence[FieldDescriptor],
        variants: Mapping[str, Sequence[FieldDescriptor]],
        carry_over: Sequence[str],
        default_kind: str,
        finalize: Optional[Callable[[dict[str, Any]], dict[str, Any]]] = None,
        labels: Optional[Mapping[str, str]] = None,
    ) -> None:
        if default_kind not in variants:
            raise ValueError(f"Default kind '{default_kind}' has no field table.")
        self.name = name
        self.kind_key = kind_key
        self.shared = tuple(shared)
        self.variants = {kind: tuple(fields) for kind, fields in variants.items()}
        self.carry_over = tuple(carry_over)
        self.default_kind = default_kind
        self.finalize = finalize
        self.labels = dict(labels or {})

    @property
    def kinds(self) -> tuple[str, ...]:
        return tuple(self.variants)

    def is_known(self, kind: str) -> bool:
        return kind in self.variants

    def label_for(self, kind: str) -> str:
        return self.labels.get(kind, kind)

    def fields_for(self, kind: str) -> tuple[FieldDescriptor, ...]:
        variant = self.variants.get(kind)
        if variant is None:
            return ()
        return self.shared + variant

    def field_keys(self, kind: str) -> tuple[str, ...]:
        return tuple(descriptor.key for descriptor in self.fields_for(kind))

    def defaults_for(self, kind: str) -> dict[str, Any]:
        fields = self.fields_for(kind) or self.shared
        return {descriptor.key: descriptor.default for descriptor in fields}

    def new_state(self, kind: Optional[str] = None) -> FormState:
        kind = kind or self.default_kind
        return FormState(kind=kind, payload=self.defaults_for(kind))

    def on_kind_changed(self, new_kind: str, state: FormState) -> FormState:
        if new_kind == state.kind:
            return state
        if not self.is_known(new_kind):
            logging.warning(f"{self.name}: switching to unknown kind '{new_kind}', keeping shared fields only")
        payload = self.defaults_for(new_kind)
        for key in self.carry_over:
            if key in state.payload:
                payload[key] = state.payload[key]
        return FormState(kind=new_kind, payload=payload)

    def first_missing(self, state: FormState) -> Optional[str]:
        for descriptor in self.fields_for(state.kind):
            if descriptor.required and _is_missing(descriptor, state.payload.get(descriptor.key)):
                return descriptor.key
        return None

    def validate(self, state: FormState) -> None:
        if not self.is_known(state.kind):
            raise UnknownKindError(state.kind, self.kinds)
        missing = self.first_missing(state)
        if missing is not None:
            raise MissingRequiredFieldError(missing, state.kind)
