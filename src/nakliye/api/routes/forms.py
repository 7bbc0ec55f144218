"""API routes for discriminated listing and hero-slide forms."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...models.domain import FormState
from ...schemas.forms import (
    FieldDescriptorModel,
    FieldsResponse,
    FormsResponse,
    FormStateModel,
    HydrateRequest,
    HydrateResponse,
    KindsResponse,
    RecordResponse,
    SwitchKindRequest,
    ValidationResponse,
)
from ...services.forms import (
    FORM_NAMES,
    ConditionalFormShapeResolver,
    FormValidationError,
    MissingRequiredFieldError,
    from_record,
    get_resolver,
    to_record,
)
from ...services.locations import get_location_resolver

router = APIRouter(prefix="/forms", tags=["forms"])


def _resolver_or_404(form: str) -> ConditionalFormShapeResolver:
    try:
        return get_resolver(form)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


def _to_model(state: FormState) -> FormStateModel:
    return FormStateModel(kind=state.kind, payload=state.as_dict())


@router.get("", response_model=FormsResponse, status_code=status.HTTP_200_OK)
def list_forms() -> FormsResponse:
    return FormsResponse(forms=list(FORM_NAMES))


@router.get("/{form}/kinds", response_model=KindsResponse, status_code=status.HTTP_200_OK)
def list_kinds(form: str) -> KindsResponse:
    resolver = _resolver_or_404(form)
    return KindsResponse(
        form=form,
        kind_key=resolver.kind_key,
        default_kind=resolver.default_kind,
        kinds=list(resolver.kinds),
        labels={kind: resolver.label_for(kind) for kind in resolver.kinds},
    )


@router.get("/{form}/fields/{kind}", response_model=FieldsResponse, status_code=status.HTTP_200_OK)
def list_fields(form: str, kind: str) -> FieldsResponse:
    resolver = _resolver_or_404(form)
    fields = [
        FieldDescriptorModel(
            key=descriptor.key,
            type=descriptor.type.value,
            required=descriptor.required,
            options=list(descriptor.options),
            positive=descriptor.positive,
            default=descriptor.default,
        )
        for descriptor in resolver.fields_for(kind)
    ]
    return FieldsResponse(form=form, kind=kind, known=resolver.is_known(kind), fields=fields)


@router.get("/{form}/new", response_model=FormStateModel, status_code=status.HTTP_200_OK)
def new_form(form: str, kind: str | None = None) -> FormStateModel:
    resolver = _resolver_or_404(form)
    return _to_model(resolver.new_state(kind))


@router.post("/{form}/switch", response_model=FormStateModel, status_code=status.HTTP_200_OK)
def switch_kind(form: str, payload: SwitchKindRequest) -> FormStateModel:
    resolver = _resolver_or_404(form)
    state = FormState(kind=payload.state.kind, payload=payload.state.payload)
    return _to_model(resolver.on_kind_changed(payload.new_kind, state))


@router.post("/{form}/validate", response_model=ValidationResponse, status_code=status.HTTP_200_OK)
def validate_form(form: str, payload: FormStateModel) -> ValidationResponse:
    resolver = _resolver_or_404(form)
    try:
        resolver.validate(FormState(kind=payload.kind, payload=payload.payload))
    except MissingRequiredFieldError as exc:
        return ValidationResponse(kind=payload.kind, valid=False, missing_field=exc.field, detail=str(exc))
    except FormValidationError as exc:
        return ValidationResponse(kind=payload.kind, valid=False, detail=str(exc))
    return ValidationResponse(kind=payload.kind, valid=True)


@router.post("/{form}/record", response_model=RecordResponse, status_code=status.HTTP_200_OK)
def build_record(form: str, payload: FormStateModel) -> RecordResponse:
    """Validate a submitted form and return the record to persist."""
    resolver = _resolver_or_404(form)
    state = FormState(kind=payload.kind, payload=payload.payload)
    try:
        record = to_record(resolver, get_location_resolver(), state)
    except FormValidationError as exc:
        logging.info(f"Rejected {form} submission: {exc}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return RecordResponse(record=record)


@router.post("/{form}/hydrate", response_model=HydrateResponse, status_code=status.HTTP_200_OK)
def hydrate_form(form: str, payload: HydrateRequest) -> HydrateResponse:
    """Load a stored record into an edit form, correcting stale location values."""
    resolver = _resolver_or_404(form)
    state = from_record(resolver, get_location_resolver(), payload.record)
    return HydrateResponse(state=_to_model(state), known_kind=resolver.is_known(state.kind))
