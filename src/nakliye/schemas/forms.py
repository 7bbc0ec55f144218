"""Pydantic request/response models for form shape endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class FieldDescriptorModel(BaseModel):
    key: str
    type: str
    required: bool
    options: list[str] = Field(default_factory=list)
    positive: bool = False
    default: Any = None


class FormsResponse(BaseModel):
    forms: list[str]


class KindsResponse(BaseModel):
    form: str
    kind_key: str
    default_kind: str
    kinds: list[str]
    labels: dict[str, str] = Field(default_factory=dict)


class FieldsResponse(BaseModel):
    form: str
    kind: str
    known: bool
    fields: list[FieldDescriptorModel]


class FormStateModel(BaseModel):
    kind: str
    payload: dict[str, Any] = Field(default_factory=dict)


class SwitchKindRequest(BaseModel):
    state: FormStateModel
    new_kind: str = Field(..., description="Discriminator value the user selected.")


class ValidationResponse(BaseModel):
    kind: str
    valid: bool
    missing_field: Optional[str] = None
    detail: Optional[str] = None


class RecordResponse(BaseModel):
    record: dict[str, Any]


class HydrateRequest(BaseModel):
    record: dict[str, Any]


class HydrateResponse(BaseModel):
    state: FormStateModel
    known_kind: bool
