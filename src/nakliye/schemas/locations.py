"""Pydantic request/response models for location endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CountryModel(BaseModel):
    code: str
    name: str


class AddressModel(BaseModel):
    country: str = ""
    city: str = ""
    district: str = ""


class CitiesResponse(BaseModel):
    country: str
    input: Literal["select", "free-text"]
    cities: list[str]


class DistrictsResponse(BaseModel):
    country: str
    city: str
    input: Literal["select", "free-text", "hidden"]
    districts: list[str]


class CascadeRequest(BaseModel):
    address: AddressModel = Field(default_factory=AddressModel)
    level: Literal["country", "city", "district"] = Field(..., description="Address level the user changed.")
    value: str = Field(..., description="Newly selected or typed value.")


class CascadeResponse(BaseModel):
    address: AddressModel
    city_input: Literal["select", "free-text"]
    district_input: Literal["select", "free-text", "hidden"]
    cities: list[str]
    districts: list[str]
