"""Factory for form shape resolvers based on the form being edited."""

from __future__ import annotations

from functools import lru_cache

from .base import ConditionalFormShapeResolver
from .freight import build_freight_resolver
from .hero_slides import build_hero_slide_resolver

FORM_NAMES = ("freight", "hero-slide")


@lru_cache(maxsize=None)
def get_resolver(form: str) -> ConditionalFormShapeResolver:
    match form:
        case "freight":
            return build_freight_resolver()
        case "hero-slide":
            return build_hero_slide_resolver()
        case _:
            raise LookupError(f"Unknown form '{form}'.")
