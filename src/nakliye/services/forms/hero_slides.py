"""Field tables for the homepage hero slider variants."""

from __future__ import annotations

from ...data import options
from ...models.domain import FieldDescriptor, FieldType
from .base import ConditionalFormShapeResolver

TEXT = FieldType.TEXT
NUMBER = FieldType.NUMBER
CHOICE = FieldType.CHOICE
BOOLEAN = FieldType.BOOLEAN

SHARED_FIELDS = (
    FieldDescriptor("title", TEXT, required=True),
    FieldDescriptor("subtitle", TEXT),
    FieldDescriptor("order", NUMBER, default=0),
    FieldDescriptor("isActive", BOOLEAN, default=True),
)

_BUTTON_STYLE = (
    FieldDescriptor("buttonIcon", TEXT),
    FieldDescriptor("buttonColor", TEXT),
    FieldDescriptor("buttonTextColor", TEXT),
    FieldDescriptor("buttonShape", CHOICE, options=options.BUTTON_SHAPES, default="default"),
)

_LINK_BUTTON = (
    FieldDescriptor("buttonText", TEXT),
    FieldDescriptor("buttonUrl", TEXT),
) + _BUTTON_STYLE

_TEXT_STYLE = (
    FieldDescriptor("textColor", TEXT),
    FieldDescriptor("overlayOpacity", NUMBER, default=None),
)

_BACKGROUND_IMAGE = FieldDescriptor("backgroundImageUrl", TEXT, required=True)

CENTERED_FIELDS = (_BACKGROUND_IMAGE,) + _LINK_BUTTON + _TEXT_STYLE

WITH_INPUT_FIELDS = (
    _BACKGROUND_IMAGE,
    FieldDescriptor("inputPlaceholder", TEXT),
    FieldDescriptor("buttonText", TEXT, required=True),
    FieldDescriptor("formActionUrl", TEXT, required=True),
) + _BUTTON_STYLE + _TEXT_STYLE

SPLIT_FIELDS = (
    FieldDescriptor("mediaType", CHOICE, required=True, options=options.MEDIA_TYPES, default="image"),
    FieldDescriptor("mediaUrl", TEXT, required=True),
    FieldDescriptor("backgroundColor", TEXT),
    FieldDescriptor("backgroundImageUrl", TEXT),
) + _LINK_BUTTON + _TEXT_STYLE

TITLE_ONLY_FIELDS = (_BACKGROUND_IMAGE,) + _TEXT_STYLE

VIDEO_BACKGROUND_FIELDS = (FieldDescriptor("videoUrl", TEXT, required=True),) + _LINK_BUTTON + _TEXT_STYLE

CARRY_OVER = ("title", "subtitle", "order", "isActive")

FIELDS_BY_TYPE = {
    "centered": CENTERED_FIELDS,
    "left-aligned": CENTERED_FIELDS,
    "with-input": WITH_INPUT_FIELDS,
    "split": SPLIT_FIELDS,
    "title-only": TITLE_ONLY_FIELDS,
    "video-background": VIDEO_BACKGROUND_FIELDS,
}


def build_hero_slide_resolver() -> ConditionalFormShapeResolver:
    return ConditionalFormShapeResolver(
        "hero-slide",
        kind_key="type",
        shared=SHARED_FIELDS,
        variants={kind: FIELDS_BY_TYPE[kind] for kind in options.HERO_SLIDE_TYPES},
        carry_over=CARRY_OVER,
        default_kind=options.HERO_SLIDE_TYPES[0],
        labels=options.HERO_SLIDE_LABELS,
    )
