"""Form shape service exports."""

from .base import (
    ConditionalFormShapeResolver,
    FormValidationError,
    MissingRequiredFieldError,
    UnknownKindError,
)
from .dispatcher import FORM_NAMES, get_resolver
from .records import from_record, to_record

__all__ = [
    "ConditionalFormShapeResolver",
    "FormValidationError",
    "MissingRequiredFieldError",
    "UnknownKindError",
    "FORM_NAMES",
    "get_resolver",
    "from_record",
    "to_record",
]
