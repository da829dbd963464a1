"""Normalization components: type descriptors, properties and JSDoc comments."""

from .types import (
    BIG_OBJECT,
    UNKNOWN_TYPE,
    dump_signature,
    normalize_fields,
    normalize_type,
    type_label,
)
from .props import NO_DEFAULT, NO_DESCRIPTION, NO_NAME, normalize_property
from .jsdoc import JsDoc, parse_jsdoc

__all__ = [
    "BIG_OBJECT",
    "UNKNOWN_TYPE",
    "NO_DEFAULT",
    "NO_DESCRIPTION",
    "NO_NAME",
    "dump_signature",
    "normalize_fields",
    "normalize_type",
    "type_label",
    "normalize_property",
    "JsDoc",
    "parse_jsdoc",
]
