"""
Type descriptor normalization.

Collapses one RawType variant into its canonical documentation form:
a plain label, or a structured ``array``/``shape``/``func`` doc.
Absent or unrecognized type information degrades to a sentinel label.
"""

import re
from typing import Iterable, List, Optional, Tuple

from docjson.schemas import (
    ArrayOfType,
    ArrayTypeDoc,
    CanonicalType,
    FuncTypeDoc,
    FunctionSignatureType,
    NamedType,
    ObjectSignatureType,
    PropDoc,
    RawPropertyMeta,
    RawType,
    ShapeOfType,
    ShapeTypeDoc,
    UnionType,
    UnknownType,
)

UNKNOWN_TYPE = "FIX ME UNKNOWN TYPE"
BIG_OBJECT = "FIX ME FORMAT BIG OBJECT"

# Inline object literals at or above this length are flagged instead of inlined
BIG_OBJECT_THRESHOLD = 200

WHITESPACE_PATTERN = re.compile(r"\s")


def escape_pipes(text: str) -> str:
    """Escape ``|`` so labels survive inside markdown tables."""
    return text.replace("|", "\\|")


def clean_raw_object(raw: str, width_limit: bool = True) -> str:
    """Strip whitespace from an inline object literal and escape its pipes."""
    if width_limit and len(raw) >= BIG_OBJECT_THRESHOLD:
        return BIG_OBJECT
    return escape_pipes(WHITESPACE_PATTERN.sub("", raw))


def union_label(raw: UnionType) -> Optional[str]:
    if raw.raw:
        return escape_pipes(raw.raw)
    if raw.elements:
        return " \\| ".join(dump_signature(element) for element in raw.elements)
    return None


def dump_signature(raw: Optional[RawType]) -> str:
    """
    Render a type as TypeScript-like text.

    Functions render as ``(a:A, b:B) => R`` and object signatures as
    ``{key: T, ...}``, recursing into nested signatures.
    """
    if raw is None or isinstance(raw, UnknownType):
        return UNKNOWN_TYPE
    if isinstance(raw, FunctionSignatureType):
        arguments = ", ".join(
            f"{argument.name}:{dump_signature(argument.type)}"
            for argument in raw.arguments
        )
        return f"({arguments}) => {dump_signature(raw.return_type)}"
    if isinstance(raw, ObjectSignatureType):
        if raw.fields is None:
            return clean_raw_object(raw.raw, width_limit=False)
        fields = ", ".join(
            f"{key}: {dump_signature(meta.ts_type or meta.type)}"
            for key, meta in raw.fields
        )
        return f"{{{fields}}}"
    if isinstance(raw, NamedType):
        return raw.name
    if isinstance(raw, UnionType):
        return union_label(raw) or UNKNOWN_TYPE
    return raw.kind


def normalize_fields(fields: Iterable[Tuple[str, RawPropertyMeta]]) -> List[PropDoc]:
    """Normalize every field of a shape as a nested property named by its key."""
    from docjson.normalizers.props import normalize_property

    return [normalize_property(meta, name=key, nested=True) for key, meta in fields]


def normalize_type(raw: Optional[RawType]) -> CanonicalType:
    """
    Convert a raw type descriptor into its canonical form.

    Never raises; unrecognized descriptors become ``UNKNOWN_TYPE``.
    """
    if raw is None or isinstance(raw, UnknownType):
        return UNKNOWN_TYPE

    if isinstance(raw, NamedType):
        return raw.name

    if isinstance(raw, ObjectSignatureType):
        if raw.fields is not None:
            return ShapeTypeDoc(value=normalize_fields(raw.fields))
        return clean_raw_object(raw.raw)

    if isinstance(raw, FunctionSignatureType):
        return FuncTypeDoc(func_signature=dump_signature(raw))

    if isinstance(raw, UnionType):
        return union_label(raw) or UNKNOWN_TYPE

    if isinstance(raw, ArrayOfType):
        from docjson.normalizers.props import normalize_property

        return ArrayTypeDoc(value=normalize_property(raw.element, nested=True))

    if isinstance(raw, ShapeOfType):
        return ShapeTypeDoc(value=normalize_fields(raw.fields.items()))

    return UNKNOWN_TYPE


def type_label(raw: Optional[RawType]) -> str:
    """
    Display-only label for a method parameter type.

    Unlike ``normalize_type`` this never builds structured docs and
    never flags large inline objects.
    """
    if raw is None or isinstance(raw, UnknownType):
        return UNKNOWN_TYPE
    if isinstance(raw, (ObjectSignatureType, FunctionSignatureType)):
        return clean_raw_object(raw.raw, width_limit=False)
    if isinstance(raw, UnionType):
        return union_label(raw) or UNKNOWN_TYPE
    if isinstance(raw, NamedType):
        return raw.name
    return raw.kind
