"""
Property normalization.

Top-level props always get every field, with visible sentinels where
metadata is missing. Nested props (array elements, shape fields) only
keep what the extractor actually reported.
"""

from typing import Optional

from docjson.normalizers.jsdoc import parse_jsdoc
from docjson.normalizers.types import UNKNOWN_TYPE, normalize_type
from docjson.schemas import (
    CanonicalType,
    FuncTypeDoc,
    NamedType,
    PropDoc,
    RawPropertyMeta,
    UnionType,
    UnknownType,
)

NO_NAME = "FIX ME NO NAME"
NO_DESCRIPTION = "FIX ME NO DESCRIPTION"
NO_DEFAULT = "none"
PROP_TYPES_UNION = "union"


def resolve_type(raw: RawPropertyMeta) -> CanonicalType:
    """
    Resolve the canonical type of a property.

    The prop-types descriptor wins over the TypeScript one: structured
    ``arrayOf``/``shape`` forms are expanded, other names are used as-is.
    """
    if isinstance(raw.type, UnionType) and not raw.type.raw and not raw.type.elements:
        # oneOfType: prop-types reports only the name
        return PROP_TYPES_UNION
    if raw.type is not None and not isinstance(raw.type, UnknownType):
        return normalize_type(raw.type)
    if raw.ts_type is not None:
        return normalize_type(raw.ts_type)
    return UNKNOWN_TYPE


def _is_prop_types_func(raw: RawPropertyMeta) -> bool:
    return isinstance(raw.type, NamedType) and raw.type.name == "func"


def normalize_property(
    raw: RawPropertyMeta,
    name: Optional[str] = None,
    nested: bool = False,
) -> PropDoc:
    """
    Convert one raw property record into a canonical PropDoc.

    Args:
        raw: Raw property metadata
        name: Property name (the prop key or shape field key)
        nested: True for array elements and shape fields

    Returns:
        PropDoc
    """
    if nested:
        result = PropDoc(
            name=name,
            required=raw.required,
            default=_clean_default(raw.default_value),
            description=raw.description,
        )
        if raw.type is not None or raw.ts_type is not None:
            result.type = resolve_type(raw)
    else:
        result = PropDoc(
            name=name or NO_NAME,
            required=raw.required or False,
            type=resolve_type(raw),
            default=_clean_default(raw.default_value) or NO_DEFAULT,
            description=raw.description or NO_DESCRIPTION,
        )

    if not nested and isinstance(result.type, FuncTypeDoc):
        result.description = (
            f"{result.description}\n*signature:*`{result.type.func_signature}`"
        )

    if _is_prop_types_func(raw):
        jsdoc = parse_jsdoc(raw.description)
        if jsdoc.description:
            result.description = jsdoc.description
        if jsdoc.params:
            result.params = jsdoc.params
        if jsdoc.returns is not None:
            result.returns = jsdoc.returns

    return result


def _clean_default(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.replace("\n", "")
