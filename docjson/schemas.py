"""
Pydantic schemas for the docjson system.

Two families of models live here:

- Raw models: a closed set of type-descriptor variants and the raw
  property record, built from the loosely-typed dictionaries emitted by
  the metadata extractors (``parse_raw_type`` / ``parse_raw_property``).
- Doc models: the canonical documentation records written to docs.json
  (``PropDoc``, ``MethodDoc``, ``StyleDoc``, ``UnitDoc``, ``DocJSON``).

Doc models are serialized with ``by_alias=True, exclude_none=True`` so
that absent fields disappear from the output instead of becoming null.
"""

from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, RootModel


# ============================================================================
# RAW TYPE DESCRIPTORS
# ============================================================================

class NamedType(BaseModel):
    """Plain named type (``string``, ``number``, ``func``, ``enum``...)."""
    kind: Literal["named"] = "named"
    name: str


class FunctionArgument(BaseModel):
    name: str
    type: Optional["RawType"] = None


class FunctionSignatureType(BaseModel):
    """``{name: "signature", type: "function"}`` descriptor."""
    kind: Literal["function"] = "function"
    raw: str = ""
    arguments: List[FunctionArgument] = Field(default_factory=list)
    return_type: Optional["RawType"] = None


class ObjectSignatureType(BaseModel):
    """``{name: "signature", type: "object"}`` descriptor.

    ``fields`` is None when the extractor did not expand the object's
    properties, in which case only ``raw`` is available.
    """
    kind: Literal["object"] = "object"
    raw: str = ""
    fields: Optional[List[Tuple[str, "RawPropertyMeta"]]] = None


class ArrayOfType(BaseModel):
    """``arrayOf`` descriptor carrying its element."""
    kind: Literal["arrayOf"] = "arrayOf"
    element: "RawPropertyMeta"


class ShapeOfType(BaseModel):
    """``shape`` descriptor carrying an explicit field map."""
    kind: Literal["shape"] = "shape"
    fields: Dict[str, "RawPropertyMeta"]


class UnionType(BaseModel):
    kind: Literal["union"] = "union"
    raw: Optional[str] = None
    elements: List["RawType"] = Field(default_factory=list)


class UnknownType(BaseModel):
    """Descriptor matching none of the recognized shapes."""
    kind: Literal["unknown"] = "unknown"


RawType = Union[
    NamedType,
    FunctionSignatureType,
    ObjectSignatureType,
    ArrayOfType,
    ShapeOfType,
    UnionType,
    UnknownType,
]


class RawPropertyMeta(BaseModel):
    """
    One property as extracted, before normalization.

    ``type`` is the prop-types style descriptor, ``ts_type`` the
    TypeScript one; extractors may fill either or both.
    """
    required: Optional[bool] = None
    type: Optional[RawType] = None
    ts_type: Optional[RawType] = None
    default_value: Optional[str] = None
    description: Optional[str] = None


for _model in (
    FunctionArgument,
    FunctionSignatureType,
    ObjectSignatureType,
    ArrayOfType,
    ShapeOfType,
    UnionType,
    RawPropertyMeta,
):
    _model.model_rebuild()


def parse_raw_type(data: Any) -> RawType:
    """
    Classify one extractor type descriptor into a RawType variant.

    Never raises: anything unrecognized becomes ``UnknownType``.
    """
    if not isinstance(data, dict) or not data.get("name"):
        return UnknownType()

    name = data["name"]

    if name == "signature":
        signature = data.get("signature")
        if not isinstance(signature, dict):
            signature = {}
        raw = _text(data.get("raw")) or ""
        if data.get("type") == "function":
            raw_arguments = signature.get("arguments")
            if not isinstance(raw_arguments, list):
                raw_arguments = []
            arguments = [
                FunctionArgument(
                    name=str(arg.get("name", "")),
                    type=parse_raw_type(arg.get("type")) if arg.get("type") else None,
                )
                for arg in raw_arguments
                if isinstance(arg, dict)
            ]
            returns = signature.get("return")
            return FunctionSignatureType(
                raw=raw,
                arguments=arguments,
                return_type=parse_raw_type(returns) if returns else None,
            )
        if data.get("type") == "object":
            properties = signature.get("properties")
            fields = None
            if isinstance(properties, list):
                fields = [
                    (str(kv.get("key")), _parse_signature_field(kv))
                    for kv in properties
                    if isinstance(kv, dict)
                ]
            return ObjectSignatureType(raw=raw, fields=fields)
        return UnknownType()

    if name == "arrayOf" and isinstance(data.get("value"), dict):
        return ArrayOfType(element=parse_nested_property(data["value"]))

    if name == "shape" and isinstance(data.get("value"), dict):
        return ShapeOfType(fields={
            str(key): parse_nested_property(value)
            for key, value in data["value"].items()
            if isinstance(value, dict)
        })

    if name == "union":
        elements = data.get("elements")
        if not isinstance(elements, list):
            elements = []
        return UnionType(
            raw=_text(data.get("raw")),
            elements=[parse_raw_type(e) for e in elements if isinstance(e, dict)],
        )

    return NamedType(name=str(name))


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _is_ts_descriptor(data: Dict[str, Any]) -> bool:
    return data.get("name") == "signature" or "raw" in data or "elements" in data


def parse_nested_property(data: Dict[str, Any]) -> RawPropertyMeta:
    """
    Build a RawPropertyMeta from a nested descriptor.

    Nested descriptors (array elements, shape fields) are type descriptors
    that carry ``required``/``description`` next to their own name.
    """
    descriptor = {k: v for k, v in data.items() if k not in ("required", "description")}
    raw_type = parse_raw_type(descriptor)
    nested_is_ts = _is_ts_descriptor(descriptor)
    return RawPropertyMeta(
        required=data.get("required") if isinstance(data.get("required"), bool) else None,
        type=None if nested_is_ts else raw_type,
        ts_type=raw_type if nested_is_ts else None,
        description=_text(data.get("description")),
    )


def _parse_signature_field(kv: Dict[str, Any]) -> RawPropertyMeta:
    value = kv.get("value")
    value = dict(value) if isinstance(value, dict) else {}
    if kv.get("description"):
        value["description"] = kv["description"]
    return parse_nested_property(value)


def parse_raw_property(data: Dict[str, Any]) -> RawPropertyMeta:
    """Build a RawPropertyMeta from a top-level extractor prop record."""
    default_value = data.get("defaultValue")
    if isinstance(default_value, dict):
        default_value = default_value.get("value")
    return RawPropertyMeta(
        required=data.get("required"),
        type=parse_raw_type(data["type"]) if data.get("type") else None,
        ts_type=parse_raw_type(data["tsType"]) if data.get("tsType") else None,
        default_value=None if default_value is None else str(default_value),
        description=data.get("description") or None,
    )


# ============================================================================
# DOC SCHEMAS
# ============================================================================

class JsDocType(BaseModel):
    name: Optional[str] = None


class JsDocParam(BaseModel):
    """Parameter parsed from a ``@param`` tag."""
    name: str
    description: Optional[str] = None
    type: Optional[JsDocType] = None
    optional: bool = False


class JsDocReturns(BaseModel):
    description: Optional[str] = None
    type: Optional[JsDocType] = None


class PropDoc(BaseModel):
    """
    Canonical property record.

    Top-level props always carry name/required/type/default/description;
    nested props only carry what the raw input had.
    """
    name: Optional[str] = None
    required: Optional[bool] = None
    type: Optional["CanonicalType"] = None
    default: Optional[str] = None
    description: Optional[str] = None
    params: Optional[List[JsDocParam]] = None
    returns: Optional[JsDocReturns] = None


class ArrayTypeDoc(BaseModel):
    name: Literal["array"] = "array"
    value: PropDoc


class ShapeTypeDoc(BaseModel):
    name: Literal["shape"] = "shape"
    value: List[PropDoc]


class FuncTypeDoc(BaseModel):
    name: Literal["func"] = "func"
    func_signature: str = Field(serialization_alias="funcSignature")


CanonicalType = Union[str, ArrayTypeDoc, ShapeTypeDoc, FuncTypeDoc]

PropDoc.model_rebuild()
ArrayTypeDoc.model_rebuild()
ShapeTypeDoc.model_rebuild()


class ParamType(BaseModel):
    name: Optional[str] = None


class MethodParam(BaseModel):
    name: str
    optional: Optional[bool] = None
    description: Optional[str] = None
    type: ParamType = Field(default_factory=ParamType)


class MethodDoc(BaseModel):
    """Public method of a documented unit."""
    name: str
    description: Optional[str] = None
    docblock: Optional[str] = None
    modifiers: List[str] = Field(default_factory=list)
    params: List[MethodParam] = Field(default_factory=list)
    returns: Optional[Dict[str, Any]] = None
    examples: List[str] = Field(default_factory=list)


class StyleValue(BaseModel):
    value: str
    doc: Optional[str] = None


class StyleDoc(BaseModel):
    """Style attribute merged from the style specification catalog."""
    name: str
    type: str
    values: List[StyleValue] = Field(default_factory=list)
    minimum: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    units: Optional[str] = None
    default: Optional[Any] = None
    description: Optional[str] = None
    requires: Optional[List[Any]] = None
    disabled_by: Optional[Any] = Field(None, serialization_alias="disabledBy")
    allowed_function_types: List[str] = Field(
        default_factory=list,
        serialization_alias="allowedFunctionTypes",
    )
    expression: Optional[Dict[str, Any]] = None
    transition: Optional[bool] = None


class UnitDoc(BaseModel):
    """Canonical documentation record for one component or module."""
    name: str
    file_name_with_ext: Optional[str] = Field(None, serialization_alias="fileNameWithExt")
    description: str = ""
    props: List[PropDoc] = Field(default_factory=list)
    methods: List[MethodDoc] = Field(default_factory=list)
    styles: Optional[List[StyleDoc]] = None


class DocJSON(RootModel[Dict[str, UnitDoc]]):
    """Mapping from unit name to its documentation record."""

    def dump_json(self) -> str:
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)
