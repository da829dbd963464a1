"""Tests for style catalog merging."""

import copy
import json
from pathlib import Path

from docjson.styles import StyleCatalog, load_style_catalog, pascal_case

FAMILIES = [
    {
        "name": "fill",
        "properties": [
            {
                "name": "fillMode",
                "type": "enum",
                "doc": {
                    "description": "How the fill is drawn",
                    "values": {"a": {"doc": "A"}, "b": {"doc": "B"}},
                    "default": "a",
                },
                "expression": {"interpolated": False},
                "transition": False,
            },
            {
                "name": "fillTranslate",
                "type": "array",
                "value": "number",
                "doc": {
                    "description": "Offset",
                    "units": "pixels",
                    "default": [0, 0],
                    "disabledBy": ["fillPattern"],
                },
                "allowedFunctionTypes": ["camera"],
                "transition": True,
            },
            {
                "name": "fillOpacity",
                "type": "number",
                "doc": {"minimum": 0, "maximum": 1, "default": 1, "requires": ["fillColor"]},
            },
        ],
    },
    {"name": "fill-extrusion", "properties": [{"name": "height", "type": "number", "doc": {}}]},
    {"name": "light", "properties": [{"name": "anchor", "type": "string", "doc": {}}]},
    {"name": "background", "properties": []},
]


def test_pascal_case() -> None:
    assert pascal_case("fill") == "Fill"
    assert pascal_case("fill-extrusion") == "FillExtrusion"
    assert pascal_case("raster_particle") == "RasterParticle"


def test_enum_values_are_expanded_in_order() -> None:
    styles = StyleCatalog(FAMILIES).styles_for("FillLayer")
    values = [value.model_dump() for value in styles[0].values]
    assert values == [{"value": "a", "doc": "A"}, {"value": "b", "doc": "B"}]


def test_array_types_carry_their_element_type() -> None:
    styles = StyleCatalog(FAMILIES).styles_for("FillLayer")
    assert styles[1].type == "array<number>"
    assert styles[1].values == []


def test_style_doc_serializes_with_camel_case_aliases() -> None:
    styles = StyleCatalog(FAMILIES).styles_for("FillLayer")
    dumped = styles[1].model_dump(by_alias=True, exclude_none=True)
    assert dumped["disabledBy"] == ["fillPattern"]
    assert dumped["allowedFunctionTypes"] == ["camera"]
    assert dumped["units"] == "pixels"
    assert "minimum" not in dumped


def test_bounds_and_requirements_are_copied() -> None:
    opacity = StyleCatalog(FAMILIES).styles_for("FillLayer")[2]
    assert opacity.minimum == 0
    assert opacity.maximum == 1
    assert opacity.requires == ["fillColor"]
    assert opacity.allowed_function_types == []


def test_family_names_are_suffixed_unless_singleton() -> None:
    catalog = StyleCatalog(FAMILIES)
    assert "FillExtrusionLayer" in catalog
    assert "Light" in catalog
    assert "LightLayer" not in catalog
    assert catalog.styles_for("Light")[0].name == "anchor"


def test_units_without_styles_get_none() -> None:
    catalog = StyleCatalog(FAMILIES)
    assert catalog.styles_for("MapView") is None
    assert catalog.styles_for("BackgroundLayer") is None


def test_catalog_is_not_mutated() -> None:
    families = copy.deepcopy(FAMILIES)
    catalog = StyleCatalog(families)
    catalog.styles_for("FillLayer")
    catalog.styles_for("FillLayer")
    assert families == FAMILIES


def test_load_style_catalog_accepts_list_and_mapping(tmp_path: Path) -> None:
    as_list = tmp_path / "list.json"
    as_list.write_text(json.dumps(FAMILIES))
    assert len(load_style_catalog(as_list)) == 4

    as_mapping = tmp_path / "mapping.json"
    as_mapping.write_text(json.dumps({"line": [{"name": "lineWidth", "type": "number", "doc": {}}]}))
    catalog = load_style_catalog(as_mapping)
    assert catalog.styles_for("LineLayer")[0].name == "lineWidth"
