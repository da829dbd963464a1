"""Tests for method processing."""

from docjson.methods import MethodProcessor


def _method(name, **extra):
    return dict({"name": name, "docblock": None, "modifiers": [], "params": [], "returns": None}, **extra)


def test_private_and_denied_methods_are_dropped() -> None:
    methods = MethodProcessor().process([
        _method("_internal"),
        _method("setNativeProps"),
        _method(""),
        _method(None),
        _method("flyTo"),
    ])
    assert [m.name for m in methods] == ["flyTo"]


def test_deny_list_is_configurable() -> None:
    methods = MethodProcessor(ignore_methods=["flyTo"]).process([
        _method("flyTo"),
        _method("setNativeProps"),
    ])
    assert [m.name for m in methods] == ["setNativeProps"]


def test_examples_are_extracted_from_docblock() -> None:
    docblock = (
        "Moves the camera.\n"
        "@example\n"
        "camera.flyTo([0, 0])\n"
        "@param coordinates target\n"
        "@example camera.flyTo([1, 1], 500)"
    )
    [method] = MethodProcessor().process([_method("flyTo", docblock=docblock)])
    assert method.examples == ["\ncamera.flyTo([0, 0])\n", " camera.flyTo([1, 1], 500)"]
    assert method.docblock == docblock


def test_methods_without_docblock_have_no_examples() -> None:
    [method] = MethodProcessor().process([_method("getZoom")])
    assert method.examples == []


def test_param_types_are_relabelled() -> None:
    big_object = "{ " + "padding: number; " * 20 + "}"
    [method] = MethodProcessor().process([
        _method("setCamera", params=[
            {"name": "zoom", "optional": False, "type": {"name": "number"}},
            {"name": "anchor", "optional": True, "type": {"name": "union", "elements": [
                {"name": "string"}, {"name": "number"},
            ]}},
            {"name": "config", "optional": False, "type": {
                "name": "signature", "type": "object", "raw": big_object, "signature": {},
            }},
            {"name": "extra", "optional": True, "type": None},
        ]),
    ])
    labels = [param.type.name for param in method.params]
    assert labels[0] == "number"
    assert labels[1] == "string \\| number"
    assert labels[2].startswith("{padding:number;")
    assert labels[3] == "FIX ME UNKNOWN TYPE"
    assert method.params[1].optional is True
