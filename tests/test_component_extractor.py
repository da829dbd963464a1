"""Tests for the react-docgen component extractor."""

import sys

import pytest

from docjson.errors import ExtractionError
from docjson.extractors import ReactDocgenExtractor, first_record

ECHO_SCRIPT = (
    "import json, os, sys\n"
    "path = sys.argv[1]\n"
    "record = {'displayName': os.path.basename(path), 'description': open(path).read(),"
    " 'props': {}, 'methods': []}\n"
    "print(json.dumps({path: [record]}))\n"
)


def test_first_record_accepts_all_output_shapes() -> None:
    record = {"displayName": "MapView", "props": {}}
    assert first_record(record, "MapView.tsx") is record
    assert first_record([record, {"displayName": "Other"}], "MapView.tsx") is record
    assert first_record({"/tmp/MapView.tsx": [record]}, "MapView.tsx") is record


def test_first_record_rejects_empty_output() -> None:
    with pytest.raises(ExtractionError):
        first_record([], "Empty.tsx")


def test_extractor_runs_cli_on_named_copy_of_source() -> None:
    extractor = ReactDocgenExtractor([sys.executable, "-c", ECHO_SCRIPT])
    record = extractor.parse("/** Shows a map */\nexport default class MapView {}\n", "MapView.tsx")
    assert record["displayName"] == "MapView.tsx"
    assert record["description"].startswith("/** Shows a map */")


def test_extractor_failure_raises_extraction_error() -> None:
    extractor = ReactDocgenExtractor([sys.executable, "-c", "import sys; sys.exit('parse error')"])
    with pytest.raises(ExtractionError) as excinfo:
        extractor.parse("garbage", "Broken.tsx")
    assert excinfo.value.file_name == "Broken.tsx"
    assert "parse error" in str(excinfo.value)


def test_extractor_rejects_non_json_output() -> None:
    extractor = ReactDocgenExtractor([sys.executable, "-c", "print('not json')"])
    with pytest.raises(ExtractionError):
        extractor.parse("", "Broken.tsx")
