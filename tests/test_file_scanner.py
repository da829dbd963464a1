"""Tests for component source scanning."""

from pathlib import Path

import pytest

from docjson.utils import SourceScanner, scan_sources


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("export default {};\n")


def test_scan_filters_extensions_and_ignored_files(tmp_path: Path) -> None:
    for name in [
        "MapView.tsx",
        "Camera.js",
        "sources/VectorSource.ts",
        "AbstractLayer.tsx",
        "MapView.web.tsx",
        "types.d.ts",
        "README.md",
        "node_modules/dep/index.js",
        ".hidden/Secret.js",
    ]:
        _touch(tmp_path / name)

    files = scan_sources(
        tmp_path,
        ignore_files=["AbstractLayer"],
        ignore_pattern=r"\.web\.",
    )
    assert {f.name for f in files} == {"MapView.tsx", "Camera.js", "VectorSource.ts"}
    assert files == sorted(files)


def test_unit_name_strips_only_the_source_extension() -> None:
    assert SourceScanner.unit_name(Path("MapView.tsx")) == "MapView"
    assert SourceScanner.unit_name(Path("Camera.ios.js")) == "Camera.ios"


def test_missing_directory_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        SourceScanner(tmp_path / "missing")


def test_only_configured_directories_are_excluded(tmp_path: Path) -> None:
    for name in [
        "MapView.tsx",
        "__tests__/MapView.test.js",
        "__mocks__/NativeModules.js",
        "node_modules/dep/index.js",
    ]:
        _touch(tmp_path / name)

    default_names = {f.name for f in scan_sources(tmp_path)}
    assert default_names == {"MapView.tsx", "MapView.test.js", "NativeModules.js"}

    custom_names = {f.name for f in scan_sources(tmp_path, exclude_dirs=["__tests__", "__mocks__"])}
    assert custom_names == {"MapView.tsx", "index.js"}
