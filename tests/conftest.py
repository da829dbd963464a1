import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest


def python_command(script: str) -> List[str]:
    """Command running an inline Python script; extra CLI args land in sys.argv."""
    return [sys.executable, "-c", script]


@pytest.fixture
def module_tool() -> Callable[[Any], List[str]]:
    """Build a module documentation command that prints the given JSON."""
    def factory(payload: Any) -> List[str]:
        return python_command(f"import sys; sys.stdout.write({json.dumps(json.dumps(payload))})")
    return factory


class FakeComponentExtractor:
    """Test double returning canned records by file name."""

    def __init__(self, records: Dict[str, Dict[str, Any]]):
        self.records = records
        self.calls: List[str] = []

    def parse(self, content: str, file_name: str) -> Dict[str, Any]:
        self.calls.append(file_name)
        return self.records[file_name]


@pytest.fixture
def component_dir(tmp_path: Path) -> Path:
    path = tmp_path / "javascript" / "components"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def modules_dir(tmp_path: Path) -> Path:
    path = tmp_path / "javascript" / "modules"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def fake_extractor() -> Callable[[Dict[str, Dict[str, Any]]], FakeComponentExtractor]:
    return FakeComponentExtractor
