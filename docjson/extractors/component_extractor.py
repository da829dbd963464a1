"""
Component metadata extraction.

The pipeline depends only on the ``ComponentExtractor`` protocol: given
a source file's text and name, return one raw react-docgen style record
(``displayName``, ``description``, ``props``, ``methods``). The default
implementation shells out to the react-docgen CLI.
"""

import json
import logging
import subprocess
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from docjson.errors import ExtractionError

logger = logging.getLogger(__name__)


class ComponentExtractor(Protocol):
    """Anything that turns one component source file into a raw record."""

    def parse(self, content: str, file_name: str) -> Dict[str, Any]:
        ...


class ReactDocgenExtractor:
    """
    Run the react-docgen CLI on a single component file.

    The source text is written to a temporary directory under its own
    file name so the parser picks the right syntax from the extension.
    """

    def __init__(self, command: Optional[List[str]] = None, timeout: Optional[float] = None):
        """
        Args:
            command: CLI invocation; the file path is appended
                     (default: ``npx react-docgen``)
            timeout: Optional timeout in seconds for each run
        """
        self.command = list(command or ["npx", "react-docgen"])
        self.timeout = timeout

    def parse(self, content: str, file_name: str) -> Dict[str, Any]:
        """
        Extract the first documented component of a file.

        Raises:
            ExtractionError: If the CLI fails or its output is unusable
        """
        with tempfile.TemporaryDirectory(prefix="docjson_") as tmpdir:
            source_path = Path(tmpdir) / file_name
            source_path.write_text(content, encoding="utf-8")

            cmd = self.command + [str(source_path)]
            logger.debug(f"Running component extractor: {' '.join(cmd)}")

            try:
                result = subprocess.run(
                    cmd,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout
                )
            except (OSError, subprocess.SubprocessError) as e:
                raise ExtractionError(f"Could not run extractor on {file_name}: {e}", file_name) from e

            if result.returncode != 0:
                raise ExtractionError(
                    f"Extractor failed on {file_name}: {result.stderr.strip()}",
                    file_name
                )

            try:
                output = json.loads(result.stdout)
            except json.JSONDecodeError as e:
                logger.error(f"Failed to parse extractor output: {result.stdout[:500]}")
                raise ExtractionError(f"Invalid JSON output for {file_name}: {e}", file_name) from e

        return first_record(output, file_name)


def first_record(output: Any, file_name: str) -> Dict[str, Any]:
    """
    Pick the first component record out of react-docgen output.

    Accepts a bare record, a list of records, or the ``{path: [records]}``
    mapping printed by newer CLI versions.
    """
    if isinstance(output, dict) and not _looks_like_record(output):
        records = [r for value in output.values() for r in (value if isinstance(value, list) else [value])]
    elif isinstance(output, list):
        records = output
    else:
        records = [output]

    if not records or not isinstance(records[0], dict):
        raise ExtractionError(f"No component definition found in {file_name}", file_name)
    return records[0]


def _looks_like_record(output: Dict[str, Any]) -> bool:
    return any(key in output for key in ("props", "methods", "displayName", "description"))
