"""
File scanner for component source directories.

Recursively scans a source directory for component files and drops the
ones that must never be documented (abstract base classes, bridges and
platform-specific variants).
"""

from pathlib import Path
from typing import Iterable, List, Optional
import logging
import re

logger = logging.getLogger(__name__)


class SourceScanner:
    """
    Recursively scan a component directory for documentable source files.

    Supports:
    - JavaScript (.js)
    - TypeScript (.ts, .tsx), excluding declaration files (.d.ts)
    """

    SUPPORTED_EXTENSIONS = {'.js', '.tsx', '.ts'}

    DEFAULT_EXCLUDE_DIRS = {'node_modules'}

    def __init__(
        self,
        base_path: Path,
        extensions: Optional[Iterable[str]] = None,
        ignore_files: Optional[Iterable[str]] = None,
        ignore_pattern: Optional[str] = None,
        exclude_dirs: Optional[Iterable[str]] = None
    ):
        """
        Initialize the source scanner.

        Args:
            base_path: Base directory to scan
            extensions: File extensions to include (default: .js, .tsx, .ts)
            ignore_files: File stems to skip (e.g. "AbstractLayer")
            ignore_pattern: Regex matched against file names to skip
            exclude_dirs: Directory names to exclude
        """
        self.base_path = Path(base_path).resolve()
        self.extensions = set(extensions or self.SUPPORTED_EXTENSIONS)
        self.ignore_files = set(ignore_files or [])
        self.ignore_pattern = re.compile(ignore_pattern) if ignore_pattern else None
        self.exclude_dirs = set(self.DEFAULT_EXCLUDE_DIRS if exclude_dirs is None else exclude_dirs)

        if not self.base_path.exists():
            raise ValueError(f"Base path does not exist: {self.base_path}")

        if not self.base_path.is_dir():
            raise ValueError(f"Base path is not a directory: {self.base_path}")

    @staticmethod
    def unit_name(file_path: Path) -> str:
        """File name without its source extension (``Foo.tsx`` -> ``Foo``)."""
        return file_path.stem

    def is_source_file(self, file_path: Path) -> bool:
        if file_path.name.endswith('.d.ts'):
            return False
        return file_path.suffix in self.extensions

    def is_ignored(self, file_path: Path) -> bool:
        if self.unit_name(file_path) in self.ignore_files:
            return True
        if self.ignore_pattern and self.ignore_pattern.search(file_path.name):
            return True
        return False

    def scan(self) -> List[Path]:
        """
        Scan the base directory recursively for component files.

        Returns:
            Sorted list of source file paths, ignored files removed
        """
        source_files = []

        logger.info(f"Scanning component directory: {self.base_path}")

        for file_path in self._walk_directory(self.base_path):
            if not self.is_source_file(file_path):
                continue
            if self.is_ignored(file_path):
                logger.debug(f"Skipping ignored file: {file_path.name}")
                continue
            source_files.append(file_path)

        # Sort for consistent ordering
        source_files.sort()

        logger.info(f"Found {len(source_files)} component files")
        return source_files

    def _walk_directory(self, directory: Path):
        """
        Recursively walk directory, yielding files while respecting exclusions.

        Args:
            directory: Directory to walk

        Yields:
            Path objects for files found
        """
        for item in sorted(directory.iterdir()):
            if item.name.startswith('.'):
                continue

            if item.is_dir():
                if item.name in self.exclude_dirs:
                    logger.debug(f"Skipping excluded directory: {item.name}")
                    continue
                yield from self._walk_directory(item)

            elif item.is_file():
                yield item


def scan_sources(
    base_path: Path,
    extensions: Optional[Iterable[str]] = None,
    ignore_files: Optional[Iterable[str]] = None,
    ignore_pattern: Optional[str] = None,
    exclude_dirs: Optional[Iterable[str]] = None
) -> List[Path]:
    """
    Convenience function to scan a component directory.

    Example:
        >>> files = scan_sources(Path("javascript/components"), ignore_files=["AbstractLayer"])
    """
    scanner = SourceScanner(
        base_path,
        extensions=extensions,
        ignore_files=ignore_files,
        ignore_pattern=ignore_pattern,
        exclude_dirs=exclude_dirs,
    )
    return scanner.scan()
