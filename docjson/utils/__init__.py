"""Utility components for docjson."""

from .file_scanner import SourceScanner, scan_sources

__all__ = ["SourceScanner", "scan_sources"]
