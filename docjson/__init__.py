"""
docjson - machine-readable API documentation for component libraries.

Turns extractor metadata for visual components and functional modules
into one normalized docs.json record per unit.

Main Components:
- Normalizers: type descriptors, properties, JSDoc comments
- Styles: style specification catalog merging
- Methods: private method filtering and example extraction
- Extractors: react-docgen and documentation.js runners
- Builder: orchestrates the whole build

Usage:
    from pathlib import Path
    from docjson import BuilderConfig, DocJSONBuilder

    config = BuilderConfig.from_root(Path("."))
    document = DocJSONBuilder(config).generate_sync()
"""

__version__ = "0.1.0"

from .schemas import (
    DocJSON,
    MethodDoc,
    PropDoc,
    StyleDoc,
    UnitDoc,
)
from .config import BuilderConfig
from .errors import DocJSONError, ExtractionError, ModuleDocError
from .builder import DocJSONBuilder

__all__ = [
    "DocJSONBuilder",
    "BuilderConfig",
    "DocJSON",
    "UnitDoc",
    "PropDoc",
    "MethodDoc",
    "StyleDoc",
    "DocJSONError",
    "ExtractionError",
    "ModuleDocError",
]
