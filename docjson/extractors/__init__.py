"""Extraction components for docjson."""

from .component_extractor import ComponentExtractor, ReactDocgenExtractor, first_record
from .module_extractor import ModuleDocExtractor, ModuleDocNode, lower_first

__all__ = [
    "ComponentExtractor",
    "ReactDocgenExtractor",
    "first_record",
    "ModuleDocExtractor",
    "ModuleDocNode",
    "lower_first",
]
