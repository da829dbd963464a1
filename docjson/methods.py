"""
Method processing: private method filtering, usage example extraction
and parameter type labelling.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from docjson.normalizers.types import type_label
from docjson.schemas import MethodDoc, MethodParam, ParamType, parse_raw_type

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_METHODS = ("setNativeProps",)

PRIVATE_PREFIX = "_"
TAG_MARKER = "@"
EXAMPLE_TAG = "example"


class MethodProcessor:
    """Turns raw extractor method records into public MethodDocs."""

    def __init__(self, ignore_methods: Iterable[str] = DEFAULT_IGNORE_METHODS):
        self.ignore_methods = set(ignore_methods)

    @staticmethod
    def is_private(name: Optional[str]) -> bool:
        return not name or name.startswith(PRIVATE_PREFIX)

    def is_public(self, name: Optional[str]) -> bool:
        return not self.is_private(name) and name not in self.ignore_methods

    @staticmethod
    def extract_examples(docblock: Optional[str]) -> List[str]:
        """
        Pull ``@example`` blocks out of a docblock.

        Each fragment after an ``@`` that starts with ``example`` becomes
        one example, with the keyword removed.
        """
        if not docblock:
            return []
        return [
            block[len(EXAMPLE_TAG):]
            for block in docblock.split(TAG_MARKER)
            if block.startswith(EXAMPLE_TAG)
        ]

    def process_method(self, method: Dict[str, Any]) -> MethodDoc:
        params = [
            MethodParam(
                name=str(param.get("name", "")),
                optional=param.get("optional"),
                description=param.get("description"),
                type=ParamType(name=type_label(parse_raw_type(param.get("type")))),
            )
            for param in method.get("params") or []
        ]
        return MethodDoc(
            name=method["name"],
            description=method.get("description") or None,
            docblock=method.get("docblock") or None,
            modifiers=method.get("modifiers") or [],
            params=params,
            returns=method.get("returns") or None,
            examples=self.extract_examples(method.get("docblock")),
        )

    def process(self, methods: Iterable[Dict[str, Any]]) -> List[MethodDoc]:
        """
        Convert raw method records, dropping non-public ones.

        Args:
            methods: Raw method records in source order

        Returns:
            MethodDocs for public methods, in source order
        """
        result = []
        for method in methods:
            name = method.get("name")
            if not self.is_public(name):
                logger.debug(f"Skipping non-public method: {name!r}")
                continue
            result.append(self.process_method(method))
        return result
