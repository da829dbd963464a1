"""
Style catalog merging.

The style specification catalog lists style families (``fill``,
``line``, ``light``...) with their attributes. Components are matched to
families by name: ``fill-extrusion`` documents ``FillExtrusionLayer``,
while singleton families such as ``light`` document ``Light`` directly.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from docjson.schemas import StyleDoc, StyleValue

logger = logging.getLogger(__name__)

DEFAULT_SINGLETON_FAMILIES = ("Light", "Atmosphere", "Terrain")
DEFAULT_FAMILY_SUFFIX = "Layer"


def pascal_case(name: str) -> str:
    """``fill-extrusion`` -> ``FillExtrusion``."""
    return "".join(
        part[:1].upper() + part[1:]
        for part in re.split(r"[-_\s]+", name)
        if part
    )


def build_style_doc(attribute: Dict[str, Any]) -> StyleDoc:
    """Convert one catalog attribute into its StyleDoc."""
    doc = attribute.get("doc") or {}
    style = StyleDoc(
        name=attribute["name"],
        type=attribute.get("type", ""),
        minimum=doc.get("minimum"),
        maximum=doc.get("maximum"),
        units=doc.get("units"),
        default=doc.get("default"),
        description=doc.get("description"),
        requires=doc.get("requires"),
        disabled_by=doc.get("disabledBy"),
        allowed_function_types=attribute.get("allowedFunctionTypes") or [],
        expression=attribute.get("expression"),
        transition=attribute.get("transition"),
    )

    if style.type == "enum":
        values = doc.get("values") or {}
        style.values = [
            StyleValue(value=value, doc=(meta or {}).get("doc"))
            for value, meta in values.items()
        ]
    elif style.type == "array":
        style.type = f"{style.type}<{attribute.get('value')}>"

    return style


class StyleCatalog:
    """Read-only index of style families keyed by documented unit name."""

    def __init__(
        self,
        families: Iterable[Dict[str, Any]],
        singleton_families: Iterable[str] = DEFAULT_SINGLETON_FAMILIES,
        suffix: str = DEFAULT_FAMILY_SUFFIX,
    ):
        """
        Index style families.

        Args:
            families: Catalog entries, each ``{"name": ..., "properties": [...]}``
            singleton_families: Families documented under their bare name
            suffix: Suffix appended to all other family names
        """
        singletons = set(singleton_families)
        self._families: Dict[str, Dict[str, Any]] = {}

        for family in families:
            unit_name = pascal_case(family["name"])
            if unit_name not in singletons:
                unit_name = f"{unit_name}{suffix}"
            self._families[unit_name] = family

        logger.debug(f"Indexed {len(self._families)} style families")

    def __contains__(self, unit_name: str) -> bool:
        return unit_name in self._families

    def __len__(self) -> int:
        return len(self._families)

    def styles_for(self, unit_name: str) -> Optional[List[StyleDoc]]:
        """Style attributes documented for a unit, or None if it has none."""
        family = self._families.get(unit_name)
        if not family or not family.get("properties"):
            return None
        return [build_style_doc(attribute) for attribute in family["properties"]]


def load_style_catalog(path: Path, **kwargs) -> StyleCatalog:
    """
    Load a style catalog from a JSON file.

    The file holds a list of families; a mapping of family name to
    attribute list is also accepted.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = [{"name": name, "properties": properties} for name, properties in data.items()]

    logger.info(f"Loaded style catalog: {path}")
    return StyleCatalog(data, **kwargs)
