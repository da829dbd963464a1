"""
docs.json builder - main orchestration logic.

Ties together scanning, extraction and normalization:

1. Scan the component directory and extract one raw record per file
2. Run the module documentation tool over the module directory
3. Post-process every component record (props, styles, methods)
4. Merge both result sets and write docs.json

Steps 1 and 2 run concurrently; if either fails the build fails and
nothing is written.
"""

import asyncio
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional

from docjson.config import BuilderConfig
from docjson.errors import ExtractionError
from docjson.extractors import ComponentExtractor, ModuleDocExtractor, ReactDocgenExtractor
from docjson.methods import MethodProcessor
from docjson.normalizers import normalize_property
from docjson.schemas import DocJSON, UnitDoc, parse_raw_property
from docjson.styles import StyleCatalog, load_style_catalog
from docjson.utils import SourceScanner

logger = logging.getLogger(__name__)

# Docblock markers such as "@component {MapView}" left in descriptions
DOCBLOCK_MARKER_PATTERN = re.compile(r"(\n*)(@\w+) (\{.*\})")


def strip_docblock_markers(description: Optional[str]) -> str:
    return DOCBLOCK_MARKER_PATTERN.sub("", description or "")


class DocJSONBuilder:
    """
    Main builder for docs.json.

    Orchestrates the generation pipeline over component and module
    sources and owns the resulting document until it is written.
    """

    def __init__(
        self,
        config: BuilderConfig,
        component_extractor: Optional[ComponentExtractor] = None,
        module_extractor: Optional[ModuleDocExtractor] = None,
        style_catalog: Optional[StyleCatalog] = None,
    ):
        """
        Initialize the builder.

        Args:
            config: Paths and fixed lists for this build
            component_extractor: Raw record extractor (default: react-docgen CLI)
            module_extractor: Module tool runner (default: documentation.js CLI)
            style_catalog: Style families (default: loaded from config.style_spec_path)
        """
        self.config = config
        self.component_extractor = component_extractor or ReactDocgenExtractor(
            config.component_extractor_command
        )
        self.module_extractor = module_extractor or ModuleDocExtractor(config.module_doc_command)

        if style_catalog is None:
            if config.style_spec_path is not None:
                style_catalog = load_style_catalog(
                    config.style_spec_path,
                    singleton_families=config.singleton_style_families,
                    suffix=config.style_family_suffix,
                )
            else:
                style_catalog = StyleCatalog([])
        self.style_catalog = style_catalog

        self.method_processor = MethodProcessor(config.ignore_methods)

    def postprocess(self, component: Dict[str, Any], name: str) -> UnitDoc:
        """
        Normalize one raw component record.

        Args:
            component: Raw extractor record
            name: Unit name (the file stem)

        Returns:
            UnitDoc with normalized props, public methods and merged styles
        """
        props = component.get("props") or {}
        unit = UnitDoc(
            name=name,
            file_name_with_ext=component.get("fileNameWithExt"),
            description=strip_docblock_markers(component.get("description")),
            styles=self.style_catalog.styles_for(name),
            props=[
                normalize_property(parse_raw_property(prop_meta), name=prop_name)
                for prop_name, prop_meta in props.items()
            ],
            methods=self.method_processor.process(component.get("methods") or []),
        )

        logger.info(f"Processed {unit.name} ({len(unit.props)} props, {len(unit.methods)} methods)")
        return unit

    def build_components(self) -> Dict[str, UnitDoc]:
        """
        Extract and post-process every component file.

        Files are handled one at a time; each adds its own key to the
        accumulator, which is returned to the caller.

        Raises:
            ExtractionError: If the extractor fails on any file
        """
        scanner = SourceScanner(
            self.config.component_path,
            extensions=self.config.file_extensions,
            ignore_files=self.config.ignore_files,
            ignore_pattern=self.config.ignore_pattern,
            exclude_dirs=self.config.exclude_dirs,
        )

        results: Dict[str, UnitDoc] = {}
        for file_path in scanner.scan():
            name = scanner.unit_name(file_path)
            content = file_path.read_text(encoding="utf-8")

            try:
                component = self.component_extractor.parse(content, file_path.name)
            except ExtractionError:
                raise
            except Exception as e:
                raise ExtractionError(f"Extractor failed on {file_path.name}: {e}", file_path.name) from e

            component = dict(component, fileNameWithExt=file_path.name)
            results[name] = self.postprocess(component, name)

        return results

    async def build_modules(self) -> Dict[str, UnitDoc]:
        """
        Run the module documentation tool once and read its output.

        Raises:
            ModuleDocError: If the tool fails or its output is malformed
        """
        logger.info(f"Extracting module docs from: {self.config.modules_path}")
        return await self.module_extractor.extract(self.config.modules_path)

    async def generate(self) -> DocJSON:
        """
        Run the complete build and write docs.json.

        Returns:
            The written document
        """
        logger.info("=" * 80)
        logger.info("Starting docs.json generation")
        logger.info("=" * 80)

        components, modules = await asyncio.gather(
            asyncio.to_thread(self.build_components),
            self.build_modules(),
        )

        results: Dict[str, UnitDoc] = {}
        results.update(components)
        results.update(modules)
        document = DocJSON(results)

        output_path = Path(self.config.output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document.dump_json(), encoding="utf-8")

        logger.info(f"Wrote {len(results)} units to {output_path}")
        return document

    def generate_sync(self) -> DocJSON:
        """Blocking wrapper around ``generate``."""
        return asyncio.run(self.generate())
