"""Build configuration."""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from docjson.methods import DEFAULT_IGNORE_METHODS
from docjson.styles import DEFAULT_FAMILY_SUFFIX, DEFAULT_SINGLETON_FAMILIES


class BuilderConfig(BaseModel):
    """
    Paths and fixed lists driving one docs.json build.

    Defaults mirror the layout of a React Native component library:
    components under ``javascript/components``, modules under
    ``javascript/modules`` and the output in ``docs/docs.json``.
    """
    component_path: Path = Field(description="Directory of component sources")
    modules_path: Path = Field(description="Directory of functional module sources")
    output_path: Path = Field(description="Where docs.json is written")
    style_spec_path: Optional[Path] = Field(
        None,
        description="JSON style specification catalog (optional)"
    )

    ignore_files: List[str] = Field(
        default_factory=lambda: ["AbstractLayer", "AbstractSource", "NativeBridgeComponent"],
        description="Component file stems that are never documented"
    )
    ignore_pattern: str = Field(
        r"\.web\.",
        description="Regex for platform-specific variants to skip"
    )
    ignore_methods: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_METHODS),
        description="Framework-internal method names dropped from output"
    )
    file_extensions: List[str] = Field(
        default_factory=lambda: [".js", ".tsx", ".ts"],
        description="Component source extensions (.d.ts is always excluded)"
    )
    exclude_dirs: List[str] = Field(
        default_factory=lambda: ["node_modules"],
        description="Directory names skipped by the component scan"
    )

    component_extractor_command: List[str] = Field(
        default_factory=lambda: ["npx", "react-docgen"],
        description="Command printing react-docgen JSON for one file"
    )
    module_doc_command: List[str] = Field(
        default_factory=lambda: ["npx", "documentation", "build"],
        description="Command printing documentation.js JSON for a directory"
    )

    singleton_style_families: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SINGLETON_FAMILIES)
    )
    style_family_suffix: str = DEFAULT_FAMILY_SUFFIX

    @classmethod
    def from_root(cls, root: Path, **overrides) -> "BuilderConfig":
        """Config with default paths relative to a library checkout."""
        root = Path(root).resolve()
        values = {
            "component_path": root / "javascript" / "components",
            "modules_path": root / "javascript" / "modules",
            "output_path": root / "docs" / "docs.json",
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
