"""
Functional module extraction via documentation.js.

Runs ``documentation build <dir> -f json`` once, then reads each module
node of its output into a UnitDoc. documentation.js represents
descriptions as markdown syntax trees and types as type-expression
trees; ``ModuleDocNode`` flattens both into plain text.
"""

import asyncio
import json
import logging
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional

from docjson.errors import ModuleDocError
from docjson.normalizers.types import UNKNOWN_TYPE
from docjson.schemas import MethodDoc, MethodParam, ParamType, UnitDoc

logger = logging.getLogger(__name__)


def lower_first(name: str) -> str:
    """``OfflineManager`` -> ``offlineManager``."""
    return name[:1].lower() + name[1:]


class ModuleDocNode:
    """Read-only view over one documentation.js comment node."""

    def __init__(self, node: Optional[Dict[str, Any]]):
        self.node = node or {}

    @property
    def name(self) -> str:
        return self.node.get("name") or ""

    def get_text(self) -> str:
        """Plain text of the node's description."""
        return self.flatten(self.node.get("description")).strip()

    @classmethod
    def flatten(cls, tree: Any) -> str:
        """Flatten a markdown syntax tree; paragraphs are separated by blank lines."""
        if not tree:
            return ""
        if isinstance(tree, str):
            return tree

        node_type = tree.get("type")
        if node_type in ("text", "html"):
            return tree.get("value", "")
        if node_type == "inlineCode":
            return f"`{tree.get('value', '')}`"
        if node_type == "code":
            return f"```\n{tree.get('value', '')}\n```"
        if node_type == "break":
            return "\n"

        children = [cls.flatten(child) for child in tree.get("children") or []]
        if node_type in ("root", "list"):
            return "\n\n".join(child for child in children if child)
        if node_type == "listItem":
            return "- " + "\n".join(children)
        return "".join(children)

    @classmethod
    def type_name(cls, type_node: Optional[Dict[str, Any]]) -> str:
        """Render a documentation.js type expression."""
        if not type_node:
            return UNKNOWN_TYPE

        kind = type_node.get("type")
        if kind == "NameExpression":
            return type_node.get("name") or UNKNOWN_TYPE
        if kind in ("OptionalType", "NullableType", "NonNullableType", "RestType"):
            return cls.type_name(type_node.get("expression"))
        if kind == "TypeApplication":
            applications = ", ".join(cls.type_name(a) for a in type_node.get("applications") or [])
            return f"{cls.type_name(type_node.get('expression'))}<{applications}>"
        if kind == "UnionType":
            return " \\| ".join(cls.type_name(e) for e in type_node.get("elements") or [])
        if kind == "RecordType":
            return "Object"
        if kind == "FunctionType":
            return "Function"
        if kind == "AllLiteral":
            return "*"
        if kind in ("StringLiteralType", "NumericLiteralType", "BooleanLiteralType"):
            return json.dumps(type_node.get("value"))
        if kind in ("NullLiteral", "UndefinedLiteral", "VoidLiteral"):
            return kind[:-len("Literal")].lower()
        return UNKNOWN_TYPE

    def get_params(self) -> List[MethodParam]:
        params = []
        for param in self.node.get("params") or []:
            type_node = param.get("type") or {}
            params.append(MethodParam(
                name=param.get("name", ""),
                description=self.flatten(param.get("description")).strip() or None,
                type=ParamType(name=self.type_name(type_node)),
                optional=type_node.get("type") == "OptionalType",
            ))
        return params

    def get_returns(self) -> Optional[Dict[str, Any]]:
        returns = self.node.get("returns") or []
        if not returns:
            return None
        first = returns[0]
        return {
            "description": self.flatten(first.get("description")).strip(),
            "type": {"name": self.type_name(first.get("type"))},
        }

    def get_examples(self) -> List[str]:
        return [example.get("description", "") for example in self.node.get("examples") or []]

    def get_methods(self) -> List[MethodDoc]:
        """Static and instance members documented on this module."""
        members = self.node.get("members") or {}
        methods = []
        for member in (members.get("static") or []) + (members.get("instance") or []):
            child = ModuleDocNode(member)
            methods.append(MethodDoc(
                name=child.name,
                description=child.get_text() or None,
                params=child.get_params(),
                returns=child.get_returns(),
                examples=child.get_examples(),
            ))
        return methods

    def to_unit(self) -> UnitDoc:
        name = lower_first(self.name)
        source_file = (self.node.get("context") or {}).get("file") or ""
        return UnitDoc(
            name=name,
            file_name_with_ext=PurePosixPath(source_file.replace("\\", "/")).name or None,
            description=self.get_text(),
            props=[],
            styles=[],
            methods=self.get_methods(),
        )


class ModuleDocExtractor:
    """Run the module documentation tool and read its JSON output."""

    def __init__(self, command: Optional[List[str]] = None):
        """
        Args:
            command: Tool invocation; ``<modules_path> -f json`` is appended
                     (default: ``npx documentation build``)
        """
        self.command = list(command or ["npx", "documentation", "build"])

    async def run(self, modules_path: Path) -> str:
        """
        Invoke the tool once and return its stdout.

        Raises:
            ModuleDocError: On non-zero exit or any stderr output
        """
        cmd = self.command + [str(modules_path), "-f", "json"]
        logger.debug(f"Running module documentation tool: {' '.join(cmd)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ModuleDocError(f"Could not run module documentation tool: {e}") from e

        stdout, stderr = await process.communicate()
        error_output = stderr.decode("utf-8", errors="replace").strip()

        if process.returncode != 0 or error_output:
            raise ModuleDocError(
                f"Module documentation tool failed (exit {process.returncode}): {error_output}",
                returncode=process.returncode,
                stderr=error_output,
            )

        return stdout.decode("utf-8")

    @staticmethod
    def parse_output(output: str) -> Dict[str, UnitDoc]:
        """
        Convert documentation.js JSON into UnitDocs keyed by module name.

        Raises:
            ModuleDocError: If the output is not a JSON list of nodes
        """
        try:
            nodes = json.loads(output)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse module documentation output: {output[:500]}")
            raise ModuleDocError(f"Invalid JSON output from module documentation tool: {e}") from e

        if not isinstance(nodes, list):
            raise ModuleDocError("Module documentation output is not a list of modules")

        results: Dict[str, UnitDoc] = {}
        for node in nodes:
            if not isinstance(node, dict) or not node.get("name"):
                continue
            unit = ModuleDocNode(node).to_unit()
            results[unit.name] = unit
            logger.info(f"Processed {unit.name} (0 props, {len(unit.methods)} methods)")

        return results

    async def extract(self, modules_path: Path) -> Dict[str, UnitDoc]:
        return self.parse_output(await self.run(modules_path))
