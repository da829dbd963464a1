"""
Minimal JSDoc comment parser.

Function-typed props describe their callback arguments with ``@param``
and ``@returns`` tags inside the prop description. This module splits
such a description into free text, parameters and return value.
"""

import re
from typing import List, Optional

from pydantic import BaseModel, Field

from docjson.schemas import JsDocParam, JsDocReturns, JsDocType


class JsDoc(BaseModel):
    """Parsed JSDoc comment."""
    description: str = ""
    params: List[JsDocParam] = Field(default_factory=list)
    returns: Optional[JsDocReturns] = None


TAG_PATTERN = re.compile(r"^\s*@(\w+)\s*(.*)$")

# {Type} at the start of a tag body; nested braces are not supported
TYPE_PATTERN = re.compile(r"^\{([^}]*)\}\s*(.*)$", re.DOTALL)

PARAM_NAME_PATTERN = re.compile(r"^(\[[^\]]+\]|\S+)\s*(?:-\s+)?(.*)$", re.DOTALL)


def _split_type(body: str):
    match = TYPE_PATTERN.match(body)
    if not match:
        return None, body
    return JsDocType(name=match.group(1).strip() or None), match.group(2)


def _parse_param(body: str) -> Optional[JsDocParam]:
    param_type, rest = _split_type(body.strip())
    match = PARAM_NAME_PATTERN.match(rest.strip())
    if not match:
        return None

    name, description = match.group(1), match.group(2).strip()
    optional = False
    if name.startswith("[") and name.endswith("]"):
        optional = True
        name = name[1:-1].split("=", 1)[0].strip()

    return JsDocParam(
        name=name,
        description=description or None,
        type=param_type,
        optional=optional,
    )


def _parse_returns(body: str) -> JsDocReturns:
    returns_type, rest = _split_type(body.strip())
    return JsDocReturns(description=rest.strip() or None, type=returns_type)


def parse_jsdoc(text: Optional[str]) -> JsDoc:
    """
    Parse a JSDoc comment body (without ``/** */`` delimiters).

    Args:
        text: Comment text, possibly None

    Returns:
        JsDoc with the leading description, ``@param`` entries in order
        and the ``@returns``/``@return`` entry if any
    """
    if not text:
        return JsDoc()

    description_lines: List[str] = []
    tags: List[List[str]] = []

    for line in text.splitlines():
        line = line.strip().lstrip("*").strip()
        match = TAG_PATTERN.match(line)
        if match:
            tags.append([match.group(1), match.group(2)])
        elif tags:
            # Continuation of the previous tag
            tags[-1][1] = f"{tags[-1][1]} {line}".strip()
        else:
            description_lines.append(line)

    doc = JsDoc(description="\n".join(description_lines).strip())

    for tag, body in tags:
        if tag in ("param", "arg", "argument"):
            param = _parse_param(body)
            if param is not None:
                doc.params.append(param)
        elif tag in ("returns", "return"):
            doc.returns = _parse_returns(body)

    return doc
