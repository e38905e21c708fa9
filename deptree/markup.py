"""Generic markup parsing: XML or JSON text into a path-addressable tree.

XML elements are converted into plain dicts and lists:

    <Project><ItemGroup><PackageReference Include="A" Version="1.0"/></ItemGroup></Project>

becomes::

    {"Project": {"ItemGroup": [{"PackageReference": [{"$": {"Include": "A", "Version": "1.0"}}]}]}}

Attributes live under ``"$"``, mixed text under ``"_"``, every child tag maps
to a list, and an element without attributes or children collapses to its
text. JSON documents are kept as decoded.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any

import structlog

from deptree.errors import ManifestParseError

log = structlog.get_logger("deptree.markup")

ATTRS_KEY = "$"
TEXT_KEY = "_"

_MISSING = object()


@dataclass(frozen=True)
class GenericNode:
    """Read-only view over a parsed document with default-on-absence lookups."""

    value: Any = None

    def get(self, path: str, default: Any = None) -> Any:
        """Follow a dotted *path*; numeric segments index into lists."""
        current = self.value
        for segment in path.split("."):
            if isinstance(current, dict):
                current = current.get(segment, _MISSING)
            elif isinstance(current, list) and segment.isdigit():
                index = int(segment)
                current = current[index] if index < len(current) else _MISSING
            else:
                current = _MISSING
            if current is _MISSING:
                return default
        return current

    def node(self, path: str) -> GenericNode:
        return GenericNode(self.get(path))

    def nodes(self, path: str) -> list[GenericNode]:
        """Children at *path* as nodes; empty when absent or not a list."""
        found = self.get(path)
        if not isinstance(found, list):
            return []
        return [GenericNode(item) for item in found]

    def has(self, key: str) -> bool:
        return isinstance(self.value, dict) and key in self.value

    def attr(self, name: str, default: str | None = None) -> str | None:
        attrs = self.value.get(ATTRS_KEY) if isinstance(self.value, dict) else None
        if not attrs:
            return default
        return attrs.get(name, default)

    def text(self, path: str | None = None) -> str | None:
        """Text of the node (or the node at *path*), ignoring attributes."""
        target = self.value if path is None else self.get(path)
        if isinstance(target, str):
            return target
        if isinstance(target, dict):
            return target.get(TEXT_KEY, "")
        return None


def _local_name(tag: str) -> str:
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def _convert_one(element: ET.Element, converted: dict[int, Any]) -> Any:
    attrs = {_local_name(k): v for k, v in element.attrib.items()}
    text = (element.text or "").strip()
    children = list(element)

    if not attrs and not children:
        return text

    out: dict[str, Any] = {}
    if attrs:
        out[ATTRS_KEY] = attrs
    if text:
        out[TEXT_KEY] = text
    for child in children:
        out.setdefault(_local_name(child.tag), []).append(converted.pop(id(child)))
    return out


def _element_to_value(root: ET.Element) -> Any:
    """Convert bottom-up with an explicit stack; nesting depth is unbounded."""
    preorder: list[ET.Element] = []
    stack = [root]
    while stack:
        element = stack.pop()
        preorder.append(element)
        stack.extend(element)

    converted: dict[int, Any] = {}
    for element in reversed(preorder):
        converted[id(element)] = _convert_one(element, converted)
    return converted[id(root)]


def parse_xml(text: str) -> GenericNode:
    """Parse XML text; raises :class:`ManifestParseError` on malformed input."""
    text = text.lstrip("\ufeff").strip()
    if not text:
        return GenericNode({})
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        log.warning("markup.parse_failed", syntax="xml", error=str(exc))
        raise ManifestParseError("manifest parsing failed") from exc
    return GenericNode({_local_name(root.tag): _element_to_value(root)})


def parse_json(text: str) -> GenericNode:
    """Parse JSON text; raises :class:`ManifestParseError` on malformed input."""
    text = text.lstrip("\ufeff")
    if not text.strip():
        return GenericNode({})
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        log.warning("markup.parse_failed", syntax="json", error=str(exc))
        raise ManifestParseError("manifest parsing failed") from exc
    return GenericNode(data)


def parse_markup(text: str) -> GenericNode:
    """Parse *text* as JSON or XML depending on its first non-blank character."""
    stripped = text.lstrip("\ufeff").lstrip()
    if stripped.startswith(("{", "[")):
        return parse_json(stripped)
    return parse_xml(stripped)
