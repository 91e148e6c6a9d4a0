"""Schema loading and property classification service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .schema_models import (
    ObjectProperty,
    PropertyNode,
    ReferenceProperty,
    ScalarProperty,
    SchemaDocument,
)


class SchemaError(Exception):
    """Raised for schema parsing or structure failures."""


def load_schema_document(schema_path: Path | str) -> SchemaDocument:
    """Read and parse one schema file."""
    path = Path(schema_path)
    text = path.read_text(encoding="utf-8")
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON schema {path}: {exc}") from exc
    return parse_schema_document(root, source=str(path))


def parse_schema_document(root: Any, *, source: str = "<schema>") -> SchemaDocument:
    """Classify the properties of an already decoded schema."""
    if not isinstance(root, Mapping):
        raise SchemaError(f"{source}: schema root must be an object.")
    return SchemaDocument(
        title=_require_string(root, "title", source),
        description=_require_string(root, "description", source),
        properties=_parse_properties(root, source),
    )


def _parse_properties(node: Mapping[str, Any], location: str) -> dict[str, PropertyNode]:
    properties = node.get("properties")
    if not isinstance(properties, Mapping):
        raise SchemaError(f"{location}: 'properties' must be an object.")
    parsed: dict[str, PropertyNode] = {}
    for name, child in properties.items():
        child_location = f"{location}#{name}"
        if not isinstance(child, Mapping):
            raise SchemaError(f"{child_location}: property definition must be an object.")
        parsed[name] = _parse_property(name, child, child_location)
    return parsed


def _parse_property(name: str, node: Mapping[str, Any], location: str) -> PropertyNode:
    if "properties" in node:
        return ObjectProperty(name=name, properties=_parse_properties(node, location))

    items = node.get("items")
    if items is not None and not isinstance(items, Mapping):
        raise SchemaError(f"{location}: 'items' must be an object.")
    type_node: Mapping[str, Any] = node if items is None else items
    is_array = items is not None
    enum = _optional_enum(type_node, location)
    description = _require_string(node, "description", location)

    if "$ref" in type_node:
        return ReferenceProperty(
            name=name,
            ref=_require_string(type_node, "$ref", location),
            description=description,
            enum=enum,
            is_array=is_array,
        )
    return ScalarProperty(
        name=name,
        title=_require_string(node, "title", location),
        description=description,
        type=_require_string(type_node, "type", location),
        enum=enum,
        is_array=is_array,
    )


def _optional_enum(node: Mapping[str, Any], location: str) -> tuple[Any, ...] | None:
    value = node.get("enum")
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaError(f"{location}: 'enum' must be an array.")
    return tuple(value)


def _require_string(node: Mapping[str, Any], key: str, location: str) -> str:
    value = node.get(key)
    if value is None:
        raise SchemaError(f"{location}: missing required key '{key}'.")
    if not isinstance(value, str):
        raise SchemaError(f"{location}: '{key}' must be a string.")
    return value
