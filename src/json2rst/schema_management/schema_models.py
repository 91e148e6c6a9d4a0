"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ScalarProperty:
    """Attribute with a plain declared type."""

    name: str
    title: str
    description: str
    type: str
    enum: tuple[Any, ...] | None
    is_array: bool


@dataclass(frozen=True)
class ReferenceProperty:
    """Attribute pointing at another schema file."""

    name: str
    ref: str
    description: str
    enum: tuple[Any, ...] | None
    is_array: bool


@dataclass(frozen=True)
class ObjectProperty:
    """Inline object whose properties are flattened into the parent page."""

    name: str
    properties: Mapping[str, PropertyNode]


PropertyNode = ScalarProperty | ReferenceProperty | ObjectProperty


@dataclass(frozen=True)
class SchemaDocument:
    """Structured representation of one configuration object schema."""

    title: str
    description: str
    properties: Mapping[str, PropertyNode]
