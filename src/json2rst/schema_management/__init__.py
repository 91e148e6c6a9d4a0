"""Schema management exports."""

from .schema_models import (
    ObjectProperty,
    PropertyNode,
    ReferenceProperty,
    ScalarProperty,
    SchemaDocument,
)
from .schema_projection import SchemaError, load_schema_document, parse_schema_document

__all__ = [
    "ObjectProperty",
    "PropertyNode",
    "ReferenceProperty",
    "ScalarProperty",
    "SchemaDocument",
    "SchemaError",
    "load_schema_document",
    "parse_schema_document",
]
