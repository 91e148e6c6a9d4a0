"""reStructuredText rendering exports."""

from .constants import RST_SUFFIX, SCHEMA_SUFFIX
from .document_writer import document_name, render_schema_document
from .object_naming import ldap_object_name
from .page_models import ReferenceRegistrar, RenderedDocument
from .text_formatting import (
    RenderError,
    format_description,
    format_enum_value,
    quote_substitution_references,
    rewrite_anchor_tags,
)

__all__ = [
    "RST_SUFFIX",
    "SCHEMA_SUFFIX",
    "ReferenceRegistrar",
    "RenderedDocument",
    "RenderError",
    "document_name",
    "format_description",
    "format_enum_value",
    "ldap_object_name",
    "quote_substitution_references",
    "render_schema_document",
    "rewrite_anchor_tags",
]
