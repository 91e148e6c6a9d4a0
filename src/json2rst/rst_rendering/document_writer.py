"""reStructuredText page rendering service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from json2rst.configuration.runtime_settings import RenderSettings
from json2rst.schema_management.schema_models import (
    ObjectProperty,
    PropertyNode,
    ReferenceProperty,
    ScalarProperty,
    SchemaDocument,
)

from .constants import ARRAY_MARKER, ENUM_HEADING, REFERENCE_TYPE, ROW_INDENT, SCHEMA_SUFFIX
from .object_naming import ldap_object_name
from .page_models import ReferenceRegistrar, RenderedDocument
from .text_formatting import format_description, format_enum_value


def render_schema_document(
    document: SchemaDocument,
    output_name: str,
    settings: RenderSettings,
    register_reference: ReferenceRegistrar,
) -> RenderedDocument:
    """Render one schema page.

    Args:
      document: Parsed schema.
      output_name: File name of the page, used to derive the LDAP object name.
      settings: Table layout settings.
      register_reference: Called for every ``$ref``; returns True when the
        reference is new to the run and belongs in this page's toctree.

    Returns:
      The page text and the newly discovered references in order.
    """
    parts: list[str] = [_render_header(document, output_name, settings)]
    references: list[str] = []
    _render_properties(document.properties, parts, references, register_reference)
    if references:
        parts.append(_render_toctree(references))
    return RenderedDocument(text="".join(parts), references=tuple(references))


def document_name(ref: str) -> str:
    """Return the Sphinx document name a schema reference is published under."""
    return ref.removesuffix(SCHEMA_SUFFIX)


def _render_header(document: SchemaDocument, output_name: str, settings: RenderSettings) -> str:
    object_name = ldap_object_name(output_name, settings.dicom_defined_files)
    lines = [
        document.title,
        "=" * len(document.title),
        document.description,
        "",
        f".. tabularcolumns:: {settings.tabular_columns}",
        f".. csv-table:: {document.title} Attributes (LDAP Object: {object_name})",
        f"    :header: {settings.table_header}",
        f"    :widths: {settings.table_widths}",
        "",
    ]
    return "\n".join(lines) + "\n"


def _render_properties(
    properties: Mapping[str, PropertyNode],
    parts: list[str],
    references: list[str],
    register_reference: ReferenceRegistrar,
) -> None:
    for node in properties.values():
        match node:
            case ObjectProperty():
                _render_properties(node.properties, parts, references, register_reference)
            case ReferenceProperty():
                if register_reference(node.ref):
                    references.append(node.ref)
                parts.append(_render_reference_row(node))
            case ScalarProperty():
                parts.append(_render_scalar_row(node))


def _render_reference_row(node: ReferenceProperty) -> str:
    marker = ARRAY_MARKER if node.is_array else ""
    name_cell = f":doc:`{document_name(node.ref)}` {marker}"
    description_cell = format_description(node.description) + _render_enum(node.enum)
    return f'{ROW_INDENT}"{name_cell}",{REFERENCE_TYPE},"{description_cell}"\n'


def _render_scalar_row(node: ScalarProperty) -> str:
    marker = ARRAY_MARKER if node.is_array else ""
    name_cell = (
        f"\n{ROW_INDENT}.. _{node.name}:\n\n"
        f"{ROW_INDENT}:ref:`{node.title}{marker} <{node.name}>`"
    )
    description_cell = (
        format_description(node.description)
        + _render_enum(node.enum)
        + f"\n\n{ROW_INDENT}({node.name})"
    )
    return f'{ROW_INDENT}"{name_cell}",{node.type},"{description_cell}"\n'


def _render_enum(values: Sequence[Any] | None) -> str:
    if values is None:
        return ""
    lines = [f"\n\n{ROW_INDENT}{ENUM_HEADING}"]
    lines.extend(f"\n\n{ROW_INDENT}{format_enum_value(value)}" for value in values)
    return "".join(lines)


def _render_toctree(references: Sequence[str]) -> str:
    entries = "".join(f"{ROW_INDENT}{document_name(ref)}\n" for ref in references)
    return f"\n.. toctree::\n\n{entries}"
