"""Shared reStructuredText rendering constants."""

from __future__ import annotations

SCHEMA_SUFFIX = ".schema.json"
RST_SUFFIX = ".rst"

ROW_INDENT = "    "
ARRAY_MARKER = "(s)"
REFERENCE_TYPE = "object"
ENUM_HEADING = "Enumerated values:"
HOVER_HINT = "(hover on options to see their descriptions)"
