"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TABULAR_COLUMNS = "|p{4cm}|l|p{8cm}|"
DEFAULT_TABLE_HEADER = "Name, Type, Description (LDAP Attribute)"
DEFAULT_TABLE_WIDTHS = "23, 7, 70"
DEFAULT_DICOM_DEFINED_FILES: frozenset[str] = frozenset(
    {
        "device.rst",
        "networkAE.rst",
        "networkConnection.rst",
        "transferCapability.rst",
    }
)


@dataclass(frozen=True)
class RenderSettings:
    """Layout settings applied to every rendered page."""

    tabular_columns: str = DEFAULT_TABULAR_COLUMNS
    table_header: str = DEFAULT_TABLE_HEADER
    table_widths: str = DEFAULT_TABLE_WIDTHS
    dicom_defined_files: frozenset[str] = DEFAULT_DICOM_DEFINED_FILES
