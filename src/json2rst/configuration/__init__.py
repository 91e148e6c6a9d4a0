"""Configuration domain exports."""

from .loader import ConfigurationError, load_render_settings
from .runtime_settings import (
    DEFAULT_DICOM_DEFINED_FILES,
    DEFAULT_TABLE_HEADER,
    DEFAULT_TABLE_WIDTHS,
    DEFAULT_TABULAR_COLUMNS,
    RenderSettings,
)

__all__ = [
    "RenderSettings",
    "DEFAULT_TABULAR_COLUMNS",
    "DEFAULT_TABLE_HEADER",
    "DEFAULT_TABLE_WIDTHS",
    "DEFAULT_DICOM_DEFINED_FILES",
    "ConfigurationError",
    "load_render_settings",
]
