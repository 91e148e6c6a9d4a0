"""Conversion run domain exports."""

from .reference_worklist import ReferenceWorklist
from .run_contracts import ConversionOutcome, ConversionRequest, TransformedFile
from .schema_conversion_use_case import ConversionError, convert_schema_tree, output_file_name

__all__ = [
    "ConversionRequest",
    "ConversionOutcome",
    "TransformedFile",
    "ConversionError",
    "ReferenceWorklist",
    "convert_schema_tree",
    "output_file_name",
]
