"""Schema tree conversion use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from json2rst.configuration.runtime_settings import RenderSettings
from json2rst.rst_rendering import (
    RST_SUFFIX,
    SCHEMA_SUFFIX,
    RenderError,
    render_schema_document,
)
from json2rst.schema_management import SchemaError, load_schema_document

from .reference_worklist import ReferenceWorklist
from .run_contracts import ConversionOutcome, ConversionRequest, TransformedFile

logger = logging.getLogger(__name__)

TransformCallback = Callable[[Path, Path], None]


class ConversionError(Exception):
    """Raised when a schema tree cannot be converted."""


def convert_schema_tree(
    request: ConversionRequest,
    *,
    on_transformed: TransformCallback | None = None,
) -> ConversionOutcome:
    """Convert the root schema and every schema reachable from it.

    The first failing file aborts the run.
    """
    worklist = ReferenceWorklist(Path(request.schema_path))
    output_dir = Path(request.output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConversionError(f"Cannot create output directory {output_dir}: {exc}") from exc

    transformed: list[TransformedFile] = []
    while worklist:
        source_path = worklist.pop()
        result = _transform(source_path, output_dir, request.settings, worklist)
        transformed.append(result)
        if on_transformed is not None:
            on_transformed(result.source_path, result.output_path)
    return ConversionOutcome(transformed=tuple(transformed))


def output_file_name(schema_path: Path) -> str:
    """Return the page file name for a schema file."""
    return schema_path.name.replace(SCHEMA_SUFFIX, RST_SUFFIX)


def _transform(
    source_path: Path,
    output_dir: Path,
    settings: RenderSettings,
    worklist: ReferenceWorklist,
) -> TransformedFile:
    output_name = output_file_name(source_path)
    output_path = output_dir / output_name
    logger.info("%s => %s", source_path, output_path)
    try:
        document = load_schema_document(source_path)
        rendered = render_schema_document(document, output_name, settings, worklist.register)
        with output_path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(rendered.text)
    except (SchemaError, RenderError, OSError) as exc:
        raise ConversionError(f"Failed to convert {source_path}: {exc}") from exc
    return TransformedFile(
        source_path=source_path,
        output_path=output_path,
        references=rendered.references,
    )
