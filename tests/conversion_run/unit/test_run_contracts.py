"""Tests for conversion run domain entities."""

from __future__ import annotations

from pathlib import Path

from json2rst.configuration.runtime_settings import RenderSettings
from json2rst.conversion_run.run_contracts import (
    ConversionOutcome,
    ConversionRequest,
    TransformedFile,
)


def test_conversion_request_defaults_to_standard_layout() -> None:
    request = ConversionRequest(schema_path=Path("device.schema.json"), output_dir=Path("docs"))

    assert request.settings == RenderSettings()


def test_conversion_outcome_lists_output_paths_in_order() -> None:
    outcome = ConversionOutcome(
        transformed=(
            TransformedFile(
                source_path=Path("/in/device.schema.json"),
                output_path=Path("/out/device.rst"),
                references=("networkAE.schema.json",),
            ),
            TransformedFile(
                source_path=Path("/in/networkAE.schema.json"),
                output_path=Path("/out/networkAE.rst"),
                references=(),
            ),
        )
    )

    assert outcome.output_paths == (Path("/out/device.rst"), Path("/out/networkAE.rst"))
