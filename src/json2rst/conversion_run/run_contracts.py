"""Conversion run entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from json2rst.configuration.runtime_settings import RenderSettings


@dataclass(frozen=True)
class ConversionRequest:
    """Input contract for converting one schema tree."""

    schema_path: Path
    output_dir: Path
    settings: RenderSettings = field(default_factory=RenderSettings)


@dataclass(frozen=True)
class TransformedFile:
    """One schema file and the page written for it."""

    source_path: Path
    output_path: Path
    references: tuple[str, ...]


@dataclass(frozen=True)
class ConversionOutcome:
    """Output contract for one completed run."""

    transformed: tuple[TransformedFile, ...]

    @property
    def output_paths(self) -> tuple[Path, ...]:
        return tuple(item.output_path for item in self.transformed)
