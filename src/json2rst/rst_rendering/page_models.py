"""Rendering entities."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

ReferenceRegistrar = Callable[[str], bool]


@dataclass(frozen=True)
class RenderedDocument:
    """Page text plus the references first discovered while rendering it."""

    text: str
    references: tuple[str, ...]
