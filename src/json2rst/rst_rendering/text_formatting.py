"""Description and enum text formatting rules."""

from __future__ import annotations

import json
import re
from typing import Any

from .constants import HOVER_HINT

_ANCHOR_START = "<a href"
_ANCHOR_URL_END = '" target'
_ANCHOR_TEXT_START = 'target="_blank">'
_ANCHOR_END = "</a>"
_SUBSTITUTION_LIKE = re.compile(r"(?<!\S)\|([^\s|]+)\|(?!\S)")


class RenderError(Exception):
    """Raised when schema text cannot be turned into markup."""


def format_description(description: str) -> str:
    """Return a description made safe for a quoted csv-table cell."""
    text = rewrite_anchor_tags(description)
    text = text.replace('"', '""')
    text = text.replace("<br>", "\n\n\t")
    text = text.replace(HOVER_HINT, "")
    return quote_substitution_references(text)


def rewrite_anchor_tags(text: str) -> str:
    """Turn HTML anchors into inline hyperlinks, one full rescan per anchor.

    Markers are located from the start of the whole string each time, so
    anchors are always resolved first-to-last against the current text.
    """
    while _ANCHOR_START in text:
        try:
            start = text.index(_ANCHOR_START)
            url_start = start + len(_ANCHOR_START) + 2
            url_end = text.index(_ANCHOR_URL_END)
            label_start = text.index(_ANCHOR_TEXT_START) + len(_ANCHOR_TEXT_START)
            end = text.index(_ANCHOR_END)
        except ValueError as exc:
            raise RenderError(f"Malformed anchor tag in description: {text!r}") from exc
        if not url_start <= url_end < label_start <= end:
            raise RenderError(f"Malformed anchor tag in description: {text!r}")
        url = text[url_start:url_end]
        label = text[label_start:end]
        text = f"{text[:start]}`{label} <{url}>`_{text[end + len(_ANCHOR_END):]}"
    return text


def quote_substitution_references(text: str) -> str:
    """Wrap whitespace-bounded `|token|` runs in backticks so docutils skips them."""
    if "|" not in text:
        return text
    return _SUBSTITUTION_LIKE.sub(lambda match: f"`|{match.group(1)}|`", text)


def format_enum_value(value: Any) -> str:
    """Render one enumerated value; ``A|B`` becomes ``A (= B)``."""
    option = json.dumps(value, ensure_ascii=False, separators=(",", ":")).replace('"', "")
    if "|" in option:
        return option.replace("|", " (= ") + ")"
    return option
