"""Parsers for raw attribute values.

Each parser takes the raw header text and returns a typed value or raises.
Marker parsing raises :class:`InvalidCharNameError`; the others raise
``ValueError``, which the registry wraps in :class:`AttributeValueError`.
"""

from __future__ import annotations

import re

from PIL import ImageColor

from knitchart.errors import InvalidCharNameError
from knitchart.model.color import Color

__all__ = ["parse_count", "parse_char_name", "parse_color", "parse_length"]

# Symbolic names for marker characters that are awkward to write literally.
CHAR_NAMES = {"SPACE": " "}

_COUNT_RE = re.compile(r"[0-9]+")
_LENGTH_RE = re.compile(r"(?P<number>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*(?:px)?", re.IGNORECASE)


def parse_count(raw: str) -> int:
    """Parse an unsigned base-10 integer such as a row count."""
    text = raw.strip()
    if not _COUNT_RE.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {raw!r}")
    return int(text)


def parse_char_name(raw: str) -> str:
    """Parse a marker: one printable character, or ``SPACE`` in any case."""
    if not raw:
        raise InvalidCharNameError(raw)
    if raw.isascii():
        named = CHAR_NAMES.get(raw.upper())
        if named is not None:
            return named
    if len(raw) > 1 or not raw.isprintable():
        raise InvalidCharNameError(raw)
    return raw


def parse_color(raw: str) -> Color:
    """Parse a CSS color: a name, ``#rgb[a]``, ``#rrggbb[aa]``, ``rgb()``, ``hsl()``..."""
    return Color(*ImageColor.getcolor(raw.strip(), "RGBA"))


def parse_length(raw: str) -> float:
    """Parse a non-negative pixel length such as ``20`` or ``12.5px``."""
    match = _LENGTH_RE.fullmatch(raw.strip())
    if match is None:
        raise ValueError(f"invalid length: {raw!r}")
    return float(match.group("number"))
