"""Stitch kinds that make up a chart grid."""

from __future__ import annotations

from enum import Enum


class Stitch(Enum):
    KNIT = "knit"
    PURL = "purl"
    EMPTY = "empty"

    @property
    def symbol(self) -> str:
        """A fixed glyph for debugging output, independent of the chart's markers."""
        return _SYMBOLS[self]


_SYMBOLS = {Stitch.KNIT: ".", Stitch.PURL: "*", Stitch.EMPTY: "#"}
