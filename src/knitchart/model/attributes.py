"""Typed chart attributes resolved from a header."""

from __future__ import annotations

from dataclasses import dataclass

from knitchart.model.color import Color
from knitchart.model.stitch import Stitch


@dataclass(frozen=True)
class Attributes:
    """The fully typed configuration of one chart.

    Attributes:
        rows: Declared row count; 0 means "use the number of body lines".
        columns: Declared stitches per row; 0 means "use the longest body line".
        knit: Marker character for a knit stitch.
        purl: Marker character for a purl stitch.
        empty: Marker character for a cell with no stitch.
        background: Background color for renderers.
        grid_color: Grid line color for renderers.
        cell_size: Edge length of one cell, in pixels.
        dot_size: Diameter of the purl dot, in pixels.
    """

    rows: int
    columns: int
    knit: str
    purl: str
    empty: str
    background: Color
    grid_color: Color
    cell_size: float
    dot_size: float

    @property
    def markers(self) -> tuple[tuple[Stitch, str], ...]:
        """Markers in matching precedence order: knit, then purl, then empty."""
        return (
            (Stitch.KNIT, self.knit),
            (Stitch.PURL, self.purl),
            (Stitch.EMPTY, self.empty),
        )
