"""The Chart: a validated, rectangular grid of stitches plus its attributes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from knitchart.errors import ChartError
from knitchart.model.attributes import Attributes
from knitchart.model.color import Color
from knitchart.model.diagnostic import Diagnostic
from knitchart.model.stitch import Stitch


@dataclass(frozen=True)
class Chart:
    """A knitting chart, ready for rendering.

    Every row in ``stitches`` holds exactly ``columns`` entries. ``stitches``
    holds at least ``rows`` rows; when the body had more lines than the
    ``rows`` attribute declared, the surplus rows are kept after the declared
    ones and readers of the chart should stop at ``rows``.
    """

    attributes: Attributes
    stitches: tuple[tuple[Stitch, ...], ...]
    rows: int
    columns: int
    diagnostics: tuple[Diagnostic, ...] = ()

    def __post_init__(self) -> None:
        if len(self.stitches) < self.rows:
            raise ChartError(
                f"Chart declares {self.rows} rows but holds {len(self.stitches)}"
            )
        for index, row in enumerate(self.stitches):
            if len(row) != self.columns:
                raise ChartError(
                    f"Chart row {index + 1} has {len(row)} stitches, expected {self.columns}"
                )

    def stitch(self, row: int, col: int) -> Stitch:
        """Return the stitch at 0-based (row, col)."""
        if not 0 <= row < self.rows or not 0 <= col < self.columns:
            raise IndexError(
                f"Cell ({row}, {col}) is outside a {self.rows}x{self.columns} chart"
            )
        return self.stitches[row][col]

    def cells(self) -> Iterator[tuple[int, int, Stitch]]:
        """Yield ``(row, col, stitch)`` for every cell, row by row."""
        for row in range(self.rows):
            for col, stitch in enumerate(self.stitches[row]):
                yield row, col, stitch

    @property
    def background_color(self) -> Color:
        return self.attributes.background

    @property
    def grid_color(self) -> Color:
        return self.attributes.grid_color

    @property
    def cell_size(self) -> float:
        return self.attributes.cell_size

    @property
    def dot_size(self) -> float:
        return self.attributes.dot_size

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]
