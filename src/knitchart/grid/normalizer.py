"""Grid normalizer: reconcile declared dimensions with the parsed grid.

Dimension mismatches are never errors. Short rows are padded with knit
stitches, long rows are cut on the right, missing rows are added, and each
repair is reported as a WARNING diagnostic and logged.

Rows beyond the declared count are reported but kept; only columns are
truncated.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from knitchart.model.diagnostic import Diagnostic, Severity
from knitchart.model.stitch import Stitch

__all__ = ["NormalizedGrid", "normalize_grid"]

logger = logging.getLogger("knitchart")

PAD_STITCH = Stitch.KNIT


@dataclass(frozen=True)
class NormalizedGrid:
    stitches: tuple[tuple[Stitch, ...], ...]
    rows: int
    columns: int
    diagnostics: tuple[Diagnostic, ...] = ()


def _warn(diagnostics: list[Diagnostic], diagnostic: Diagnostic) -> None:
    logger.warning("%s", diagnostic)
    diagnostics.append(diagnostic)


def normalize_grid(
    raw: Sequence[Sequence[Stitch]], rows: int = 0, columns: int = 0
) -> NormalizedGrid:
    """Reshape *raw* to *rows* x *columns*.

    A zero count means "infer": rows from the number of parsed lines,
    columns from the longest parsed line.
    """
    observed_rows = len(raw)
    effective_rows = rows or observed_rows
    effective_columns = columns or max((len(r) for r in raw), default=0)

    diagnostics: list[Diagnostic] = []
    grid = [list(r) for r in raw]

    if observed_rows < effective_rows:
        _warn(
            diagnostics,
            Diagnostic(
                rule="too_few_rows",
                severity=Severity.WARNING,
                message=f"Too few rows, padding: found {observed_rows}, expected {effective_rows}.",
                fix=f"Added {effective_rows - observed_rows} row(s) of knit stitches.",
            ),
        )
        grid.extend([] for _ in range(effective_rows - observed_rows))
    elif observed_rows > effective_rows:
        _warn(
            diagnostics,
            Diagnostic(
                rule="too_many_rows",
                severity=Severity.WARNING,
                message=f"Too many rows: found {observed_rows}, expected {effective_rows}.",
            ),
        )

    for index, row in enumerate(grid):
        if len(row) > effective_columns:
            _warn(
                diagnostics,
                Diagnostic(
                    rule="row_truncated",
                    severity=Severity.WARNING,
                    message=(
                        f"Too many stitches in a row, truncating: found {len(row)}, "
                        f"expected {effective_columns}."
                    ),
                    row=index + 1,
                ),
            )
            del row[effective_columns:]
        elif len(row) < effective_columns:
            _warn(
                diagnostics,
                Diagnostic(
                    rule="row_padded",
                    severity=Severity.WARNING,
                    message=(
                        f"Missing stitches, adding knits: found {len(row)}, "
                        f"expected {effective_columns}."
                    ),
                    row=index + 1,
                ),
            )
            row.extend([PAD_STITCH] * (effective_columns - len(row)))

    return NormalizedGrid(
        stitches=tuple(tuple(r) for r in grid),
        rows=effective_rows,
        columns=effective_columns,
        diagnostics=tuple(diagnostics),
    )
