"""Read a chart file: header, attributes, stitch grid, normalization.

File layout::

    // comment
    rows=32
    columns=64
    knit=SPACE
    CHART
    <one line of marker characters per row>
    OSAAT                        (optional; anything after it is ignored)
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from knitchart.attributes.registry import DEFAULT_REGISTRY, AttributeRegistry
from knitchart.config import DEFAULT_FORMAT, ChartFormat
from knitchart.errors import ChartError
from knitchart.grid.builder import build_stitches, check_markers
from knitchart.grid.normalizer import normalize_grid
from knitchart.model.attributes import Attributes
from knitchart.model.chart import Chart
from knitchart.model.diagnostic import Diagnostic, Severity
from knitchart.parser.header import read_header
from knitchart.parser.lines import LineReader, strip_eol

__all__ = ["read_body", "build_chart", "read_chart", "parse_chart", "open_chart"]

logger = logging.getLogger("knitchart")


def read_body(reader: LineReader, fmt: ChartFormat = DEFAULT_FORMAT) -> list[str]:
    """Collect the remaining chart lines, without their end-of-line."""
    lines: list[str] = []
    for text in reader:
        if text.startswith(fmt.body_terminator):
            break
        lines.append(strip_eol(text))
    return lines


def build_chart(
    attributes: Attributes,
    lines: Sequence[str],
    first_line: int = 1,
    diagnostics: Iterable[Diagnostic] = (),
) -> Chart:
    """Turn resolved attributes and body lines into a normalized Chart.

    Raises :class:`~knitchart.errors.BadStitchCharError` on the first
    character that is not a marker; no chart is produced in that case.
    """
    collected = list(diagnostics)
    collected.extend(check_markers(attributes))

    raw = build_stitches(attributes, lines, first_line=first_line)
    grid = normalize_grid(raw, rows=attributes.rows, columns=attributes.columns)
    collected.extend(grid.diagnostics)

    return Chart(
        attributes=attributes,
        stitches=grid.stitches,
        rows=grid.rows,
        columns=grid.columns,
        diagnostics=tuple(collected),
    )


def read_chart(
    lines: Iterable[str],
    fmt: ChartFormat = DEFAULT_FORMAT,
    registry: AttributeRegistry = DEFAULT_REGISTRY,
) -> Chart:
    """Read a chart from an iterable of lines, such as an open text file."""
    reader = lines if isinstance(lines, LineReader) else LineReader(lines)

    try:
        header = read_header(reader, fmt)
    except UnicodeDecodeError as exc:
        raise _decode_error(reader.line_number + 1, exc) from exc
    attributes = registry.resolve(header)

    diagnostics: list[Diagnostic] = []
    if not header.terminated:
        diagnostics.append(
            Diagnostic(
                rule="missing_terminator",
                severity=Severity.INFO,
                message=f"No {fmt.header_terminator!r} line; the chart has no body.",
                fix=f"Add a line reading {fmt.header_terminator} before the chart rows.",
            )
        )

    first_line = reader.line_number + 1
    try:
        body = read_body(reader, fmt)
    except UnicodeDecodeError as exc:
        raise _decode_error(reader.line_number + 1, exc) from exc
    chart = build_chart(attributes, body, first_line=first_line, diagnostics=diagnostics)
    logger.debug(
        "Read chart: %d rows x %d columns, %d diagnostic(s)",
        chart.rows,
        chart.columns,
        len(chart.diagnostics),
    )
    return chart


def parse_chart(
    source: str,
    fmt: ChartFormat = DEFAULT_FORMAT,
    registry: AttributeRegistry = DEFAULT_REGISTRY,
) -> Chart:
    """Read a chart from a string."""
    return read_chart(io.StringIO(source), fmt, registry)


def open_chart(
    path: str | Path,
    fmt: ChartFormat = DEFAULT_FORMAT,
    registry: AttributeRegistry = DEFAULT_REGISTRY,
) -> Chart:
    """Read a chart file (UTF-8)."""
    data = Path(path).read_bytes()
    try:
        source = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise _decode_error(data.count(b"\n", 0, exc.start) + 1, exc) from exc
    return parse_chart(source, fmt, registry)


def _decode_error(line: int, exc: UnicodeDecodeError) -> ChartError:
    return ChartError(f"Line {line} is not valid UTF-8", line=line, cause=exc)
