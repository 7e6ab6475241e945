"""Chart file format settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartFormat:
    header_terminator: str = "CHART"
    body_terminator: str = "OSAAT"  # a body line starting with this ends the chart
    comment_prefix: str = "//"


DEFAULT_FORMAT = ChartFormat()
