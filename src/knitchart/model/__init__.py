"""knitchart model layer -- public type re-exports."""

from knitchart.model.attributes import Attributes
from knitchart.model.chart import Chart
from knitchart.model.color import Color
from knitchart.model.diagnostic import Diagnostic, Severity
from knitchart.model.stitch import Stitch

__all__ = [
    # chart
    "Chart",
    "Stitch",
    # attributes
    "Attributes",
    "Color",
    # diagnostic
    "Severity",
    "Diagnostic",
]
