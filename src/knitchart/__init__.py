"""knitchart: read knitting chart files into a validated in-memory model."""

from knitchart.attributes import DEFAULT_REGISTRY, AttributeRegistry, AttributeSpec
from knitchart.config import DEFAULT_FORMAT, ChartFormat
from knitchart.errors import (
    AttributeValueError,
    BadHeaderLineError,
    BadStitchCharError,
    ChartError,
    HeaderError,
    IdentifierCharError,
    IdentifierError,
    IdentifierStartError,
    InvalidCharNameError,
    MissingIdentifierError,
    RegistryError,
    UnknownAttributeError,
)
from knitchart.model import Attributes, Chart, Color, Diagnostic, Severity, Stitch
from knitchart.parser import Header, HeaderEntry, parse_header, read_header
from knitchart.reader import build_chart, open_chart, parse_chart, read_chart

__version__ = "0.1.0"

__all__ = [
    # reading
    "open_chart",
    "parse_chart",
    "read_chart",
    "build_chart",
    "read_header",
    "parse_header",
    # model
    "Attributes",
    "Chart",
    "Color",
    "Diagnostic",
    "Header",
    "HeaderEntry",
    "Severity",
    "Stitch",
    # configuration
    "AttributeRegistry",
    "AttributeSpec",
    "ChartFormat",
    "DEFAULT_FORMAT",
    "DEFAULT_REGISTRY",
    # errors
    "AttributeValueError",
    "BadHeaderLineError",
    "BadStitchCharError",
    "ChartError",
    "HeaderError",
    "IdentifierCharError",
    "IdentifierError",
    "IdentifierStartError",
    "InvalidCharNameError",
    "MissingIdentifierError",
    "RegistryError",
    "UnknownAttributeError",
]
