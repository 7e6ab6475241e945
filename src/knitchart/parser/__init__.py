from knitchart.parser.header import Header, HeaderEntry, parse_header, read_header
from knitchart.parser.lines import (
    ClassifiedLine,
    LineKind,
    LineReader,
    check_ident,
    classify_line,
)

__all__ = [
    "ClassifiedLine",
    "Header",
    "HeaderEntry",
    "LineKind",
    "LineReader",
    "check_ident",
    "classify_line",
    "parse_header",
    "read_header",
]
