"""Line classifier: turns one physical header line into a ClassifiedLine.

Header grammar, one line at a time:
    Comment    = '//' .*                 (must start in column 1)
    Terminator = 'CHART'                 (surrounding whitespace ignored)
    Blank      = whitespace*
    Single     = token                   (no '=': always an error upstream)
    Pair       = Ident '=' Value         (Value is kept verbatim)
    Ident      = [A-Za-z][A-Za-z0-9]*
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from knitchart.config import DEFAULT_FORMAT, ChartFormat
from knitchart.errors import (
    IdentifierCharError,
    IdentifierStartError,
    MissingIdentifierError,
)

__all__ = [
    "LineKind",
    "ClassifiedLine",
    "LineReader",
    "check_ident",
    "classify_line",
    "strip_eol",
]


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    SINGLE = "single"
    PAIR = "pair"
    TERMINATOR = "terminator"


@dataclass(frozen=True)
class ClassifiedLine:
    """One classified header line.

    ``name`` is set for SINGLE and PAIR lines, ``value`` only for PAIR lines.
    """

    kind: LineKind
    line_number: int
    name: str = ""
    value: str = ""


class LineReader:
    """Iterator over text lines that counts them, starting at 1.

    Accepts anything that yields lines: an open file, a list, a generator.
    The header reader and the body reader share one LineReader so that the
    body picks up right after the header terminator.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.line_number = 0  # number of the last line handed out

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = next(self._lines)
        self.line_number += 1
        return line


def strip_eol(text: str) -> str:
    """Remove one trailing ``\\n`` or ``\\r\\n``, nothing else."""
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def check_ident(name: str, line_number: int) -> str:
    """Validate an attribute identifier and return it unchanged."""
    if not name:
        raise MissingIdentifierError(line_number)
    if not (name[0].isascii() and name[0].isalpha()):
        raise IdentifierStartError(line_number, name)
    for ch in name[1:]:
        if not (ch.isascii() and ch.isalnum()):
            raise IdentifierCharError(line_number, name)
    return name


def classify_line(
    text: str, line_number: int, fmt: ChartFormat = DEFAULT_FORMAT
) -> ClassifiedLine:
    """Classify a single header line.

    The line may or may not carry its end-of-line sequence. The value of a
    PAIR is everything after the first ``=``; trailing whitespace is kept so
    that ``empty= `` can name a space marker.
    """
    line = strip_eol(text)

    if line.startswith(fmt.comment_prefix):
        return ClassifiedLine(LineKind.COMMENT, line_number)

    if line.strip() == fmt.header_terminator:
        return ClassifiedLine(LineKind.TERMINATOR, line_number)

    content = line.lstrip()
    if not content.strip():
        return ClassifiedLine(LineKind.BLANK, line_number)

    name, sep, value = content.partition("=")
    if not sep:
        return ClassifiedLine(LineKind.SINGLE, line_number, name=name.strip())

    return ClassifiedLine(
        LineKind.PAIR, line_number, name=check_ident(name, line_number), value=value
    )
