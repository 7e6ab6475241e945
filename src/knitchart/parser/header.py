"""Header builder: collects ``name=value`` lines up to the terminator."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from knitchart.config import DEFAULT_FORMAT, ChartFormat
from knitchart.errors import BadHeaderLineError
from knitchart.parser.lines import LineKind, LineReader, classify_line

__all__ = ["HeaderEntry", "Header", "read_header", "parse_header"]

logger = logging.getLogger("knitchart")


@dataclass(frozen=True)
class HeaderEntry:
    """A raw attribute assignment and the line it came from."""

    name: str
    value: str
    line_number: int


@dataclass(frozen=True)
class Header:
    """Raw attribute assignments, keyed by name.

    ``terminated`` is False when the input ended before the terminator line;
    the whole input was then read as header.
    """

    entries: Mapping[str, HeaderEntry] = field(default_factory=dict, hash=False)
    terminated: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __iter__(self) -> Iterator[HeaderEntry]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def names(self) -> list[str]:
        return list(self.entries)

    def get(self, name: str) -> HeaderEntry | None:
        return self.entries.get(name)

    def value(self, name: str) -> str | None:
        """Return the raw value assigned to *name*, or None."""
        entry = self.entries.get(name)
        return entry.value if entry is not None else None


def read_header(
    lines: Iterable[str] | LineReader, fmt: ChartFormat = DEFAULT_FORMAT
) -> Header:
    """Read header lines until the terminator or end of input.

    When *lines* is a :class:`LineReader` it is left positioned on the first
    line after the terminator, so the caller can go on to read the body.
    """
    reader = lines if isinstance(lines, LineReader) else LineReader(lines)
    entries: dict[str, HeaderEntry] = {}

    for text in reader:
        classified = classify_line(text, reader.line_number, fmt)
        if classified.kind is LineKind.TERMINATOR:
            return Header(entries, terminated=True)
        if classified.kind is LineKind.SINGLE:
            raise BadHeaderLineError(classified.line_number, classified.name)
        if classified.kind is LineKind.PAIR:
            # Last assignment wins.
            entries[classified.name] = HeaderEntry(
                classified.name, classified.value, classified.line_number
            )

    logger.debug(
        "No %r line after %d line(s); reading the whole input as header",
        fmt.header_terminator,
        reader.line_number,
    )
    return Header(entries, terminated=False)


def parse_header(source: str, fmt: ChartFormat = DEFAULT_FORMAT) -> Header:
    """Read a header from a string."""
    return read_header(io.StringIO(source), fmt)
