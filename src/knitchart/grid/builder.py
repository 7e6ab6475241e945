"""Grid builder: maps body characters to stitches."""

from __future__ import annotations

from collections.abc import Iterable

from knitchart.errors import BadStitchCharError
from knitchart.model.attributes import Attributes
from knitchart.model.diagnostic import Diagnostic, Severity
from knitchart.model.stitch import Stitch

__all__ = ["classify_stitch", "build_row", "build_stitches", "check_markers"]

RawGrid = tuple[tuple[Stitch, ...], ...]


def classify_stitch(char: str, attributes: Attributes) -> Stitch | None:
    """Return the stitch *char* stands for, or None if it is no marker.

    Markers are tried knit, purl, empty; the first match wins when two
    markers are the same character.
    """
    for stitch, marker in attributes.markers:
        if char == marker:
            return stitch
    return None


def build_row(
    attributes: Attributes, text: str, line_number: int | None = None
) -> tuple[Stitch, ...]:
    """Convert one body line into stitches."""
    row: list[Stitch] = []
    for column, char in enumerate(text, start=1):
        stitch = classify_stitch(char, attributes)
        if stitch is None:
            raise BadStitchCharError(char, line=line_number, column=column, text=text)
        row.append(stitch)
    return tuple(row)


def build_stitches(
    attributes: Attributes, lines: Iterable[str], first_line: int = 1
) -> RawGrid:
    """Convert body lines into a (possibly jagged) grid of stitches.

    *lines* must already have their end-of-line removed. *first_line* is the
    source line number of the first body line and is only used for error
    messages.
    """
    return tuple(
        build_row(attributes, text, line_number)
        for line_number, text in enumerate(lines, start=first_line)
    )


def check_markers(attributes: Attributes) -> list[Diagnostic]:
    """Warn about markers that share a character."""
    diagnostics: list[Diagnostic] = []
    markers = attributes.markers
    for i, (stitch, marker) in enumerate(markers):
        for shadowed, other in markers[i + 1:]:
            if marker == other:
                diagnostics.append(
                    Diagnostic(
                        rule="duplicate_markers",
                        severity=Severity.WARNING,
                        message=(
                            f"The {stitch.value} and {shadowed.value} markers are both "
                            f"{marker!r}; the character is read as {stitch.value}."
                        ),
                        fix=f"Give '{shadowed.value}' its own character in the header.",
                    )
                )
    return diagnostics
