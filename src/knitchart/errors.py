"""Error hierarchy for chart parsing.

Every error is fatal for the parse that raised it. Soft problems that the
reader repairs on its own are reported as diagnostics instead
(see :mod:`knitchart.model.diagnostic`).
"""

from __future__ import annotations


class ChartError(Exception):
    """Base error for everything raised while reading a chart."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.line = line
        self.column = column
        self.cause = cause
        super().__init__(message)


# ---------------------------------------------------------------------------
# Header errors
# ---------------------------------------------------------------------------


class HeaderError(ChartError):
    """A header line could not be understood."""


class BadHeaderLineError(HeaderError):
    """A header line holds a bare token instead of ``name=value``."""

    def __init__(self, line: int, token: str = "") -> None:
        self.token = token
        super().__init__(
            f"Header line {line} should have the form 'name=value'", line=line
        )


class IdentifierError(HeaderError):
    """An attribute name is not a valid identifier."""

    def __init__(self, message: str, line: int, name: str) -> None:
        self.name = name
        super().__init__(message, line=line)


class MissingIdentifierError(IdentifierError):
    def __init__(self, line: int) -> None:
        super().__init__(f"Identifier missing on line {line}.", line, "")


class IdentifierStartError(IdentifierError):
    def __init__(self, line: int, name: str) -> None:
        super().__init__(
            f"Identifier {name!r} on line {line} must start with an alphabetic character.",
            line,
            name,
        )


class IdentifierCharError(IdentifierError):
    def __init__(self, line: int, name: str) -> None:
        super().__init__(
            f"Identifier {name!r} on line {line} contains a non-alphanumeric character.",
            line,
            name,
        )


# ---------------------------------------------------------------------------
# Attribute errors
# ---------------------------------------------------------------------------


class UnknownAttributeError(ChartError):
    """The header names an attribute the registry does not know."""

    def __init__(self, name: str, line: int | None = None) -> None:
        self.name = name
        super().__init__(f"The attribute {name!r} is unknown.", line=line)


class InvalidCharNameError(ChartError):
    """A marker value is neither a single character nor a symbolic name."""

    def __init__(
        self, value: str, attribute: str | None = None, line: int | None = None
    ) -> None:
        self.value = value
        self.attribute = attribute
        where = f" for attribute {attribute!r}" if attribute else ""
        if line is not None:
            where += f" on line {line}"
        super().__init__(
            f"Invalid character name {value!r}{where}: expected one character or SPACE.",
            line=line,
        )


class AttributeValueError(ChartError):
    """An attribute's parser rejected its value.

    The underlying exception (bad integer, unknown color, ...) is kept as
    :attr:`cause`.
    """

    def __init__(
        self,
        attribute: str,
        value: str,
        cause: Exception,
        line: int | None = None,
    ) -> None:
        self.attribute = attribute
        self.value = value
        where = f" on line {line}" if line is not None else ""
        super().__init__(
            f"Invalid value {value!r} for attribute {attribute!r}{where}: {cause}",
            line=line,
            cause=cause,
        )


class RegistryError(ChartError):
    """The attribute registry itself is inconsistent."""


# ---------------------------------------------------------------------------
# Body errors
# ---------------------------------------------------------------------------


class BadStitchCharError(ChartError):
    """A chart character matches none of the stitch markers."""

    def __init__(
        self, char: str, line: int | None = None, column: int | None = None, text: str = ""
    ) -> None:
        self.char = char
        self.text = text
        location = ""
        if line is not None:
            location = f" on line {line}"
            if column is not None:
                location += f", column {column}"
        super().__init__(f"Bad stitch character {char!r}{location}", line=line, column=column)
