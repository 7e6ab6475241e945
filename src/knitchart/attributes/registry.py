"""Attribute registry: the table of known header attributes.

Each :class:`AttributeSpec` names a header attribute, the
:class:`~knitchart.model.attributes.Attributes` field it fills, its default
as raw text and the parser that turns raw text into the field value.
Defaults go through the same parser as user values, so a broken default is
caught when the registry is built rather than on some later parse.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any

from knitchart.attributes.values import (
    parse_char_name,
    parse_color,
    parse_count,
    parse_length,
)
from knitchart.errors import (
    AttributeValueError,
    InvalidCharNameError,
    RegistryError,
    UnknownAttributeError,
)
from knitchart.model.attributes import Attributes
from knitchart.parser.header import Header

__all__ = [
    "AttributeSpec",
    "AttributeRegistry",
    "BUILTIN_SPECS",
    "DEFAULT_REGISTRY",
    "resolve_attributes",
]

logger = logging.getLogger("knitchart")

ValueParser = Callable[[str], Any]


@dataclass(frozen=True)
class AttributeSpec:
    name: str
    field: str
    default: str
    parse: ValueParser


BUILTIN_SPECS: tuple[AttributeSpec, ...] = (
    AttributeSpec("rows", "rows", "0", parse_count),  # 0 = count the body lines
    AttributeSpec("columns", "columns", "0", parse_count),  # 0 = longest body line
    AttributeSpec("knit", "knit", ".", parse_char_name),
    AttributeSpec("purl", "purl", "X", parse_char_name),
    AttributeSpec("empty", "empty", "SPACE", parse_char_name),
    AttributeSpec("background", "background", "whitesmoke", parse_color),
    AttributeSpec("gridcolor", "grid_color", "darkgray", parse_color),
    AttributeSpec("cellsize", "cell_size", "20", parse_length),
    AttributeSpec("dotsize", "dot_size", "10", parse_length),
)


class AttributeRegistry:
    """A read-only lookup of attribute specs by header name."""

    def __init__(self, specs: Iterable[AttributeSpec]) -> None:
        by_name: dict[str, AttributeSpec] = {}
        defaults: dict[str, Any] = {}
        for spec in specs:
            if spec.name in by_name:
                raise RegistryError(f"Attribute {spec.name!r} is registered twice")
            if spec.field in defaults:
                raise RegistryError(f"Field {spec.field!r} is filled by two attributes")
            try:
                defaults[spec.field] = spec.parse(spec.default)
            except (InvalidCharNameError, ValueError) as exc:
                raise RegistryError(
                    f"Default {spec.default!r} for attribute {spec.name!r} does not parse: {exc}",
                    cause=exc,
                ) from exc
            by_name[spec.name] = spec

        expected = {f.name for f in fields(Attributes)}
        if set(defaults) != expected:
            missing = sorted(expected - set(defaults))
            extra = sorted(set(defaults) - expected)
            raise RegistryError(
                f"Registry does not match Attributes fields (missing={missing}, extra={extra})"
            )

        self._specs = MappingProxyType(by_name)
        self._defaults = MappingProxyType(defaults)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __getitem__(self, name: str) -> AttributeSpec:
        return self._specs[name]

    def __iter__(self) -> Iterator[AttributeSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def names(self) -> list[str]:
        return list(self._specs)

    def defaults(self) -> Attributes:
        """Build Attributes with every field at its registered default."""
        return Attributes(**self._defaults)

    def parse_value(
        self, name: str, raw: str, line_number: int | None = None
    ) -> tuple[str, Any]:
        """Parse *raw* for attribute *name*; return ``(field, value)``."""
        spec = self._specs.get(name)
        if spec is None:
            raise UnknownAttributeError(name, line=line_number)
        try:
            return spec.field, spec.parse(raw)
        except InvalidCharNameError as exc:
            raise InvalidCharNameError(raw, attribute=name, line=line_number) from exc
        except ValueError as exc:
            raise AttributeValueError(name, raw, exc, line=line_number) from exc

    def resolve(self, header: Header) -> Attributes:
        """Build Attributes from defaults overridden by the header's entries."""
        values = dict(self._defaults)
        for entry in header:
            field_name, value = self.parse_value(entry.name, entry.value, entry.line_number)
            values[field_name] = value
        attributes = Attributes(**values)
        logger.debug("Resolved attributes: %s", attributes)
        return attributes


DEFAULT_REGISTRY = AttributeRegistry(BUILTIN_SPECS)


def resolve_attributes(header: Header) -> Attributes:
    """Resolve *header* against the built-in attribute registry."""
    return DEFAULT_REGISTRY.resolve(header)
