from knitchart.attributes.registry import (
    BUILTIN_SPECS,
    DEFAULT_REGISTRY,
    AttributeRegistry,
    AttributeSpec,
    resolve_attributes,
)
from knitchart.attributes.values import (
    parse_char_name,
    parse_color,
    parse_count,
    parse_length,
)

__all__ = [
    "AttributeRegistry",
    "AttributeSpec",
    "BUILTIN_SPECS",
    "DEFAULT_REGISTRY",
    "parse_char_name",
    "parse_color",
    "parse_count",
    "parse_length",
    "resolve_attributes",
]
