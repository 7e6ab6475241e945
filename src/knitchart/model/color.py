"""RGBA color value used by the decoration attributes."""

from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """An 8-bit-per-channel RGBA color."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def as_floats(self) -> tuple[float, float, float, float]:
        """Return the channels scaled to 0.0-1.0, as most drawing APIs expect."""
        return (self.red / 255, self.green / 255, self.blue / 255, self.alpha / 255)

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}{:02x}".format(*self)
