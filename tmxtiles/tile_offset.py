"""Pixel offset applied when drawing tiles of a tileset."""

from __future__ import annotations

from dataclasses import dataclass
from xml.etree.ElementTree import Element


def _int_attribute(element: Element, name: str, default: int) -> int:
    value = element.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class TileOffset:
    """Horizontal and vertical drawing offset in pixels (positive y is down)."""

    x: int = 0
    y: int = 0

    @classmethod
    def from_element(cls, element: Element) -> "TileOffset":
        """Read a ``<tileoffset>`` element; missing or malformed values are 0."""
        return cls(
            x=_int_attribute(element, "x", 0),
            y=_int_attribute(element, "y", 0),
        )