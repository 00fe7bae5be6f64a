"""Tilesets of a TMX map, either inline or loaded from an external TSX file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from .tile import Tile
from .tile_offset import TileOffset


def _int_attribute(element: Element, name: str, default: int) -> int:
    value = element.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_properties(element: Element | None) -> dict[str, str]:
    if element is None:
        return {}
    return {
        prop.get("name", ""): prop.get("value", prop.text or "")
        for prop in element.findall("property")
    }


def _load_external(path: str) -> Element:
    try:
        root = ElementTree.parse(path).getroot()
    except (OSError, ElementTree.ParseError) as exc:
        raise ValueError(f"failed to load tileset file '{path}': {exc}") from exc
    if root.tag != "tileset":
        raise ValueError(f"failed to load tileset file '{path}': no tileset element")
    return root


@dataclass
class Tileset:
    """A collection of tiles sharing an image, starting at ``first_gid``."""

    first_gid: int = 0
    name: str = ""
    tile_width: int = 0
    tile_height: int = 0
    margin: int = 0
    spacing: int = 0
    tile_offset: TileOffset | None = None
    image: dict[str, str] | None = None
    terrain_types: tuple[dict[str, str], ...] = ()
    tiles: tuple[Tile, ...] = ()
    properties: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_element(cls, element: Element, file_path: str | os.PathLike = "") -> "Tileset":
        """Read a ``<tileset>`` element.

        ``firstgid`` always comes from *element*.  When the element names a
        ``source``, the rest is read from that file, whose path is *file_path*
        followed directly by the source name.  Raises ValueError when that
        file cannot be loaded.
        """
        first_gid = _int_attribute(element, "firstgid", 0)

        source = element.get("source")
        if source:
            element = _load_external(os.fspath(file_path) + source)

        offset_elem = element.find("tileoffset")
        tile_offset = TileOffset.from_element(offset_elem) if offset_elem is not None else None

        terrain_elem = element.find("terraintypes")
        terrain_types: tuple[dict[str, str], ...] = ()
        if terrain_elem is not None:
            terrain_types = tuple(dict(t.attrib) for t in terrain_elem.findall("terrain"))

        image_elem = element.find("image")
        image = dict(image_elem.attrib) if image_elem is not None else None

        tiles = tuple(
            Tile.from_element(tile_elem, index)
            for index, tile_elem in enumerate(element.findall("tile"))
        )

        return cls(
            first_gid=first_gid,
            name=element.get("name", ""),
            tile_width=_int_attribute(element, "tilewidth", 0),
            tile_height=_int_attribute(element, "tileheight", 0),
            margin=_int_attribute(element, "margin", 0),
            spacing=_int_attribute(element, "spacing", 0),
            tile_offset=tile_offset,
            image=image,
            terrain_types=terrain_types,
            tiles=tiles,
            properties=_parse_properties(element.find("properties")),
        )

    def get_tile(self, tile_id: int) -> Tile | None:
        """Return the first tile with id *tile_id*, or None if there is none."""
        return next((tile for tile in self.tiles if tile.id == tile_id), None)