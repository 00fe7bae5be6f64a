"""Tile layers of a TMX map and the decoders for their tile data."""

from __future__ import annotations

import struct
import zlib
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from xml.etree.ElementTree import Element

from .util import decode_base64, decompress_gzip, trim

FLIPPED_HORIZONTALLY = 0x80000000
FLIPPED_VERTICALLY = 0x40000000
FLIPPED_DIAGONALLY = 0x20000000
_FLAG_MASK = FLIPPED_HORIZONTALLY | FLIPPED_VERTICALLY | FLIPPED_DIAGONALLY
_UINT32_MASK = 0xFFFFFFFF

#: Looks up the tileset of a gid: returns ``(tileset_index, first_gid)`` or None.
TilesetFinder = Callable[[int], "tuple[int, int] | None"]


class Encoding(Enum):
    """Encoding used for the tile data of a layer."""

    XML = "xml"
    BASE64 = "base64"
    CSV = "csv"


class Compression(Enum):
    """Compression used for base-64 encoded tile data."""

    NONE = "none"
    ZLIB = "zlib"
    GZIP = "gzip"


@dataclass(frozen=True)
class LayerTile:
    """A cell of a tile layer.

    ``gid`` is the global id with the flip flags cleared, ``id`` the id
    relative to the owning tileset and ``tileset_index`` is -1 when no
    tileset holds the gid.
    """

    gid: int = 0
    id: int = 0
    tileset_index: int = -1
    flipped_horizontally: bool = False
    flipped_vertically: bool = False
    flipped_diagonally: bool = False

    @classmethod
    def from_raw(
        cls, raw_gid: int, find_tileset: TilesetFinder | None = None
    ) -> "LayerTile":
        """Build a cell from a raw gid that may carry flip flags."""
        raw_gid &= _UINT32_MASK
        gid = raw_gid & ~_FLAG_MASK
        found = find_tileset(gid) if find_tileset is not None else None
        if found is None:
            tileset_index, first_gid = -1, 0
        else:
            tileset_index, first_gid = found
        return cls(
            gid=gid,
            id=gid - first_gid,
            tileset_index=tileset_index,
            flipped_horizontally=bool(raw_gid & FLIPPED_HORIZONTALLY),
            flipped_vertically=bool(raw_gid & FLIPPED_VERTICALLY),
            flipped_diagonally=bool(raw_gid & FLIPPED_DIAGONALLY),
        )


def _parse_unsigned(text: str | None) -> int:
    if text is None:
        return 0
    stripped = text.strip()
    digits = ""
    for char in stripped:
        if not char.isdigit():
            break
        digits += char
    if not digits:
        raise ValueError(f"invalid tile gid: {text!r}")
    return int(digits) & _UINT32_MASK


def decode_xml(element: Element) -> list[int]:
    """Return the raw gids of the ``<tile>`` children of a ``<data>`` element."""
    return [_parse_unsigned(tile.get("gid")) for tile in element.findall("tile")]


def decode_csv(text: str) -> list[int]:
    """Return the raw gids of comma separated tile data."""
    return [
        _parse_unsigned(token)
        for token in text.split(",")
        if token.strip()
    ]


def decode_base64_data(text: str, compression: Compression, count: int) -> list[int]:
    """Decode *count* little-endian 32-bit gids from base-64 tile data."""
    raw = decode_base64(trim(text))
    expected = count * 4
    if compression is Compression.ZLIB:
        try:
            data = zlib.decompress(raw)
        except zlib.error as exc:
            raise ValueError(f"corrupt zlib data: {exc}") from exc
    elif compression is Compression.GZIP:
        data = decompress_gzip(raw, max(expected, 1))
    else:
        data = raw
    if len(data) < expected:
        raise ValueError(
            f"tile data holds {len(data)} bytes, {expected} are needed"
        )
    return list(struct.unpack(f"<{count}I", data[:expected]))


def _int_attribute(element: Element, name: str, default: int) -> int:
    value = element.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _float_attribute(element: Element, name: str, default: float) -> float:
    value = element.get(name)
    if value is None:
        return default
    try:
        return float(value.strip())
    except ValueError:
        return default


def _bool_attribute(element: Element, name: str, default: bool) -> bool:
    value = element.get(name)
    if value is None:
        return default
    value = value.strip()
    try:
        return int(value) != 0
    except ValueError:
        pass
    if value.lower() == "true":
        return True
    if value.lower() == "false":
        return False
    return default


def _parse_properties(element: Element | None) -> dict[str, str]:
    if element is None:
        return {}
    return {
        prop.get("name", ""): prop.get("value", prop.text or "")
        for prop in element.findall("property")
    }


@dataclass
class TileLayer:
    """A layer of tile cells laid out row by row."""

    width: int
    height: int
    name: str = ""
    x: int = 0
    y: int = 0
    opacity: float = 1.0
    visible: bool = True
    properties: dict[str, str] = field(default_factory=dict)
    encoding: Encoding = Encoding.XML
    compression: Compression = Compression.NONE
    tiles: tuple[LayerTile, ...] = ()

    @classmethod
    def from_element(
        cls,
        element: Element,
        width: int,
        height: int,
        find_tileset: TilesetFinder | None = None,
    ) -> "TileLayer":
        """Read a ``<layer>`` element of a map *width* by *height* tiles large.

        Raises ValueError when the data element is missing or malformed.
        """
        data = element.find("data")
        if data is None:
            raise ValueError("tile layer has no data element")

        encoding = {
            "base64": Encoding.BASE64,
            "csv": Encoding.CSV,
        }.get(data.get("encoding") or "", Encoding.XML)
        compression = {
            "gzip": Compression.GZIP,
            "zlib": Compression.ZLIB,
        }.get(data.get("compression") or "", Compression.NONE)

        count = width * height
        if encoding is Encoding.BASE64:
            gids: Iterable[int] = decode_base64_data(data.text or "", compression, count)
        elif encoding is Encoding.CSV:
            gids = decode_csv(data.text or "")
        else:
            gids = decode_xml(data)

        cells = [LayerTile.from_raw(gid, find_tileset) for gid in gids]
        if len(cells) > count:
            raise ValueError(
                f"tile layer holds {len(cells)} tiles, at most {count} fit"
            )
        cells.extend(LayerTile() for _ in range(count - len(cells)))

        return cls(
            width=width,
            height=height,
            name=element.get("name", ""),
            x=_int_attribute(element, "x", 0),
            y=_int_attribute(element, "y", 0),
            opacity=_float_attribute(element, "opacity", 1.0),
            visible=_bool_attribute(element, "visible", True),
            properties=_parse_properties(element.find("properties")),
            encoding=encoding,
            compression=compression,
            tiles=tuple(cells),
        )

    def tile(self, x: int, y: int) -> LayerTile:
        """Return the cell at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the layer")
        return self.tiles[y * self.width + x]

    def tile_gid(self, x: int, y: int) -> int:
        """Global id of the cell at (*x*, *y*)."""
        return self.tile(x, y).gid

    def tile_tileset_index(self, x: int, y: int) -> int:
        """Index of the tileset of the cell at (*x*, *y*), -1 if none."""
        return self.tile(x, y).tileset_index