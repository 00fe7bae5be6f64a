# tmxtiles

Read the tile-related parts of maps made with the Tiled editor (`.tmx` files
and external `.tsx` tilesets): tilesets, per-tile data such as properties,
animations and collision objects, tile offsets, and tile layer data in XML,
CSV or base64 encoding, the latter optionally zlib- or gzip-compressed.

The package has no third-party dependencies; it works on elements from the
standard library's `xml.etree.ElementTree`.

## Installation

```
pip install .
```

## Usage

### Tilesets

```python
import xml.etree.ElementTree as ET
from tmxtiles.tileset import Tileset

root = ET.parse("level.tmx").getroot()
tilesets = [
    Tileset.from_element(element, "maps/")
    for element in root.iter("tileset")
]

tile = tilesets[0].get_tile(3)
if tile is not None and tile.is_animated():
    print(tile.frame_count(), tile.total_duration)
```

`Tileset` holds `first_gid`, `name`, `tile_width`, `tile_height`, `margin`,
`spacing`, `tile_offset` (a `TileOffset` or `None`), `image` (the attributes
of the `<image>` element, or `None`), `terrain_types` (the attributes of each
`<terrain>`), `tiles` and `properties`. `get_tile` returns the first tile with
the given id, or `None`.

When a `<tileset>` element carries a `source` attribute, `firstgid` is still
taken from that element and everything else is read from the file named by
`file_path` followed directly by the source name (so pass a prefix ending in a
path separator). A `ValueError` is raised if that file cannot be read or has
no `<tileset>` root.

Each `Tile` has `id`, `properties`, `frames` (a tuple of `AnimationFrame`
with `tile_id` and `duration` in milliseconds), `objects` (the attributes of
each `<object>` in its `<objectgroup>`) and `has_objects`. A tile without an
`id` attribute takes its position among the tileset's tiles.

### Tile layers

`TileLayer.from_element` needs the map's size in tiles and, optionally, a
function that, given a global tile id, returns the index and first gid of the
tileset it belongs to, or `None` when no tileset holds it.

```python
from tmxtiles.tile_layer import TileLayer

def find_tileset(gid):
    for index, tileset in reversed(list(enumerate(tilesets))):
        if gid >= tileset.first_gid:
            return index, tileset.first_gid
    return None

width = int(root.get("width"))
height = int(root.get("height"))
layer = TileLayer.from_element(root.find("layer"), width, height, find_tileset)

print(layer.tile_gid(0, 0), layer.tile_tileset_index(0, 0))
print(layer.tile(2, 1))
```

Each cell is a `LayerTile` with `gid` (flip flags cleared), `id` (relative to
its tileset), `tileset_index` (-1 when no tileset holds the gid) and the
`flipped_horizontally`, `flipped_vertically` and `flipped_diagonally` flags.
Cells missing from the data are filled with empty tiles. The layer also keeps
`name`, `x`, `y`, `opacity`, `visible`, `properties`, `encoding` (an
`Encoding`) and `compression` (a `Compression`).

`from_element` raises `ValueError` when the layer has no `<data>` element,
when the data is malformed, or when it holds more tiles than fit the layer.
`tile`, `tile_gid` and `tile_tileset_index` raise `IndexError` for positions
outside the layer.

### Lower-level helpers

- `tmxtiles.util.trim`, `decode_base64` and `decompress_gzip` handle the text
  and compressed payloads found in layer data; the last two raise
  `ValueError` on bad input.
- `tmxtiles.tile_layer.decode_xml`, `decode_csv` and `decode_base64_data`
  turn the contents of a `<data>` element into a list of raw gids, and
  `LayerTile.from_raw` turns a raw gid into a cell.
- `tmxtiles.tile_offset.TileOffset.from_element` reads a `<tileoffset>`
  element; missing or malformed values become 0.

## What it does not do

There is no map object: the package does not read the `<map>` element
itself, object layers, image layers or map-level properties, and it does not
load or draw tileset images. The caller finds the elements, supplies the map
size and the tileset lookup, and does any rendering.

## Running the tests

```
pip install .[test]
pytest
```