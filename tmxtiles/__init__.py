"""Read tiles, tilesets, tile offsets and tile layers from Tiled TMX maps."""

__version__ = "0.1.0"