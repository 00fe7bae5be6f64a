"""Tiles of a tileset with their properties, animation and collision objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.etree.ElementTree import Element


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


@dataclass(frozen=True)
class AnimationFrame:
    """One frame of a tile animation: a tile id and a duration in milliseconds."""

    tile_id: int = -1
    duration: int = 0


@dataclass
class Tile:
    """A tile of a tileset, identified by its id relative to the tileset."""

    id: int = 0
    properties: dict[str, str] = field(default_factory=dict)
    frames: tuple[AnimationFrame, ...] = ()
    animated: bool = False
    objects: tuple[dict[str, str], ...] = ()
    has_objects: bool = False

    @property
    def total_duration(self) -> int:
        """Total animation duration in milliseconds, 0 if not animated."""
        return sum(frame.duration for frame in self.frames)

    @classmethod
    def from_element(cls, element: Element, default_id: int) -> "Tile":
        """Read a ``<tile>`` element; *default_id* is used when it has no id."""
        tile_id = _int_attribute(element, "id", default_id)
        properties = _parse_properties(element.find("properties"))

        animation = element.find("animation")
        frames: tuple[AnimationFrame, ...] = ()
        if animation is not None:
            frames = tuple(
                AnimationFrame(
                    tile_id=_int_attribute(frame, "tileid", 0),
                    duration=_int_attribute(frame, "duration", 0),
                )
                for frame in animation.findall("frame")
            )

        group = element.find("objectgroup")
        objects: tuple[dict[str, str], ...] = ()
        if group is not None:
            objects = tuple(dict(obj.attrib) for obj in group.findall("object"))

        return cls(
            id=tile_id,
            properties=properties,
            frames=frames,
            animated=animation is not None,
            objects=objects,
            has_objects=group is not None,
        )

    def frame_count(self) -> int:
        """Number of animation frames, 0 if the tile is not animated."""
        return len(self.frames)

    def is_animated(self) -> bool:
        """True if the tile carries an animation element."""
        return self.animated