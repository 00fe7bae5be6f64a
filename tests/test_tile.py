import xml.etree.ElementTree as ET

from tmxtiles.tile import AnimationFrame, Tile

ANIMATED = """
<tile id="7">
  <properties>
    <property name="kind" value="coin"/>
    <property name="solid" value="false"/>
  </properties>
  <animation>
    <frame tileid="7" duration="100"/>
    <frame tileid="8" duration="150"/>
    <frame tileid="9" duration="250"/>
  </animation>
</tile>
"""

WITH_OBJECTS = """
<tile id="2">
  <objectgroup>
    <object id="1" x="0" y="0" width="16" height="8"/>
    <object id="2" x="0" y="8" width="16" height="8"/>
  </objectgroup>
</tile>
"""


def test_animated_tile_frames_and_duration():
    tile = Tile.from_element(ET.fromstring(ANIMATED), 0)
    assert tile.id == 7
    assert tile.is_animated()
    assert tile.frame_count() == 3
    assert tile.frames[1] == AnimationFrame(tile_id=8, duration=150)
    assert tile.total_duration == sum(f.duration for f in tile.frames)


def test_properties_are_read():
    tile = Tile.from_element(ET.fromstring(ANIMATED), 0)
    assert tile.properties == {"kind": "coin", "solid": "false"}


def test_plain_tile_is_not_animated():
    tile = Tile.from_element(ET.fromstring('<tile id="3"/>'), 0)
    assert not tile.is_animated()
    assert tile.frame_count() == 0
    assert tile.total_duration == 0
    assert tile.has_objects is False


def test_empty_animation_still_counts_as_animated():
    tile = Tile.from_element(ET.fromstring('<tile id="1"><animation/></tile>'), 0)
    assert tile.is_animated()
    assert tile.frame_count() == 0


def test_default_id_used_when_missing():
    tile = Tile.from_element(ET.fromstring("<tile/>"), 5)
    assert tile.id == 5


def test_collision_objects():
    tile = Tile.from_element(ET.fromstring(WITH_OBJECTS), 0)
    assert tile.has_objects
    assert len(tile.objects) == 2
    assert tile.objects[1]["y"] == "8"


def test_empty_objectgroup_marks_objects():
    tile = Tile.from_element(ET.fromstring("<tile id='0'><objectgroup/></tile>"), 0)
    assert tile.has_objects
    assert tile.objects == ()


def test_frame_without_attributes_defaults_to_zero():
    xml = '<tile id="1"><animation><frame/></animation></tile>'
    tile = Tile.from_element(ET.fromstring(xml), 0)
    assert tile.frames == (AnimationFrame(tile_id=0, duration=0),)


def test_default_animation_frame():
    assert AnimationFrame() == AnimationFrame(tile_id=-1, duration=0)