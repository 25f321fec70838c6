from pathlib import Path

import pytest

from worldmap.decode import load_world, parse_world
from worldmap.errors import DecodeError
from worldmap.model import Point, Property
from worldmap.types import GeometryKind
from tests.test_utils import WORLD_XML


def test_parse_world_structure() -> None:
    world = parse_world(WORLD_XML)

    assert [(c.x, c.y) for c in world] == [(0, 0), (1, 2)]
    first, second = world.cells
    assert len(first.features) == 2
    square = first.features[0]
    assert square.properties is None
    assert square.geometry.kind is GeometryKind.POLYGON
    assert list(square.geometry.coordinates[0].points) == [
        Point(300, 0),
        Point(300, 300),
        Point(0, 300),
        Point(0, 0),
    ]
    water = first.features[1]
    assert water.attributes() == (Property("water", "river"),)

    town, line = second.features
    assert town.geometry.kind is GeometryKind.POINT
    assert town.properties is not None
    assert town.properties.first("name_en") == "Rose & Crown"
    assert line.geometry.kind is GeometryKind.UNSUPPORTED
    assert line.geometry.raw_type == "LineString"


def test_child_element_fields() -> None:
    world = parse_world(
        """
        <world>
          <cell><x>-2</x><y>3</y>
            <feature>
              <geometry><type>Point</type>
                <coordinates><point><x>1</x><y> 2 </y></point></coordinates>
              </geometry>
              <properties>
                <property><name>name_en</name><value>Town</value></property>
              </properties>
            </feature>
          </cell>
        </world>
        """
    )
    (cell,) = world.cells
    assert (cell.x, cell.y) == (-2, 3)
    (feature,) = cell.features
    assert feature.geometry.coordinates[0].points[0] == Point(1, 2)
    assert feature.attributes() == (Property("name_en", "Town"),)


def test_empty_properties_element() -> None:
    world = parse_world(
        '<world><cell x="0" y="0"><feature>'
        '<geometry type="Polygon"><coordinates><point x="0" y="0"/></coordinates></geometry>'
        "<properties/></feature></cell></world>"
    )
    feature = world.cells[0].features[0]
    assert feature.properties is not None
    assert len(feature.properties) == 0


def test_point_ring_length_not_checked_by_decoder() -> None:
    world = parse_world(
        '<world><cell x="0" y="0"><feature><geometry type="Point"><coordinates>'
        '<point x="0" y="0"/><point x="1" y="1"/>'
        "</coordinates></geometry></feature></cell></world>"
    )
    assert len(world.cells[0].features[0].geometry.coordinates[0]) == 2


def test_empty_world() -> None:
    assert len(parse_world("<world/>")) == 0


def test_unknown_geometry_type_strict() -> None:
    xml = (
        '<world><cell x="0" y="0"><feature><geometry type="Circle">'
        '<coordinates><point x="0" y="0"/></coordinates>'
        "</geometry></feature></cell></world>"
    )
    with pytest.raises(DecodeError, match="Circle"):
        parse_world(xml)

    geometry = parse_world(xml, strict=False).cells[0].features[0].geometry
    assert geometry.kind is GeometryKind.UNSUPPORTED
    assert geometry.raw_type == "Circle"


@pytest.mark.parametrize(
    "xml",
    [
        "<world><cell x='0' y='0'>",
        "<world><cell x='zero' y='0'/></world>",
        "<world><cell y='0'/></world>",
        "<world><cell x='0' y='0'><feature/></cell></world>",
        "<world><cell x='0' y='0'><feature><geometry>"
        "<coordinates><point x='0' y='0'/></coordinates>"
        "</geometry></feature></cell></world>",
        "<world><cell x='0' y='0'><feature><geometry type='Polygon'>"
        "<coordinates/></geometry></feature></cell></world>",
        "<world><cell x='0' y='0'><feature><geometry type='Polygon'>"
        "<coordinates><point x='1.5' y='0'/></coordinates>"
        "</geometry></feature></cell></world>",
        "<world><cell x='0' y='0'><feature><geometry type='Polygon'>"
        "<coordinates><point x='0' y='0'/></coordinates></geometry>"
        "<properties><property name='water'/></properties>"
        "</feature></cell></world>",
    ],
)
def test_malformed_input(xml: str) -> None:
    with pytest.raises(DecodeError):
        parse_world(xml)


def test_load_world(tmp_path: Path) -> None:
    path = tmp_path / "worldmap.xml"
    path.write_text(WORLD_XML, encoding="utf-8")
    assert len(load_world(path)) == 2


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DecodeError):
        load_world(tmp_path / "missing.xml")
