from dataclasses import replace
from xml.etree.ElementTree import tostring

import pytest

from worldmap.errors import StructuralError
from worldmap.model import Point, Properties
from worldmap.renderer.layers import LayerStore
from worldmap.renderer.shapes import (
    PolygonShape,
    RectShape,
    TextShape,
    draw_geometry,
    polygon_shape,
    text_shape,
)
from worldmap.style import DEFAULT_POLYGON_STYLE, Style, classify_point
from tests.test_utils import SQUARE, make_point, make_polygon, ring


def test_polygon_translated_by_origin() -> None:
    shape = polygon_shape(Point(300, -300), ring([(1, 2), (3, 4)]), DEFAULT_POLYGON_STYLE)
    assert shape.points == (Point(301, -298), Point(303, -296))


def test_single_point_polygon_is_allowed() -> None:
    shape = polygon_shape(Point(0, 0), ring([(5, 5)]), DEFAULT_POLYGON_STYLE)
    assert shape.points_attr() == "5,5"


def test_polygon_element_with_stroke() -> None:
    shape = polygon_shape(Point(0, 0), ring(SQUARE), DEFAULT_POLYGON_STYLE)
    element = shape.to_element()
    assert element.tag == "polygon"
    assert element.attrib == {
        "fill": "none",
        "stroke": "black",
        "stroke-width": "2",
        "points": "300,0 300,300 0,300 0,0",
    }


def test_polygon_element_without_stroke() -> None:
    shape = PolygonShape(points=(Point(0, 0),), fill="blue", stroke=None)
    assert shape.to_element().attrib == {"fill": "blue", "points": "0,0"}


def test_text_element_escapes_label() -> None:
    shape = TextShape(position=Point(305, 607), text="Rose & <Crown>")
    element = shape.to_element()
    assert element.attrib == {
        "x": "305",
        "y": "607",
        "font-family": "Verdana",
        "font-size": "64",
        "fill": "blue",
    }
    assert "Rose &amp; &lt;Crown&gt;" in tostring(element, encoding="unicode")


def test_rect_element() -> None:
    assert RectShape(0, 0, 600, 900).to_element().attrib == {
        "x": "0",
        "y": "0",
        "width": "600",
        "height": "900",
        "fill": "white",
    }


def test_text_shape_needs_label() -> None:
    style = classify_point(None)
    assert text_shape(Point(0, 0), ring([(1, 1)]), style) is None


@pytest.mark.parametrize("points", [[], [(1, 1), (2, 2)]])
def test_point_ring_must_hold_one_point(points) -> None:
    style = classify_point(Properties.of([("name_en", "x")]))
    with pytest.raises(StructuralError):
        text_shape(Point(0, 0), ring(points), style)


def test_point_ring_checked_even_without_label() -> None:
    with pytest.raises(StructuralError):
        text_shape(Point(0, 0), ring([(1, 1), (2, 2)]), classify_point(None))


def test_draw_geometry_adds_every_ring() -> None:
    store = LayerStore((0, 0, 0, 0))
    feature = make_polygon()
    geometry = replace(
        feature.geometry,
        coordinates=feature.geometry.coordinates.append(ring([(0, 0)])),
    )
    assert draw_geometry(store, Point(0, 0), geometry, DEFAULT_POLYGON_STYLE) == 2
    assert len(store.get("polygons")) == 2
    assert len(store.get("map")) == 2


def test_draw_labelled_point() -> None:
    store = LayerStore((0, 0, 0, 0))
    feature = make_point((5, 7), [("name_en", "Test Town")])
    style = classify_point(feature.properties)
    assert draw_geometry(store, Point(300, 600), feature.geometry, style) == 1
    (shape,) = store.get("text").shapes
    assert shape == TextShape(position=Point(305, 607), text="Test Town")


def test_draw_unlabelled_point_emits_nothing() -> None:
    store = LayerStore((0, 0, 0, 0))
    feature = make_point()
    assert draw_geometry(store, Point(0, 0), feature.geometry, Style()) == 0
    assert store.names() == []
