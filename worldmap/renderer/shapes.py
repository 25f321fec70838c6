"""Drawable primitives and the geometry → primitive step.

A primitive is a small frozen dataclass that knows how to serialize itself to
an SVG element. :func:`draw_geometry` converts one classified geometry into
primitives anchored at a cell origin and hands each of them to the layer
store.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union, TYPE_CHECKING
from xml.etree.ElementTree import Element

from worldmap.errors import StructuralError
from worldmap.model import Coordinates, Geometry, Point
from worldmap.style import Style
from worldmap.types import GeometryKind

if TYPE_CHECKING:
    from worldmap.renderer.layers import LayerStore

LABEL_FONT_FAMILY = "Verdana"
LABEL_FONT_SIZE = 64


@dataclass(frozen=True)
class PolygonShape:
    points: Tuple[Point, ...]
    fill: str = "none"
    stroke: Optional[str] = "black"
    stroke_width: int = 2

    def points_attr(self) -> str:
        return " ".join(p.as_svg() for p in self.points)

    def to_element(self) -> Element:
        attrs = {"fill": self.fill}
        if self.stroke is not None:
            attrs["stroke"] = self.stroke
            attrs["stroke-width"] = str(self.stroke_width)
        attrs["points"] = self.points_attr()
        return Element("polygon", attrs)


@dataclass(frozen=True)
class TextShape:
    position: Point
    text: str
    fill: str = "blue"
    font_family: str = LABEL_FONT_FAMILY
    font_size: int = LABEL_FONT_SIZE

    def to_element(self) -> Element:
        element = Element(
            "text",
            {
                "x": str(self.position.x),
                "y": str(self.position.y),
                "font-family": self.font_family,
                "font-size": str(self.font_size),
                "fill": self.fill,
            },
        )
        # ElementTree escapes the label on serialization
        element.text = self.text
        return element


@dataclass(frozen=True)
class RectShape:
    x: int
    y: int
    width: int
    height: int
    fill: str = "white"

    def to_element(self) -> Element:
        return Element(
            "rect",
            {
                "x": str(self.x),
                "y": str(self.y),
                "width": str(self.width),
                "height": str(self.height),
                "fill": self.fill,
            },
        )


Shape = Union[PolygonShape, TextShape, RectShape]


def polygon_shape(origin: Point, ring: Coordinates, style: Style) -> PolygonShape:
    """Translate ``ring`` to world space. A single point gives a zero-area polygon."""
    return PolygonShape(
        points=tuple(origin.add(p) for p in ring.points),
        fill=style.fill,
        stroke=style.stroke,
        stroke_width=style.stroke_width,
    )


def text_shape(origin: Point, ring: Coordinates, style: Style) -> Optional[TextShape]:
    """Label primitive for a point ring, or ``None`` when there is no label.

    Raises:
        StructuralError: If the ring does not hold exactly one point.
    """
    if len(ring) != 1:
        raise StructuralError(
            f"Point geometry ring must hold exactly 1 point, got {len(ring)}"
        )
    if style.label is None:
        return None
    return TextShape(position=origin.add(ring.points[0]), text=style.label)


def draw_geometry(
    store: "LayerStore", origin: Point, geometry: Geometry, style: Style
) -> int:
    """Render every ring of ``geometry`` into ``store``.

    Returns:
        int: Number of primitives added (each one is written to two layers).
    """
    count = 0
    for ring in geometry.coordinates:
        shape: Optional[Shape] = None
        if geometry.kind is GeometryKind.POLYGON:
            shape = polygon_shape(origin, ring, style)
        elif geometry.kind is GeometryKind.POINT:
            shape = text_shape(origin, ring, style)
        if shape is not None:
            store.add_to_layer(style.layer, shape)
            count += 1
    return count
