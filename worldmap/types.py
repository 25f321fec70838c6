"""Common type aliases and enumerations.

``GeometryKind`` is the closed set of geometry variants the renderer knows
about. ``LayerName`` and ``Viewport`` are used by the layer store and the
artifact writers.
"""

from enum import StrEnum, auto
from typing import Tuple

LayerName = str

# (min_x, min_y, max_x, max_y) in world units
Viewport = Tuple[int, int, int, int]

COMPOSITE_LAYER: LayerName = "map"
BACKGROUND_LAYER: LayerName = "background"
POLYGON_LAYER: LayerName = "polygons"
TEXT_LAYER: LayerName = "text"

DEFAULT_CELL_SIZE = 300


class GeometryKind(StrEnum):
    """Geometry variants. ``UNSUPPORTED`` is visited but never rendered."""

    POINT = auto()
    POLYGON = auto()
    UNSUPPORTED = auto()


# Raw input tag -> kind. ``LineString`` is recognised but not drawn.
GEOMETRY_TAGS = {
    "Point": GeometryKind.POINT,
    "Polygon": GeometryKind.POLYGON,
    "LineString": GeometryKind.UNSUPPORTED,
}
