"""Geometry and coordinate rings.

A :class:`Geometry` carries its :class:`GeometryKind` (plus the raw tag it was
decoded from) and an ordered sequence of :class:`Coordinates` rings. How a
ring is read depends on the kind:

* ``POINT``: the ring holds exactly one point.
* ``POLYGON``: the ring is a closed boundary of one or more points. The last
  point does not have to repeat the first one.
* ``UNSUPPORTED``: rings are kept but never drawn.
"""

from dataclasses import dataclass
from typing import Iterable, Optional
from pyrsistent import pvector
from pyrsistent.typing import PVector

from worldmap.model.point import Point
from worldmap.types import GeometryKind


@dataclass(frozen=True)
class Coordinates:
    """Ordered ring of points.

    Attributes:
        points: Persistent vector of cell-local points.
    """

    points: PVector[Point]

    @classmethod
    def of(cls, points: Iterable[Point]) -> "Coordinates":
        return cls(pvector(points))

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class Geometry:
    """Typed geometry.

    Attributes:
        kind: Variant used to pick the renderer.
        coordinates: Rings in input order.
        raw_type: Tag as found in the input (``"LineString"`` etc.).
    """

    kind: GeometryKind
    coordinates: PVector[Coordinates]
    raw_type: Optional[str] = None

    @property
    def is_renderable(self) -> bool:
        return self.kind is not GeometryKind.UNSUPPORTED
