"""worldmap.model
=================

Immutable input model: ``World`` → ``Cell`` → ``Feature`` → ``Geometry`` →
``Coordinates`` → ``Point``, plus the ordered ``Properties`` attached to each
feature.

Everything here is a frozen ``@dataclass`` whose sequences are
``pyrsistent.PVector`` values, so a decoded world can be shared freely and is
never mutated by rendering::

    from worldmap.model import World, Cell, Point
"""

from .point import Point
from .geometry import Coordinates, Geometry
from .feature import Feature, Properties, Property
from .cell import Cell
from .world import World

__all__ = [
    "Cell",
    "Coordinates",
    "Feature",
    "Geometry",
    "Point",
    "Properties",
    "Property",
    "World",
]
