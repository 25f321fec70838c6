"""Grid cell.

Cells are anchored on an integer grid. Feature coordinates are local to the
cell; :meth:`Cell.origin` gives the world-space offset that turns them into
world coordinates.
"""

from dataclasses import dataclass
from pyrsistent.typing import PVector

from worldmap.model.feature import Feature
from worldmap.model.point import Point
from worldmap.types import DEFAULT_CELL_SIZE


@dataclass(frozen=True)
class Cell:
    """World tile.

    Attributes:
        x: Grid column (any signed integer).
        y: Grid row (any signed integer).
        features: Features in input (paint) order.
    """

    x: int
    y: int
    features: PVector[Feature]

    def origin(self, cell_size: int = DEFAULT_CELL_SIZE) -> Point:
        """World-space position of the cell's local ``(0, 0)``."""
        return Point(self.x * cell_size, self.y * cell_size)
