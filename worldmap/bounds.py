"""World extent in grid cells."""

from dataclasses import dataclass

from worldmap.model import World
from worldmap.types import Viewport


@dataclass(frozen=True)
class CellBounds:
    """Min/max cell coordinates. Always contains the origin cell."""

    min_x: int = 0
    max_x: int = 0
    min_y: int = 0
    max_y: int = 0

    def viewport(self, cell_size: int) -> Viewport:
        """``(min_x, min_y, max_x, max_y)`` scaled to world units."""
        return (
            self.min_x * cell_size,
            self.min_y * cell_size,
            self.max_x * cell_size,
            self.max_y * cell_size,
        )


def compute_bounds(world: World) -> CellBounds:
    min_x = max_x = min_y = max_y = 0
    for cell in world:
        min_x = min(min_x, cell.x)
        max_x = max(max_x, cell.x)
        min_y = min(min_y, cell.y)
        max_y = max(max_y, cell.y)
    return CellBounds(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)
