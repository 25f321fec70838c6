"""World traversal.

Depth-first walk ``World → Cell → Feature → Geometry → ring`` that classifies
each geometry and draws it into a :class:`LayerStore`. Input order is paint
order: later features end up on top of earlier ones within a layer.
"""

from dataclasses import dataclass
from typing import Sequence

from worldmap.model import Cell, Feature, Point, World
from worldmap.renderer.layers import LayerStore
from worldmap.renderer.shapes import draw_geometry
from worldmap.style import DEFAULT_STYLE_RULES, StyleRule, classify
from worldmap.types import DEFAULT_CELL_SIZE


@dataclass(frozen=True)
class RenderStats:
    """Counters collected while walking the world.

    Attributes:
        cells: Cells visited.
        features: Features visited.
        primitives: Primitives added to the store (each written twice).
        skipped: Unsupported geometries visited without output.
    """

    cells: int = 0
    features: int = 0
    primitives: int = 0
    skipped: int = 0

    def __add__(self, other: "RenderStats") -> "RenderStats":
        return RenderStats(
            cells=self.cells + other.cells,
            features=self.features + other.features,
            primitives=self.primitives + other.primitives,
            skipped=self.skipped + other.skipped,
        )


def render_feature(
    store: LayerStore,
    origin: Point,
    feature: Feature,
    rules: Sequence[StyleRule] = DEFAULT_STYLE_RULES,
) -> RenderStats:
    geometry = feature.geometry
    if not geometry.is_renderable:
        return RenderStats(features=1, skipped=1)
    style = classify(geometry.kind, feature.properties, rules)
    return RenderStats(
        features=1, primitives=draw_geometry(store, origin, geometry, style)
    )


def render_cell(
    store: LayerStore,
    cell: Cell,
    cell_size: int = DEFAULT_CELL_SIZE,
    rules: Sequence[StyleRule] = DEFAULT_STYLE_RULES,
) -> RenderStats:
    origin = cell.origin(cell_size)
    stats = RenderStats(cells=1)
    for feature in cell.features:
        stats = stats + render_feature(store, origin, feature, rules)
    return stats


def render_world(
    world: World,
    store: LayerStore,
    cell_size: int = DEFAULT_CELL_SIZE,
    rules: Sequence[StyleRule] = DEFAULT_STYLE_RULES,
) -> RenderStats:
    """Render every cell of ``world`` into ``store`` in input order."""
    stats = RenderStats()
    for cell in world:
        stats = stats + render_cell(store, cell, cell_size, rules)
    return stats
