"""Conversion driver.

``run`` performs one full conversion: decode → bounds → layer store →
traversal → bulk save. Any :class:`~worldmap.errors.WorldMapError` raised along
the way aborts the run; nothing is written until traversal has finished.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple

from worldmap.bounds import CellBounds, compute_bounds
from worldmap.config import RenderConfig
from worldmap.decode import load_world
from worldmap.export import SvgWriter
from worldmap.model import World
from worldmap.renderer.layers import LayerStore
from worldmap.renderer.raster import PreviewRenderer
from worldmap.renderer.shapes import RectShape
from worldmap.style import DEFAULT_STYLE_RULES, StyleRule
from worldmap.traversal import RenderStats, render_world
from worldmap.types import BACKGROUND_LAYER, DEFAULT_CELL_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    bounds: CellBounds
    stats: RenderStats
    paths: Tuple[Path, ...]


def add_background(store: LayerStore, bounds: CellBounds, cell_size: int) -> None:
    """White rectangle from the origin to the far bound corner."""
    store.add_to_layer(
        BACKGROUND_LAYER,
        RectShape(
            x=0,
            y=0,
            width=bounds.max_x * cell_size,
            height=bounds.max_y * cell_size,
            fill="white",
        ),
    )


def build_layers(
    world: World,
    cell_size: int = DEFAULT_CELL_SIZE,
    background: bool = False,
    rules: Sequence[StyleRule] = DEFAULT_STYLE_RULES,
) -> Tuple[LayerStore, CellBounds, RenderStats]:
    """Render ``world`` into a fresh layer store sized to its bounds."""
    bounds = compute_bounds(world)
    logger.info("%d cells", len(world))
    logger.info(
        "Bounds x=[%d, %d] y=[%d, %d]",
        bounds.min_x,
        bounds.max_x,
        bounds.min_y,
        bounds.max_y,
    )
    store = LayerStore.from_bounds(bounds, cell_size)
    if background:
        add_background(store, bounds, cell_size)
    stats = render_world(world, store, cell_size, rules)
    logger.info(
        "Rendered %d primitives from %d features (%d unsupported geometries skipped)",
        stats.primitives,
        stats.features,
        stats.skipped,
    )
    return store, bounds, stats


def run(config: RenderConfig) -> RunResult:
    config.validate()
    world = load_world(config.input_path, strict=config.strict)
    store, bounds, stats = build_layers(
        world, cell_size=config.cell_size, background=config.background
    )
    preview = PreviewRenderer(config.preview_size) if config.preview else None
    writer = SvgWriter(config.output_dir, preview=preview)
    paths = store.save(writer)
    logger.info("Wrote %d layers to %s", len(store.names()), config.output_dir)
    return RunResult(bounds=bounds, stats=stats, paths=tuple(paths))
