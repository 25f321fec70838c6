from worldmap.bounds import CellBounds, compute_bounds
from tests.test_utils import make_cell, make_world


def test_empty_world_bounds() -> None:
    assert compute_bounds(make_world()) == CellBounds(0, 0, 0, 0)


def test_bounds_over_mixed_cells() -> None:
    bounds = compute_bounds(make_world(make_cell(2, -1), make_cell(-3, 4)))
    assert bounds == CellBounds(min_x=-3, max_x=2, min_y=-1, max_y=4)


def test_bounds_include_origin() -> None:
    bounds = compute_bounds(make_world(make_cell(5, 6), make_cell(7, 8)))
    assert bounds == CellBounds(min_x=0, max_x=7, min_y=0, max_y=8)

    negative = compute_bounds(make_world(make_cell(-5, -6)))
    assert negative == CellBounds(min_x=-5, max_x=0, min_y=-6, max_y=0)


def test_viewport_scales_by_cell_size() -> None:
    bounds = CellBounds(min_x=-3, max_x=2, min_y=-1, max_y=4)
    assert bounds.viewport(300) == (-900, -300, 600, 1200)
    assert bounds.viewport(1) == (-3, -1, 2, 4)
