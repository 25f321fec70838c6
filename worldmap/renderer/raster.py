"""Raster previews of layer documents.

Draws the primitives of a :class:`~worldmap.renderer.layers.Document` with
Pillow's ``ImageDraw``. The image covers the extent of the primitives
themselves (falling back to the document viewport when empty) and is scaled
so its long edge is ``max_size`` pixels.
"""

from typing import Iterable, Optional, Tuple
from PIL import Image, ImageDraw, ImageFont

from worldmap.model import Point
from worldmap.renderer.layers import Document
from worldmap.renderer.shapes import PolygonShape, RectShape, Shape, TextShape
from worldmap.types import Viewport

DEFAULT_PREVIEW_SIZE = 2048
TRANSPARENT = (0, 0, 0, 0)

PixelXY = Tuple[float, float]


def _shape_points(shape: Shape) -> Iterable[Point]:
    if isinstance(shape, PolygonShape):
        return shape.points
    if isinstance(shape, TextShape):
        return (shape.position,)
    return (
        Point(shape.x, shape.y),
        Point(shape.x + shape.width, shape.y + shape.height),
    )


def shapes_extent(shapes: Iterable[Shape]) -> Optional[Viewport]:
    """``(min_x, min_y, max_x, max_y)`` of all primitive points, if any."""
    xs, ys = [], []
    for shape in shapes:
        for p in _shape_points(shape):
            xs.append(p.x)
            ys.append(p.y)
    if not xs:
        return None
    return min(xs), min(ys), max(xs), max(ys)


def _color(value: Optional[str]) -> Optional[str]:
    if value is None or value == "none":
        return None
    return value


def render_preview(
    document: Document,
    max_size: int = DEFAULT_PREVIEW_SIZE,
    background: Tuple[int, int, int, int] = TRANSPARENT,
) -> Image.Image:
    """Rasterize ``document`` into an RGBA image."""
    min_x, min_y, max_x, max_y = shapes_extent(document.shapes) or document.viewport
    span = max(max_x - min_x, max_y - min_y, 1)
    scale = max_size / span
    width = max(1, round((max_x - min_x) * scale))
    height = max(1, round((max_y - min_y) * scale))

    img = Image.new("RGBA", (width, height), background)
    draw = ImageDraw.Draw(img)

    def to_px(p: Point) -> PixelXY:
        return (p.x - min_x) * scale, (p.y - min_y) * scale

    for shape in document.shapes:
        if isinstance(shape, PolygonShape):
            xy = [to_px(p) for p in shape.points]
            fill = _color(shape.fill)
            outline = _color(shape.stroke)
            if len(xy) < 3:
                # degenerate rings still leave a mark
                if xy and (fill or outline):
                    draw.point(xy, fill=outline or fill)
                continue
            stroke_px = max(1, round(shape.stroke_width * scale)) if outline else 0
            draw.polygon(xy, fill=fill, outline=outline, width=stroke_px)
        elif isinstance(shape, TextShape):
            font = ImageFont.load_default(size=max(1, round(shape.font_size * scale)))
            draw.text(
                to_px(shape.position),
                shape.text,
                fill=_color(shape.fill),
                font=font,
                anchor="ls",
            )
        elif isinstance(shape, RectShape):
            x0, y0 = to_px(Point(shape.x, shape.y))
            x1, y1 = to_px(Point(shape.x + shape.width, shape.y + shape.height))
            draw.rectangle(
                [min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1)],
                fill=_color(shape.fill),
            )

    return img


class PreviewRenderer:
    max_size: int
    background: Tuple[int, int, int, int]

    def __init__(
        self,
        max_size: int = DEFAULT_PREVIEW_SIZE,
        background: Tuple[int, int, int, int] = TRANSPARENT,
    ):
        self.max_size = max_size
        self.background = background

    def render(self, document: Document) -> Image.Image:
        return render_preview(
            document, max_size=self.max_size, background=self.background
        )
