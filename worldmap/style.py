"""Attribute-driven style classification.

Polygon styling is an ordered list of rules. Each rule looks at one
:class:`Property` and either ignores it (``None``) or returns a
:class:`StylePatch` holding only the fields it wants to change. Patches are
folded, in attribute order, onto :data:`DEFAULT_POLYGON_STYLE`, so a later
matching attribute overrides the fields an earlier one set and leaves the rest
alone::

    >>> classify(GeometryKind.POLYGON, Properties.of([("water", "yes"), ("building", "Medical")]))
    Style(fill='red', stroke=None, stroke_width=2, layer='medical', label=None)

Points are labelled instead of styled: the first ``name_en`` attribute becomes
the label and the point goes to the ``text`` layer. A point without a label
renders nothing.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union

from worldmap.model import Properties, Property
from worldmap.types import GeometryKind, LayerName, POLYGON_LAYER, TEXT_LAYER

LABEL_ATTRIBUTE = "name_en"


@dataclass(frozen=True)
class Style:
    """Resolved visual treatment of one geometry.

    Attributes:
        fill: SVG fill color (``"none"`` for no fill).
        stroke: Outline color, ``None`` for no outline.
        stroke_width: Outline width, only emitted with a stroke.
        layer: Semantic layer receiving the primitive.
        label: Text content for point geometries.
    """

    fill: str = "none"
    stroke: Optional[str] = "black"
    stroke_width: int = 2
    layer: LayerName = POLYGON_LAYER
    label: Optional[str] = None


DEFAULT_POLYGON_STYLE = Style()
TEXT_STYLE = Style(fill="blue", stroke=None, layer=TEXT_LAYER)


class _Unset(Enum):
    UNSET = 0


UNSET = _Unset.UNSET


@dataclass(frozen=True)
class StylePatch:
    """Partial style; fields left ``UNSET`` are not touched when applied."""

    fill: Union[str, _Unset] = UNSET
    stroke: Union[Optional[str], _Unset] = UNSET
    layer: Union[LayerName, _Unset] = UNSET

    def apply(self, style: Style) -> Style:
        changes = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
        return replace(style, **changes)


# --- Polygon rules ---

StyleRule = Callable[[Property], Optional[StylePatch]]


def water_rule(prop: Property) -> Optional[StylePatch]:
    if prop.name == "water":
        return StylePatch(fill="blue", stroke=None, layer="water")
    return None


def wood_rule(prop: Property) -> Optional[StylePatch]:
    if prop.name == "natural" and prop.value == "wood":
        return StylePatch(fill="green", stroke=None)
    return None


def medical_rule(prop: Property) -> Optional[StylePatch]:
    if prop.name == "building" and prop.value == "Medical":
        return StylePatch(fill="red", stroke=None, layer="medical")
    return None


DEFAULT_STYLE_RULES: List[StyleRule] = [
    water_rule,
    wood_rule,
    medical_rule,
]


def classify_polygon(
    properties: Optional[Properties],
    rules: Sequence[StyleRule] = DEFAULT_STYLE_RULES,
) -> Style:
    style = DEFAULT_POLYGON_STYLE
    if properties is None:
        return style
    for prop in properties:
        for rule in rules:
            patch = rule(prop)
            if patch is not None:
                style = patch.apply(style)
    return style


def point_label(properties: Optional[Properties]) -> Optional[str]:
    """First ``name_en`` value, or ``None``."""
    if properties is None:
        return None
    return properties.first(LABEL_ATTRIBUTE)


def classify_point(properties: Optional[Properties]) -> Style:
    return replace(TEXT_STYLE, label=point_label(properties))


def classify(
    kind: GeometryKind,
    properties: Optional[Properties],
    rules: Sequence[StyleRule] = DEFAULT_STYLE_RULES,
) -> Style:
    """Style decision for a geometry of ``kind`` carrying ``properties``.

    Raises:
        ValueError: For ``UNSUPPORTED`` geometries, which have no style.
    """
    if kind is GeometryKind.POINT:
        return classify_point(properties)
    if kind is GeometryKind.POLYGON:
        return classify_polygon(properties, rules)
    raise ValueError(f"No style for geometry kind {kind}")
