"""World-map XML decoder.

Reads the ``<world><cell x= y=><feature>...`` document into the immutable
model. Scalar fields are looked up first as XML attributes and then as child
elements, so both ``<point x="1" y="2"/>`` and
``<point><x>1</x><y>2</y></point>`` decode to the same :class:`Point`.

Geometry tags map through :data:`worldmap.types.GEOMETRY_TAGS`. Unknown tags
raise :class:`DecodeError` unless ``strict=False``, in which case they decode
to ``UNSUPPORTED`` geometries that keep their raw tag and render nothing.

Point ring sizes are *not* checked here; the renderer enforces them.
"""

import logging
from pathlib import Path
from typing import Optional, Union
from xml.etree.ElementTree import Element, ParseError, fromstring
from pyrsistent import pvector

from worldmap.errors import DecodeError
from worldmap.model import (
    Cell,
    Coordinates,
    Feature,
    Geometry,
    Point,
    Properties,
    Property,
    World,
)
from worldmap.types import GEOMETRY_TAGS, GeometryKind

logger = logging.getLogger(__name__)


def _field(element: Element, name: str) -> Optional[str]:
    value = element.get(name)
    if value is not None:
        return value
    child = element.find(name)
    if child is not None:
        return (child.text or "").strip()
    return None


def _required(element: Element, name: str) -> str:
    value = _field(element, name)
    if value is None:
        raise DecodeError(f"<{element.tag}> is missing {name!r}")
    return value


def _int(element: Element, name: str) -> int:
    raw = _required(element, name)
    try:
        return int(raw)
    except ValueError as e:
        raise DecodeError(
            f"<{element.tag}> field {name!r} is not an integer: {raw!r}"
        ) from e


def parse_point(element: Element) -> Point:
    return Point(_int(element, "x"), _int(element, "y"))


def parse_coordinates(element: Element) -> Coordinates:
    points = [parse_point(p) for p in element.findall("point")]
    if not points:
        raise DecodeError("<coordinates> holds no <point>")
    return Coordinates.of(points)


def parse_geometry(element: Element, strict: bool = True) -> Geometry:
    raw_type = _required(element, "type")
    kind = GEOMETRY_TAGS.get(raw_type)
    if kind is None:
        if strict:
            raise DecodeError(f"Unknown geometry type: {raw_type!r}")
        kind = GeometryKind.UNSUPPORTED
    coordinates = pvector(parse_coordinates(c) for c in element.findall("coordinates"))
    return Geometry(kind=kind, coordinates=coordinates, raw_type=raw_type)


def parse_properties(element: Element) -> Properties:
    return Properties(
        pvector(
            Property(_required(p, "name"), _required(p, "value"))
            for p in element.findall("property")
        )
    )


def parse_feature(element: Element, strict: bool = True) -> Feature:
    geometry = element.find("geometry")
    if geometry is None:
        raise DecodeError("<feature> is missing <geometry>")
    properties = element.find("properties")
    return Feature(
        geometry=parse_geometry(geometry, strict),
        properties=parse_properties(properties) if properties is not None else None,
    )


def parse_cell(element: Element, strict: bool = True) -> Cell:
    return Cell(
        x=_int(element, "x"),
        y=_int(element, "y"),
        features=pvector(parse_feature(f, strict) for f in element.findall("feature")),
    )


def parse_world(text: Union[str, bytes], strict: bool = True) -> World:
    """Decode a world-map XML document.

    Raises:
        DecodeError: On malformed XML or any malformed element.
    """
    try:
        root = fromstring(text)
    except ParseError as e:
        raise DecodeError(f"Malformed world XML: {e}") from e
    return World(pvector(parse_cell(c, strict) for c in root.findall("cell")))


def load_world(path: Union[str, Path], strict: bool = True) -> World:
    """Read and decode the world file at ``path``."""
    logger.info("Reading world from %s", path)
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise DecodeError(f"Cannot read world file {path}: {e}") from e
    return parse_world(data, strict)
