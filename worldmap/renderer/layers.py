"""Layer store.

Owns one :class:`Document` per layer name. Documents are created lazily on
first write and all share the viewport fixed when the store is built. Every
primitive added to a layer is also added to the composite ``map`` layer, so
each primitive ends up in exactly two documents.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Protocol
from xml.etree.ElementTree import Element, tostring
from pyrsistent import pmap
from pyrsistent.typing import PMap

from worldmap.bounds import CellBounds
from worldmap.renderer.shapes import Shape
from worldmap.types import COMPOSITE_LAYER, LayerName, Viewport

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


@dataclass
class Document:
    """Ordered primitives of one layer plus its viewport.

    The ``viewBox`` is written as the four viewport numbers in order.
    """

    viewport: Viewport
    shapes: List[Shape] = field(default_factory=list)

    def append(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def __len__(self) -> int:
        return len(self.shapes)

    def view_box(self) -> str:
        return " ".join(str(v) for v in self.viewport)

    def to_element(self) -> Element:
        root = Element("svg", {"viewBox": self.view_box(), "xmlns": SVG_NAMESPACE})
        for shape in self.shapes:
            root.append(shape.to_element())
        return root

    def to_string(self) -> str:
        return tostring(self.to_element(), encoding="unicode")


class LayerWriter(Protocol):
    def write(self, name: LayerName, document: Document) -> List[Path]: ...


class LayerStore:
    viewport: Viewport

    def __init__(self, viewport: Viewport):
        self.viewport = viewport
        self._layers: Dict[LayerName, Document] = {}

    @classmethod
    def from_bounds(cls, bounds: CellBounds, cell_size: int) -> "LayerStore":
        return cls(bounds.viewport(cell_size))

    @property
    def layers(self) -> PMap[LayerName, Document]:
        return pmap(self._layers)

    def names(self) -> List[LayerName]:
        return sorted(self._layers)

    def get(self, name: LayerName) -> Document:
        return self._layers[name]

    def _document(self, name: LayerName) -> Document:
        document = self._layers.get(name)
        if document is None:
            logger.debug("Creating layer %r", name)
            document = self._layers[name] = Document(self.viewport)
        return document

    def _append(self, name: LayerName, shape: Shape) -> None:
        self._document(name).append(shape)

    def add_to_layer(self, name: LayerName, shape: Shape) -> None:
        """Append ``shape`` to layer ``name`` and to the composite layer.

        Raises:
            ValueError: If ``name`` is the composite layer itself.
        """
        if name == COMPOSITE_LAYER:
            raise ValueError(
                f"{COMPOSITE_LAYER!r} is the composite layer and cannot be targeted"
            )
        self._append(name, shape)
        self._append(COMPOSITE_LAYER, shape)

    def save(self, writer: LayerWriter) -> List[Path]:
        """Hand every layer to ``writer``; returns the written paths."""
        paths: List[Path] = []
        for name in self.names():
            paths.extend(writer.write(name, self._layers[name]))
        return paths
