"""Feature and attribute components.

``Properties`` keeps attributes in input order because style classification
folds them in that order. A feature without properties (``None``) and one
with an empty ``Properties`` are both treated as "no attributes".
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple
from pyrsistent import pvector
from pyrsistent.typing import PVector

from worldmap.model.geometry import Geometry


@dataclass(frozen=True)
class Property:
    """Single ``name`` / ``value`` attribute."""

    name: str
    value: str


@dataclass(frozen=True)
class Properties:
    """Ordered attribute list.

    Attributes:
        items: Persistent vector of :class:`Property` in input order.
    """

    items: PVector[Property]

    @classmethod
    def of(cls, pairs: Iterable[Tuple[str, str]]) -> "Properties":
        return cls(pvector(Property(name, value) for name, value in pairs))

    def __iter__(self) -> Iterator[Property]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def first(self, name: str) -> Optional[str]:
        """Value of the first attribute called ``name``, if any."""
        for prop in self.items:
            if prop.name == name:
                return prop.value
        return None


@dataclass(frozen=True)
class Feature:
    """One drawable entity of a cell.

    Attributes:
        geometry: Shape of the feature.
        properties: Optional attributes driving style classification.
    """

    geometry: Geometry
    properties: Optional[Properties] = None

    def attributes(self) -> Tuple[Property, ...]:
        """Attributes as a tuple; empty when the feature has none."""
        if self.properties is None:
            return ()
        return tuple(self.properties)
