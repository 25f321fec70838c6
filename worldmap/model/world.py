"""World root."""

from dataclasses import dataclass
from typing import Iterator
from pyrsistent import pvector
from pyrsistent.typing import PVector

from worldmap.model.cell import Cell


@dataclass(frozen=True)
class World:
    """Ordered sequence of cells; root of the decoded input."""

    cells: PVector[Cell] = pvector()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)
