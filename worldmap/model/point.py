"""Point primitive.

Immutable integer coordinate used both for cell-local feature coordinates and
for translated world-space coordinates.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Integer coordinate pair.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """

    x: int
    y: int

    def add(self, other: "Point") -> "Point":
        """Translate by ``other`` (component-wise addition)."""
        return Point(self.x + other.x, self.y + other.y)

    def subtract_base(self, base: "Point") -> "Point":
        """Offset of this point relative to ``base``.

        ``base.add(p.subtract_base(base)) == p`` holds for every pair.
        """
        return Point(self.x - base.x, self.y - base.y)

    def as_svg(self) -> str:
        return f"{self.x},{self.y}"
