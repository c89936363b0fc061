"""Grid coordinate model."""

from typing import NamedTuple


class GridCoordinate(NamedTuple):
    """Position on the pad grid.

    x: column (0 = left), y: row (0 = bottom row of the device)
    """

    x: int
    y: int

    def within(self, width: int, height: int) -> bool:
        """Check that the coordinate lies inside a width x height grid."""
        return 0 <= self.x < width and 0 <= self.y < height
