"""Full-surface render output."""

from .color import Color
from .coordinate import GridCoordinate


class Frame:
    """
    One complete render of the control surface.

    Holds a color for every grid cell plus the control-row lights.
    Cells that are never set stay off, so a frame always describes the
    full device state.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells: list[list[Color]] = [
            [Color.off() for _ in range(width)] for _ in range(height)
        ]
        self.controls: dict[int, Color] = {}

    def set_cell(self, x: int, y: int, color: Color) -> None:
        """Set the color of a single grid cell."""
        self._cells[y][x] = color

    def cell(self, x: int, y: int) -> Color:
        """Get the color of a single grid cell."""
        return self._cells[y][x]

    def set_control(self, key: int, color: Color) -> None:
        """Set the color of a control-row light."""
        self.controls[key] = color

    def cells(self):
        """Iterate over all cells as (GridCoordinate, Color), row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield GridCoordinate(x, y), self._cells[y][x]

    def lit(self) -> set[GridCoordinate]:
        """Coordinates of every cell that is not off."""
        return {coord for coord, color in self.cells() if not color.is_off}
