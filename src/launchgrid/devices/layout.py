"""Note layouts: mapping between grid coordinates and device keys.

Launchpad firmware variants number their buttons differently, so each
numbering scheme is its own layout class. A layout is picked once per
device profile; it is never guessed from incoming traffic.
"""

from abc import ABC, abstractmethod
from typing import Optional

from launchgrid.models import GridCoordinate


class NoteLayout(ABC):
    """
    Bidirectional mapping between (x, y) grid positions and device keys.

    `to_device_key()` and `to_grid_coordinate()` are exact inverses over
    the grid and assume valid input. Use `decode()` for keys that come
    straight from the device.
    """

    def __init__(self, width: int, height: int):
        """
        Args:
            width: Number of columns
            height: Number of rows
        """
        self.width = width
        self.height = height

    @abstractmethod
    def to_device_key(self, x: int, y: int) -> int:
        """Convert (x, y) coordinates to a device key."""

    @abstractmethod
    def to_grid_coordinate(self, key: int) -> GridCoordinate:
        """Convert a device key to (x, y) coordinates."""

    def decode(self, key: int) -> Optional[GridCoordinate]:
        """
        Convert an arbitrary incoming key to coordinates.

        Args:
            key: Device key as received

        Returns:
            GridCoordinate, or None if the key is not a pad on this grid
        """
        if not 0 <= key <= 127:
            return None
        coord = self.to_grid_coordinate(key)
        if not coord.within(self.width, self.height):
            return None
        # Gap keys (e.g. the unused note between rows) decode to a
        # coordinate that encodes to a different key.
        if self.to_device_key(coord.x, coord.y) != key:
            return None
        return coord

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"


class FullPadLayout(NoteLayout):
    """
    Full-pad numbering with an extra note between rows.

    Each row is offset from the previous one by width + 1, so with the
    default offset and a 9-wide grid the bottom row is 11-19 and the
    next row starts at 21 rather than 20.

    Example (width=9):
        (0, 0) → 11
        (8, 0) → 19
        (0, 1) → 21
        (8, 7) → 89
    """

    DEFAULT_BASE_OFFSET = 0x0B

    def __init__(self, width: int, height: int, base_offset: int = DEFAULT_BASE_OFFSET):
        super().__init__(width, height)
        self.base_offset = base_offset

    def to_device_key(self, x: int, y: int) -> int:
        return self.base_offset + x + y + y * self.width

    def to_grid_coordinate(self, key: int) -> GridCoordinate:
        remainder = key - self.base_offset
        if remainder < 0:
            # Below the first pad; report a coordinate outside the grid
            return GridCoordinate(remainder, 0)

        row = 0
        while remainder > self.width:
            remainder -= self.width + 1
            row += 1
        return GridCoordinate(remainder, row)


class SideColumnLayout(NoteLayout):
    """
    Side-column numbering with a fixed decade stride.

    key = y * 10 + 1 + x, regardless of grid width. The last digit of the
    key is the column (1-based) and the tens digit is the row.

    Example:
        (0, 0) → 1
        (7, 0) → 8
        (0, 3) → 31
    """

    ROW_STRIDE = 10

    def to_device_key(self, x: int, y: int) -> int:
        return y * self.ROW_STRIDE + 1 + x

    def to_grid_coordinate(self, key: int) -> GridCoordinate:
        return GridCoordinate(key % self.ROW_STRIDE - 1, key // self.ROW_STRIDE)
