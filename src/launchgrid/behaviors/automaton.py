"""Conway's Game of Life on the pad grid."""

import logging

from launchgrid.models import Brightness, Color, Frame, GridCoordinate, Hue

from .base import ControlPress, DispatchOutcome, GridBehavior, PadPress

logger = logging.getLogger(__name__)

START_KEY = 104
QUIT_KEY = 105

ALIVE_COLOR = Color(hue=Hue.GREEN, brightness=Brightness.HIGH)
RUNNING_COLOR = Color(hue=Hue.GREEN, brightness=Brightness.MEDIUM)

# Moore neighborhood offsets
NEIGHBOR_OFFSETS = [
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
]


class LifeBoard:
    """
    Fixed-size Game of Life board.

    Edges do not wrap: cells outside the board count as dead.

    Rules applied by `step()`:
    - A live cell with two or three live neighbors survives
    - A dead cell with exactly three live neighbors becomes alive
    - Every other cell is dead in the next generation
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells: list[list[bool]] = [[False] * width for _ in range(height)]

    def is_alive(self, x: int, y: int) -> bool:
        return self._cells[y][x]

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        self._cells[y][x] = alive

    def toggle(self, x: int, y: int) -> bool:
        """
        Flip a cell.

        Returns:
            New state of the cell
        """
        self._cells[y][x] = not self._cells[y][x]
        return self._cells[y][x]

    def count_neighbors(self, x: int, y: int) -> int:
        """Number of live cells around (x, y), not counting (x, y) itself."""
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height and self._cells[ny][nx]:
                count += 1
        return count

    def step(self) -> None:
        """Advance one generation in place."""
        counts = [
            [self.count_neighbors(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]
        for y in range(self.height):
            row = self._cells[y]
            for x in range(self.width):
                n = counts[y][x]
                row[x] = n == 3 or (row[x] and n == 2)

    def alive_cells(self) -> set[GridCoordinate]:
        return {
            GridCoordinate(x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self._cells[y][x]
        }

    @property
    def population(self) -> int:
        return sum(sum(row) for row in self._cells)


class AutomatonBehavior(GridBehavior):
    """
    Game of Life driven from the pads.

    Pads toggle cells. The start button sets the simulation running (there
    is no stop); the quit button ends the loop. Whether pads still toggle
    cells while running is controlled by `allow_toggle_while_running`.
    """

    def __init__(
        self,
        width: int,
        height: int,
        start_key: int = START_KEY,
        quit_key: int = QUIT_KEY,
        allow_toggle_while_running: bool = True,
    ):
        super().__init__(width, height)
        self.board = LifeBoard(width, height)
        self.start_key = start_key
        self.quit_key = quit_key
        self.allow_toggle_while_running = allow_toggle_while_running
        self._running = False
        self.generation = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if not self._running:
            logger.info("Simulation started")
        self._running = True

    def on_pad(self, press: PadPress) -> DispatchOutcome:
        if self._running and not self.allow_toggle_while_running:
            logger.debug(f"Toggle at {press.coordinate} ignored while running")
            return DispatchOutcome.REJECTED

        x, y = press.coordinate
        alive = self.board.toggle(x, y)
        logger.debug(f"Cell ({x}, {y}) -> {'alive' if alive else 'dead'}")
        return DispatchOutcome.HANDLED

    def on_control(self, press: ControlPress) -> DispatchOutcome:
        if press.key == self.start_key:
            self.start()
            return DispatchOutcome.HANDLED
        if press.key == self.quit_key:
            return DispatchOutcome.QUIT
        return DispatchOutcome.UNBOUND

    def tick(self, elapsed: float) -> None:
        if not self._running:
            return
        self.board.step()
        self.generation += 1
        logger.debug(f"Generation {self.generation}: population {self.board.population}")

    def render(self, elapsed: float) -> Frame:
        frame = self.new_frame()
        for coord in self.board.alive_cells():
            frame.set_cell(coord.x, coord.y, ALIVE_COLOR)
        frame.set_control(self.start_key, RUNNING_COLOR if self._running else Color.off())
        return frame
