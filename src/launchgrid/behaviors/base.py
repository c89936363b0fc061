"""Behavior interface shared by all grid applications."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Union

from launchgrid.models import Frame, GridCoordinate


class DispatchOutcome(Enum):
    """Result of handing a press to a behavior."""

    HANDLED = "handled"
    UNBOUND = "unbound"  # No binding for this key
    REJECTED = "rejected"  # Bound, but refused in the current state
    QUIT = "quit"


@dataclass(frozen=True)
class PadPress:
    """A main-grid pad was pressed."""

    coordinate: GridCoordinate
    velocity: int = 127


@dataclass(frozen=True)
class ControlPress:
    """A control-row button was pressed."""

    key: int
    velocity: int = 127


Press = Union[PadPress, ControlPress]


class GridBehavior(ABC):
    """
    Application logic driven by the surface loop.

    The loop owns the timing; a behavior only reacts to presses, advances
    when ticked and renders its state as a full Frame.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    @property
    def running(self) -> bool:
        """True if the loop should call `tick()` each iteration."""
        return False

    def receive(self, press: Press) -> DispatchOutcome:
        """Route a press to the pad or control handler."""
        if isinstance(press, PadPress):
            return self.on_pad(press)
        return self.on_control(press)

    @abstractmethod
    def on_pad(self, press: PadPress) -> DispatchOutcome:
        """Handle a main-grid press."""

    @abstractmethod
    def on_control(self, press: ControlPress) -> DispatchOutcome:
        """Handle a control-row press."""

    def tick(self, elapsed: float) -> None:
        """Advance simulation time. Default: nothing to advance."""

    @abstractmethod
    def render(self, elapsed: float) -> Frame:
        """
        Project current state onto the surface.

        Args:
            elapsed: Seconds since the previous render
        """

    def new_frame(self) -> Frame:
        """Blank frame matching this behavior's grid."""
        return Frame(self.width, self.height)
