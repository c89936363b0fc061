"""The polling loop tying device input to behavior and LED output."""

import logging
import time
from enum import Enum
from typing import Callable, Iterable, Optional, Protocol

from launchgrid.behaviors import ControlPress, DispatchOutcome, GridBehavior, PadPress
from launchgrid.devices import DeviceProfile, IncomingEvent, LedCommand
from launchgrid.midi import classify
from launchgrid.models import Section

from .renderer import FrameRenderer
from .settings import DEFAULT_SETTINGS, RuntimeSettings

logger = logging.getLogger(__name__)


class RunState(Enum):
    """Loop states: Idle → Dispatch → Render → Idle, with Tick while running."""

    IDLE = "idle"
    DISPATCH = "dispatch"
    TICK = "tick"
    RENDER = "render"
    QUIT = "quit"


class Transport(Protocol):
    """What the loop needs from a device connection."""

    def try_receive(self) -> Optional[IncomingEvent]: ...

    def send_all(self, commands: Iterable[LedCommand]) -> int: ...

class SurfaceLoop:
    """
    Single-threaded driver of the control surface.

    Each iteration:
    1. Tick the behavior if it is running, then wait `tick_interval`
    2. Render the full frame and send every LED
    3. Try to receive one message
    4. Sleep `idle_interval` if nothing arrived, otherwise dispatch it

    The loop ends only when the behavior answers a press with QUIT.
    """

    def __init__(
        self,
        transport: Transport,
        behavior: GridBehavior,
        profile: DeviceProfile,
        settings: RuntimeSettings = DEFAULT_SETTINGS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            transport: Device connection
            behavior: Application behavior to drive
            profile: Device profile (grid size, layout, palette)
            settings: Loop timing constants
            clock: Monotonic clock, replaceable for tests
            sleep: Sleep function, replaceable for tests
        """
        if (behavior.width, behavior.height) != (profile.width, profile.height):
            raise ValueError(
                f"Behavior grid {behavior.width}x{behavior.height} does not match "
                f"profile {profile.name} ({profile.width}x{profile.height})"
            )
        self.transport = transport
        self.behavior = behavior
        self.profile = profile
        self.settings = settings
        self.renderer = FrameRenderer(profile)
        self._layout = profile.layout
        self._clock = clock
        self._sleep = sleep
        self._last_render: Optional[float] = None
        self.state = RunState.IDLE
        self.frames_rendered = 0

    def _since_last_render(self) -> float:
        if self._last_render is None:
            return 0.0
        return self._clock() - self._last_render

    def _elapsed(self) -> float:
        now = self._clock()
        elapsed = 0.0 if self._last_render is None else now - self._last_render
        self._last_render = now
        return elapsed

    def render(self) -> int:
        """Render and send the full surface. Returns number of commands sent."""
        self.state = RunState.RENDER
        frame = self.behavior.render(self._elapsed())
        sent = self.transport.send_all(self.renderer.commands(frame))
        self.frames_rendered += 1
        return sent

    def dispatch(self, event: IncomingEvent) -> Optional[DispatchOutcome]:
        """
        Classify a raw message and hand it to the behavior.

        Returns:
            Outcome, or None if the message was filtered (release/non-button)
        """
        classified = classify(event)
        if classified is None:
            return None

        self.state = RunState.DISPATCH
        if classified.section is Section.CONTROL:
            outcome = self.behavior.receive(ControlPress(classified.key, classified.velocity))
        else:
            coord = self._layout.decode(classified.key)
            if coord is None:
                outcome = DispatchOutcome.UNBOUND
            else:
                outcome = self.behavior.receive(PadPress(coord, classified.velocity))

        if outcome is DispatchOutcome.UNBOUND:
            logger.debug(f"Unbound input: {classified.section.value} key {classified.key}")
        elif outcome is DispatchOutcome.REJECTED:
            logger.debug(f"Rejected input: {classified.section.value} key {classified.key}")
        return outcome

    def step(self) -> bool:
        """
        Run one loop iteration.

        Returns:
            False once the loop has reached QUIT
        """
        if self.state is RunState.QUIT:
            return False

        if self.behavior.running:
            self.state = RunState.TICK
            self.behavior.tick(self._since_last_render())
            self._sleep(self.settings.tick_interval)

        self.render()

        event = self.transport.try_receive()
        if event is None:
            self.state = RunState.IDLE
            self._sleep(self.settings.idle_interval)
            return True

        if self.dispatch(event) is DispatchOutcome.QUIT:
            logger.info("Quit requested")
            self.state = RunState.QUIT
            return False

        self.state = RunState.IDLE
        return True

    def run(self) -> None:
        """Run until the behavior requests QUIT."""
        logger.info(f"Surface loop started ({self.profile.display_name})")
        try:
            while self.step():
                pass
        finally:
            if self.settings.clear_on_exit:
                self.transport.send_all(self.renderer.blank())
            logger.info(f"Surface loop stopped after {self.frames_rendered} frames")
