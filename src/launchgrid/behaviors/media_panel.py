"""Media control panel: volume bars and transport buttons."""

import logging
from typing import Callable

from launchgrid.devices.palette import brightness_from_level
from launchgrid.models import Brightness, Color, Frame, Hue, LoopMode, PlayState
from launchgrid.services import MediaController, VolumeController

from .base import ControlPress, DispatchOutcome, GridBehavior, PadPress

logger = logging.getLogger(__name__)

# Control row bindings
PLAY_PAUSE_KEY = 104
MUTE_KEY = 105
LOOP_KEY = 106
PREVIOUS_KEY = 107
NEXT_KEY = 108
VOLUME_DOWN_KEY = 109
VOLUME_UP_KEY = 110
QUIT_KEY = 111

LEFT_BAR_COLUMN = 0
RIGHT_BAR_COLUMN = 1

NUDGE_STEP = 5
PERCENT_PER_ROW = 10

LOOP_COLORS: dict[LoopMode, Color] = {
    LoopMode.NONE: Color.off(),
    LoopMode.PLAYLIST: Color(hue=Hue.BLUE, brightness=Brightness.HIGH),
    LoopMode.TRACK: Color(hue=Hue.PURPLE, brightness=Brightness.HIGH),
}
PLAYING_COLOR = Color(hue=Hue.GREEN, brightness=Brightness.HIGH)
STOPPED_COLOR = Color(hue=Hue.RED, brightness=Brightness.MEDIUM)
MUTED_COLOR = Color(hue=Hue.RED, brightness=Brightness.HIGH)
NUDGE_COLOR = Color(hue=Hue.GREEN, brightness=Brightness.LOW)
TRACK_COLOR = Color(hue=Hue.BLUE, brightness=Brightness.LOW)


def row_to_volume(row: int) -> int:
    """Volume selected by pressing a bar pad: row 0 → 10%, row 7 → 80%."""
    return (row + 1) * PERCENT_PER_ROW


def bar_height(percent: int, height: int) -> int:
    """Number of lit rows for a volume percentage."""
    return min(percent // PERCENT_PER_ROW, height)


class MediaPanelBehavior(GridBehavior):
    """
    Media control surface.

    Holds no state of its own: every render re-reads volume and playback
    from the controllers, and every press is forwarded to them.

    Layout:
        columns 0/1: left/right volume bars, press a pad to set volume
        control row: play/pause, mute indicator, loop mode, previous,
                     next, volume down, volume up, quit
    """

    def __init__(
        self,
        width: int,
        height: int,
        volume: VolumeController,
        media: MediaController,
        nudge_step: int = NUDGE_STEP,
    ):
        super().__init__(width, height)
        self.volume = volume
        self.media = media
        self.nudge_step = nudge_step
        self._actions: dict[int, Callable[[], None]] = {
            PLAY_PAUSE_KEY: self.media.toggle_play_pause,
            LOOP_KEY: self._cycle_loop,
            PREVIOUS_KEY: self.media.previous_track,
            NEXT_KEY: self.media.next_track,
            VOLUME_DOWN_KEY: lambda: self.volume.nudge(self.nudge_step, up=False),
            VOLUME_UP_KEY: lambda: self.volume.nudge(self.nudge_step, up=True),
        }

    def _cycle_loop(self) -> None:
        mode = self.media.cycle_loop_mode()
        logger.info(f"Loop mode: {mode.value}")

    def on_pad(self, press: PadPress) -> DispatchOutcome:
        x, y = press.coordinate
        if x not in (LEFT_BAR_COLUMN, RIGHT_BAR_COLUMN):
            return DispatchOutcome.UNBOUND

        percent = row_to_volume(y)
        logger.debug(f"Set volume to {percent}%")
        self.volume.set_volume(percent)
        return DispatchOutcome.HANDLED

    def on_control(self, press: ControlPress) -> DispatchOutcome:
        if press.key == QUIT_KEY:
            return DispatchOutcome.QUIT

        action = self._actions.get(press.key)
        if action is None:
            return DispatchOutcome.UNBOUND

        action()
        return DispatchOutcome.HANDLED

    def render(self, elapsed: float) -> Frame:
        frame = self.new_frame()

        left, right = self.volume.get_volume()
        self._draw_bar(frame, LEFT_BAR_COLUMN, left)
        self._draw_bar(frame, RIGHT_BAR_COLUMN, right)

        playing = self.media.get_play_state() is PlayState.PLAYING
        frame.set_control(PLAY_PAUSE_KEY, PLAYING_COLOR if playing else STOPPED_COLOR)
        frame.set_control(MUTE_KEY, MUTED_COLOR if left == 0 and right == 0 else Color.off())
        frame.set_control(LOOP_KEY, LOOP_COLORS[self.media.get_loop_mode()])
        frame.set_control(PREVIOUS_KEY, TRACK_COLOR)
        frame.set_control(NEXT_KEY, TRACK_COLOR)
        frame.set_control(VOLUME_DOWN_KEY, NUDGE_COLOR)
        frame.set_control(VOLUME_UP_KEY, NUDGE_COLOR)
        return frame

    def _draw_bar(self, frame: Frame, column: int, percent: int) -> None:
        if column >= self.width:
            return
        color = Color(hue=Hue.GREEN, brightness=brightness_from_level(percent // PERCENT_PER_ROW))
        for y in range(bar_height(percent, self.height)):
            frame.set_cell(column, y, color)
