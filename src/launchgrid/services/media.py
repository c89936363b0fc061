"""Media player control via playerctl."""

import logging
from typing import Optional, Protocol

from launchgrid.models import LoopMode, PlayState

from .shell import CommandRunner, ShellCommandRunner

logger = logging.getLogger(__name__)

# None → Playlist → Track → None
LOOP_CYCLE: dict[LoopMode, LoopMode] = {
    LoopMode.NONE: LoopMode.PLAYLIST,
    LoopMode.PLAYLIST: LoopMode.TRACK,
    LoopMode.TRACK: LoopMode.NONE,
}


class MediaController(Protocol):
    """Capability set for controlling media playback."""

    def get_play_state(self) -> PlayState: ...

    def toggle_play_pause(self) -> None: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def get_loop_mode(self) -> LoopMode: ...

    def set_loop_mode(self, mode: LoopMode) -> None: ...

    def cycle_loop_mode(self) -> LoopMode: ...

    def next_track(self) -> None: ...

    def previous_track(self) -> None: ...


class PlayerctlMediaController:
    """
    MediaController backed by `playerctl -a`, acting on all players.

    Unrecognized output maps to STOPPED / NONE.
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        self._runner = runner or ShellCommandRunner()

    def _playerctl(self, *args: str) -> str:
        return self._runner.run(["playerctl", "-a", *args])

    def get_play_state(self) -> PlayState:
        """PLAYING if any player reports "Playing"."""
        output = self._playerctl("status")
        if any(line.strip() == PlayState.PLAYING.value for line in output.split("\n")):
            return PlayState.PLAYING
        return PlayState.STOPPED

    def toggle_play_pause(self) -> None:
        self._playerctl("play-pause")

    def play(self) -> None:
        self._playerctl("play")

    def pause(self) -> None:
        self._playerctl("pause")

    def get_loop_mode(self) -> LoopMode:
        output = self._playerctl("loop")
        lines = [line.strip() for line in output.split("\n") if line.strip()]
        if not lines:
            return LoopMode.NONE
        try:
            return LoopMode(lines[0])
        except ValueError:
            logger.debug(f"Unknown loop mode from playerctl: {lines[0]!r}")
            return LoopMode.NONE

    def set_loop_mode(self, mode: LoopMode) -> None:
        self._playerctl("loop", mode.value)

    def cycle_loop_mode(self) -> LoopMode:
        """
        Advance to the next loop mode.

        Returns:
            The mode that was set
        """
        new_mode = LOOP_CYCLE[self.get_loop_mode()]
        self.set_loop_mode(new_mode)
        return new_mode

    def next_track(self) -> None:
        self._playerctl("next")

    def previous_track(self) -> None:
        self._playerctl("previous")
