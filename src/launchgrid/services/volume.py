"""System volume control via amixer."""

import logging
import re
from typing import Optional, Protocol

from .shell import CommandRunner, ShellCommandRunner

logger = logging.getLogger(__name__)

# "  Front Left: Playback 42597 [65%] [on]"
PERCENT_PATTERN = re.compile(r"\[(\d+)%\]")

# Line indices of the left/right channel in `amixer sget Master` output
LEFT_CHANNEL_LINE = 5
RIGHT_CHANNEL_LINE = 6

MAX_VOLUME = 100


class VolumeController(Protocol):
    """Capability set for reading and changing the master volume."""

    def get_volume(self) -> tuple[int, int]:
        """Current (left, right) volume in percent."""
        ...

    def set_volume(self, percent: int) -> None:
        """Set absolute volume; values outside 0-100 are ignored."""
        ...

    def nudge(self, step: int, up: bool) -> None:
        """Change volume by a relative step."""
        ...


class AmixerVolumeController:
    """
    VolumeController backed by `amixer`.

    Output of amixer is not a stable format, so every parse failure
    degrades to (0, 0) instead of raising.
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        device: str = "pulse",
        control: str = "Master",
    ):
        """
        Args:
            runner: Command runner (defaults to a real shell runner)
            device: amixer device (-D)
            control: Mixer control name
        """
        self._runner = runner or ShellCommandRunner()
        self.device = device
        self.control = control

    def _amixer(self, *args: str) -> str:
        return self._runner.run(["amixer", "-D", self.device, *args])

    def get_volume(self) -> tuple[int, int]:
        output = self._amixer("sget", self.control)
        return parse_volume(output)

    def set_volume(self, percent: int) -> None:
        if not 0 <= percent <= MAX_VOLUME:
            logger.warning(f"Ignoring out of range volume: {percent}")
            return
        self._amixer("sset", self.control, f"{percent}%")

    def nudge(self, step: int, up: bool) -> None:
        direction = "+" if up else "-"
        self._amixer("sset", self.control, f"{step}%{direction}")


def parse_volume(output: str) -> tuple[int, int]:
    """
    Extract (left, right) percentages from `amixer sget` output.

    Returns:
        (left, right), or (0, 0) if the output does not have the expected shape
    """
    lines = output.split("\n")
    try:
        left = _parse_percent(lines[LEFT_CHANNEL_LINE])
        right = _parse_percent(lines[RIGHT_CHANNEL_LINE])
    except (IndexError, ValueError) as e:
        logger.debug(f"Could not parse amixer output: {e}")
        return (0, 0)
    return (left, right)


def _parse_percent(line: str) -> int:
    match = PERCENT_PATTERN.search(line)
    if match is None:
        raise ValueError(f"no percentage in {line!r}")
    value = int(match.group(1))
    if value > MAX_VOLUME:
        raise ValueError(f"percentage out of range: {value}")
    return value
