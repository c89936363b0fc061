"""Translate frames into LED commands."""

import logging
from typing import Iterator

from launchgrid.devices import DeviceProfile, LedCommand
from launchgrid.models import Frame, Section

logger = logging.getLogger(__name__)


class FrameRenderer:
    """
    Stateless renderer from Frame to device LED commands.

    Every render emits a command for every cell and every control light;
    nothing is diffed against the previous frame.
    """

    def __init__(self, profile: DeviceProfile):
        self.profile = profile
        self.layout = profile.layout
        self.palette = profile.palette_table

    def commands(self, frame: Frame) -> Iterator[LedCommand]:
        """Yield LED commands for the full surface."""
        for coord, color in frame.cells():
            yield LedCommand(
                key=self.layout.to_device_key(coord.x, coord.y),
                section=Section.MAIN,
                color_code=self.palette.code_for(color),
            )
        for key in self.profile.control_keys:
            color = frame.controls.get(key)
            yield LedCommand(
                key=key,
                section=Section.CONTROL,
                color_code=self.palette.code_for(color) if color is not None else 0,
            )

    def blank(self) -> Iterator[LedCommand]:
        """Yield commands turning every LED off."""
        return self.commands(Frame(self.profile.width, self.profile.height))
