"""External collaborators: OS media player and volume control."""

from .media import LOOP_CYCLE, MediaController, PlayerctlMediaController
from .shell import CommandRunner, ShellCommandRunner
from .volume import AmixerVolumeController, VolumeController, parse_volume

__all__ = [
    "AmixerVolumeController",
    "CommandRunner",
    "LOOP_CYCLE",
    "MediaController",
    "PlayerctlMediaController",
    "ShellCommandRunner",
    "VolumeController",
    "parse_volume",
]
