"""Enumerations shared across launchgrid."""

from enum import Enum


class Section(str, Enum):
    """Logical button zones, distinguished by the MIDI status byte."""

    CONTROL = "control"  # 0xB0 class (control change), top row buttons
    MAIN = "main"  # 0x90 class (note on), pad grid


class Hue(str, Enum):
    """LED hues supported by the palette tables."""

    OFF = "off"
    GREEN = "green"
    BLUE = "blue"
    RED = "red"
    PURPLE = "purple"


class Brightness(str, Enum):
    """LED brightness tiers."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PlayState(str, Enum):
    """Aggregate media player state."""

    PLAYING = "Playing"
    STOPPED = "Stopped"


class LoopMode(str, Enum):
    """Media player loop modes, values match playerctl's vocabulary."""

    NONE = "None"
    TRACK = "Track"
    PLAYLIST = "Playlist"
