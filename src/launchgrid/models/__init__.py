"""Data models for launchgrid."""

from .color import Color
from .coordinate import GridCoordinate
from .enums import Brightness, Hue, LoopMode, PlayState, Section
from .frame import Frame

__all__ = [
    "Brightness",
    "Color",
    "Frame",
    "GridCoordinate",
    "Hue",
    "LoopMode",
    "PlayState",
    "Section",
]
