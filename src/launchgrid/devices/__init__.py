"""Device descriptions: note layouts, palettes, profiles and wire messages."""

from .layout import FullPadLayout, NoteLayout, SideColumnLayout
from .palette import NOVATION_MK2, PALETTES, Palette, brightness_from_level, to_color_code
from .profile import (
    DEFAULT_PROFILE,
    LAUNCHPAD_MK2,
    LAUNCHPAD_MK2_SIDE,
    PROFILES,
    DeviceProfile,
    Numbering,
    get_profile,
)
from .protocols import IncomingEvent, LedCommand

__all__ = [
    "DEFAULT_PROFILE",
    "DeviceProfile",
    "FullPadLayout",
    "IncomingEvent",
    "LAUNCHPAD_MK2",
    "LAUNCHPAD_MK2_SIDE",
    "LedCommand",
    "NOVATION_MK2",
    "NoteLayout",
    "Numbering",
    "PALETTES",
    "PROFILES",
    "Palette",
    "SideColumnLayout",
    "brightness_from_level",
    "get_profile",
    "to_color_code",
]
