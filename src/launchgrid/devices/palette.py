"""Palette tables: abstract colors to single-byte LED velocity codes."""

from types import MappingProxyType
from typing import Mapping

from launchgrid.models import Brightness, Color, Hue

# Novation MK2 palette indices for the hues launchgrid uses.
NOVATION_MK2_TABLE: Mapping[tuple[Hue, Brightness], int] = MappingProxyType({
    (Hue.OFF, Brightness.LOW): 0,
    (Hue.OFF, Brightness.MEDIUM): 0,
    (Hue.OFF, Brightness.HIGH): 0,
    (Hue.GREEN, Brightness.LOW): 16,
    (Hue.GREEN, Brightness.MEDIUM): 18,
    (Hue.GREEN, Brightness.HIGH): 17,
    (Hue.BLUE, Brightness.LOW): 42,
    (Hue.BLUE, Brightness.MEDIUM): 40,
    (Hue.BLUE, Brightness.HIGH): 41,
    (Hue.RED, Brightness.LOW): 6,
    (Hue.RED, Brightness.MEDIUM): 60,
    (Hue.RED, Brightness.HIGH): 5,
    (Hue.PURPLE, Brightness.LOW): 50,
    (Hue.PURPLE, Brightness.MEDIUM): 48,
    (Hue.PURPLE, Brightness.HIGH): 49,
})

# Thresholds on a 0-10 magnitude scale (not on palette codes)
LOW_LEVEL_MAX = 3
HIGH_LEVEL_MIN = 7


class Palette:
    """A named, fixed (hue, brightness) → velocity code table."""

    def __init__(self, name: str, table: Mapping[tuple[Hue, Brightness], int]):
        missing = [
            (hue, brightness)
            for hue in Hue
            for brightness in Brightness
            if (hue, brightness) not in table
        ]
        if missing:
            raise ValueError(f"Palette '{name}' is missing entries: {missing}")
        self.name = name
        self._table = table

    def code(self, hue: Hue, brightness: Brightness) -> int:
        """Look up the velocity code for a hue and brightness."""
        if hue is Hue.OFF:
            return 0
        return self._table[(hue, brightness)]

    def code_for(self, color: Color) -> int:
        """Look up the velocity code for a Color."""
        return self.code(color.hue, color.brightness)

    def __repr__(self) -> str:
        return f"Palette({self.name!r})"


NOVATION_MK2 = Palette("novation-mk2", NOVATION_MK2_TABLE)

PALETTES: dict[str, Palette] = {
    NOVATION_MK2.name: NOVATION_MK2,
}


def to_color_code(hue: Hue, brightness: Brightness, palette: Palette = NOVATION_MK2) -> int:
    """
    Convert a hue and brightness to a device velocity code.

    Args:
        hue: LED hue
        brightness: Brightness tier
        palette: Palette table of the target firmware

    Returns:
        Velocity code in [0, 127]; OFF is always 0
    """
    return palette.code(hue, brightness)


def brightness_from_level(level: int) -> Brightness:
    """
    Classify a 0-10 magnitude into a brightness tier.

    Used when a raw intensity such as a volume percentage (divided by 10)
    should drive brightness. Not to be fed palette codes.

    Examples:
        3 → LOW, 5 → MEDIUM, 7 → HIGH
    """
    if level <= LOW_LEVEL_MAX:
        return Brightness.LOW
    if level >= HIGH_LEVEL_MIN:
        return Brightness.HIGH
    return Brightness.MEDIUM
