"""Device profiles: the per-firmware facts chosen once at startup.

A profile bundles grid size, note numbering scheme, palette and the
exact MIDI port name. Profiles are fixed constants; there is no config
file.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from launchgrid.exceptions import ProfileNotFoundError

from .layout import FullPadLayout, NoteLayout, SideColumnLayout
from .palette import PALETTES, Palette


class Numbering(str, Enum):
    """Note numbering schemes."""

    FULL_PAD = "full_pad"
    SIDE_COLUMN = "side_column"


class DeviceProfile(BaseModel):
    """Static description of one control surface variant."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Profile identifier used on the command line")
    display_name: str = Field(description="Human-readable device name")
    device_name: str = Field(description="Exact MIDI port name of the device")
    width: int = Field(ge=1, le=10, description="Grid columns")
    height: int = Field(ge=1, le=10, description="Grid rows")
    numbering: Numbering = Field(description="Note numbering scheme")
    base_offset: int = Field(
        default=FullPadLayout.DEFAULT_BASE_OFFSET,
        ge=0,
        le=127,
        description="Key of the bottom-left pad (full-pad numbering only)",
    )
    palette: str = Field(default="novation-mk2", description="Palette table name")
    control_keys: tuple[int, ...] = Field(
        default=tuple(range(104, 112)),
        description="Control-change numbers of the top button row",
    )

    @model_validator(mode="after")
    def check_layout_fits(self) -> "DeviceProfile":
        """Every pad must map to its own MIDI note in 0-127."""
        if self.numbering is Numbering.SIDE_COLUMN and self.width >= SideColumnLayout.ROW_STRIDE:
            raise ValueError(
                f"Side-column numbering supports at most {SideColumnLayout.ROW_STRIDE - 1} "
                f"columns, got {self.width}"
            )
        top_key = self.layout.to_device_key(self.width - 1, self.height - 1)
        if top_key > 127:
            raise ValueError(f"Top-right pad would use note {top_key}, above 127")
        return self

    @property
    def layout(self) -> NoteLayout:
        """Build the note layout for this profile."""
        if self.numbering is Numbering.FULL_PAD:
            return FullPadLayout(self.width, self.height, self.base_offset)
        return SideColumnLayout(self.width, self.height)

    @property
    def palette_table(self) -> Palette:
        """Resolve the palette table for this profile."""
        return PALETTES[self.palette]

    def with_device_name(self, device_name: str) -> "DeviceProfile":
        """Copy of this profile bound to a different port name."""
        return self.model_copy(update={"device_name": device_name})


LAUNCHPAD_MK2 = DeviceProfile(
    name="mk2",
    display_name="Launchpad MK2",
    device_name="Launchpad MK2:Launchpad MK2 MIDI 1 20:0",
    width=9,
    height=8,
    numbering=Numbering.FULL_PAD,
)

LAUNCHPAD_MK2_SIDE = DeviceProfile(
    name="mk2-side",
    display_name="Launchpad MK2 (side column layout)",
    device_name="Launchpad MK2:Launchpad MK2 MIDI 1 20:0",
    width=8,
    height=8,
    numbering=Numbering.SIDE_COLUMN,
)

PROFILES: dict[str, DeviceProfile] = {
    profile.name: profile for profile in (LAUNCHPAD_MK2, LAUNCHPAD_MK2_SIDE)
}

DEFAULT_PROFILE = LAUNCHPAD_MK2.name


def get_profile(name: str) -> DeviceProfile:
    """
    Look up a registered profile.

    Raises:
        ProfileNotFoundError: If no profile has that name
    """
    try:
        return PROFILES[name]
    except KeyError:
        raise ProfileNotFoundError(name, sorted(PROFILES)) from None
