"""Tests for device profiles."""

import pytest
from pydantic import ValidationError

from launchgrid.devices import (
    DEFAULT_PROFILE,
    LAUNCHPAD_MK2,
    DeviceProfile,
    FullPadLayout,
    Numbering,
    SideColumnLayout,
    get_profile,
)
from launchgrid.exceptions import ProfileNotFoundError


@pytest.mark.unit
class TestProfiles:

    def test_default_profile(self):
        profile = get_profile(DEFAULT_PROFILE)
        assert profile is LAUNCHPAD_MK2
        assert (profile.width, profile.height) == (9, 8)
        assert profile.device_name == "Launchpad MK2:Launchpad MK2 MIDI 1 20:0"

    def test_layouts(self):
        assert isinstance(get_profile("mk2").layout, FullPadLayout)
        assert isinstance(get_profile("mk2-side").layout, SideColumnLayout)

    def test_control_keys(self):
        assert get_profile("mk2").control_keys == tuple(range(104, 112))

    def test_unknown_profile(self):
        with pytest.raises(ProfileNotFoundError) as exc_info:
            get_profile("mk9")
        assert "mk9" in str(exc_info.value)
        assert "mk2" in exc_info.value.recovery_hint

    def test_with_device_name(self):
        custom = LAUNCHPAD_MK2.with_device_name("Launchpad MK2 MIDI 1")
        assert custom.device_name == "Launchpad MK2 MIDI 1"
        assert custom.width == LAUNCHPAD_MK2.width
        assert LAUNCHPAD_MK2.device_name != custom.device_name

    def test_profiles_are_frozen(self):
        with pytest.raises(ValidationError):
            LAUNCHPAD_MK2.width = 4


def make_profile(**overrides):
    fields = dict(
        name="custom",
        display_name="Custom grid",
        device_name="Custom",
        width=8,
        height=8,
        numbering=Numbering.SIDE_COLUMN,
    )
    fields.update(overrides)
    return DeviceProfile(**fields)


@pytest.mark.unit
class TestProfileValidation:
    """Test that profiles only describe grids their numbering can address."""

    def test_side_column_rejects_ten_columns(self):
        """Test a tenth column would collide with the next row's keys."""
        with pytest.raises(ValidationError, match="at most 9 columns"):
            make_profile(width=10)

    def test_side_column_nine_columns_round_trip(self):
        layout = make_profile(width=9, height=9).layout
        for y in range(9):
            for x in range(9):
                assert layout.decode(layout.to_device_key(x, y)) == (x, y)

    def test_full_pad_allows_ten_columns(self):
        layout = make_profile(width=10, height=8, numbering=Numbering.FULL_PAD).layout
        assert layout.decode(layout.to_device_key(9, 0)) == (9, 0)
        assert layout.decode(layout.to_device_key(9, 7)) == (9, 7)

    def test_full_pad_rejects_notes_above_127(self):
        with pytest.raises(ValidationError, match="above 127"):
            make_profile(numbering=Numbering.FULL_PAD, width=9, height=8, base_offset=100)
