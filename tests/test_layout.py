"""Unit tests for note layouts."""

import pytest

from launchgrid.devices import FullPadLayout, SideColumnLayout
from launchgrid.models import GridCoordinate


@pytest.mark.unit
class TestFullPadLayout:
    """Test full-pad numbering (row stride width + 1)."""

    @pytest.fixture
    def layout(self):
        return FullPadLayout(9, 8)

    def test_corners(self, layout):
        """Test corner keys on a 9x8 grid."""
        assert layout.to_device_key(0, 0) == 11
        assert layout.to_device_key(8, 0) == 19
        assert layout.to_device_key(0, 7) == 81
        assert layout.to_device_key(8, 7) == 89

    def test_row_offset(self, layout):
        """Test that each row starts width + 1 keys after the previous."""
        assert layout.to_device_key(0, 1) - layout.to_device_key(0, 0) == 10

    def test_eight_wide_stride(self):
        """Test that an 8-wide grid uses a stride of 9."""
        layout = FullPadLayout(8, 8)
        assert layout.to_device_key(0, 1) == 20
        assert layout.to_device_key(7, 7) == 11 + 7 + 7 + 56

    def test_custom_base_offset(self):
        """Test that the base offset shifts every key."""
        layout = FullPadLayout(9, 8, base_offset=0)
        assert layout.to_device_key(0, 0) == 0
        assert layout.to_grid_coordinate(10) == (0, 1)

    def test_to_grid_coordinate(self, layout):
        """Test known keys decode to expected coordinates."""
        assert layout.to_grid_coordinate(11) == (0, 0)
        assert layout.to_grid_coordinate(44) == (3, 3)
        assert layout.to_grid_coordinate(89) == (8, 7)

    def test_decode_gap_key(self):
        """Test that the unused key between rows is not a pad."""
        layout = FullPadLayout(8, 8)
        # 8-wide: bottom row is 11-18, key 19 is the gap
        assert layout.decode(19) is None
        assert layout.decode(20) == GridCoordinate(0, 1)

    def test_decode_out_of_range(self, layout):
        """Test keys below and above the grid."""
        assert layout.decode(0) is None
        assert layout.decode(10) is None
        assert layout.decode(90) is None
        assert layout.decode(104) is None
        assert layout.decode(200) is None


@pytest.mark.unit
class TestSideColumnLayout:
    """Test side-column numbering (decade stride)."""

    @pytest.fixture
    def layout(self):
        return SideColumnLayout(8, 8)

    def test_to_device_key(self, layout):
        """Test key = y * 10 + 1 + x."""
        assert layout.to_device_key(0, 0) == 1
        assert layout.to_device_key(7, 0) == 8
        assert layout.to_device_key(0, 3) == 31
        assert layout.to_device_key(4, 6) == 65

    def test_stride_ignores_width(self):
        """Test that the row stride stays 10 for any width."""
        assert SideColumnLayout(9, 8).to_device_key(0, 1) == 11
        assert SideColumnLayout(4, 8).to_device_key(0, 1) == 11

    def test_to_grid_coordinate(self, layout):
        """Test x = key mod 10 - 1, y = key // 10."""
        assert layout.to_grid_coordinate(1) == (0, 0)
        assert layout.to_grid_coordinate(65) == (4, 6)
        assert layout.to_grid_coordinate(78) == (7, 7)

    def test_decode_invalid(self, layout):
        """Test keys that are not pads of an 8x8 grid."""
        assert layout.decode(0) is None  # column -1
        assert layout.decode(10) is None  # column -1
        assert layout.decode(9) is None  # column 8
        assert layout.decode(81) is None  # row 8


@pytest.mark.unit
@pytest.mark.parametrize("layout_cls", [FullPadLayout, SideColumnLayout])
@pytest.mark.parametrize("width,height", [(8, 8), (9, 8)])
def test_round_trip(layout_cls, width, height):
    """Test that every grid position survives encode then decode."""
    layout = layout_cls(width, height)
    for y in range(height):
        for x in range(width):
            key = layout.to_device_key(x, y)
            assert 0 <= key <= 127
            assert layout.to_grid_coordinate(key) == (x, y)
            assert layout.decode(key) == (x, y)


@pytest.mark.unit
@pytest.mark.parametrize("layout_cls", [FullPadLayout, SideColumnLayout])
def test_keys_are_unique(layout_cls):
    """Test that no two pads share a key."""
    layout = layout_cls(9, 8)
    keys = [layout.to_device_key(x, y) for y in range(8) for x in range(9)]
    assert len(keys) == 72
    assert len(set(keys)) == 72
