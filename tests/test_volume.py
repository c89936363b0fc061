"""Tests for amixer volume control."""

import pytest

from launchgrid.services import AmixerVolumeController, parse_volume

AMIXER_OUTPUT = """Simple mixer control 'Master',0
  Capabilities: pvolume pswitch pswitch-joined
  Playback channels: Front Left - Front Right
  Limits: Playback 0 - 65536
  Mono:
  Front Left: Playback 42597 [65%] [on]
  Front Right: Playback 39321 [60%] [on]
"""


@pytest.mark.unit
class TestParseVolume:
    """Test parsing of `amixer sget` output."""

    def test_stereo(self):
        assert parse_volume(AMIXER_OUTPUT) == (65, 60)

    def test_empty_output(self):
        """Test missing lines degrade to (0, 0)."""
        assert parse_volume("") == (0, 0)

    def test_no_percentage(self):
        """Test lines without [NN%] degrade to (0, 0)."""
        broken = AMIXER_OUTPUT.replace("[60%]", "[muted]")
        assert parse_volume(broken) == (0, 0)

    def test_non_numeric(self):
        broken = AMIXER_OUTPUT.replace("[65%]", "[abc%]")
        assert parse_volume(broken) == (0, 0)

    def test_out_of_range(self):
        broken = AMIXER_OUTPUT.replace("[65%]", "[300%]")
        assert parse_volume(broken) == (0, 0)


@pytest.mark.unit
class TestAmixerVolumeController:
    """Test the commands issued to amixer."""

    @pytest.fixture
    def runner(self, make_runner):
        return make_runner({("sget", "Master"): AMIXER_OUTPUT})

    @pytest.fixture
    def controller(self, runner):
        return AmixerVolumeController(runner)

    def test_get_volume(self, controller, runner):
        assert controller.get_volume() == (65, 60)
        assert runner.calls == [["amixer", "-D", "pulse", "sget", "Master"]]

    def test_set_volume(self, controller, runner):
        """Test an in-range value issues exactly one set call."""
        controller.set_volume(70)
        assert runner.calls == [["amixer", "-D", "pulse", "sset", "Master", "70%"]]

    def test_set_volume_above_100_is_noop(self, controller, runner):
        """Test values above 100 never reach amixer."""
        controller.set_volume(150)
        assert runner.calls == []

    def test_set_volume_negative_is_noop(self, controller, runner):
        controller.set_volume(-5)
        assert runner.calls == []

    def test_set_volume_bounds(self, controller, runner):
        controller.set_volume(0)
        controller.set_volume(100)
        assert [call[-1] for call in runner.calls] == ["0%", "100%"]

    def test_nudge_up(self, controller, runner):
        controller.nudge(5, up=True)
        assert runner.calls[-1][-1] == "5%+"

    def test_nudge_down(self, controller, runner):
        controller.nudge(5, up=False)
        assert runner.calls[-1][-1] == "5%-"

    def test_missing_tool(self, make_runner):
        """Test a runner returning nothing (amixer not installed) reads as 0/0."""
        controller = AmixerVolumeController(make_runner())
        assert controller.get_volume() == (0, 0)
