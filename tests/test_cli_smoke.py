"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and don't crash. Uses Click's
CliRunner with the MIDI layer patched out.
"""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from launchgrid import __version__
from launchgrid.cli.main import cli
from launchgrid.devices import IncomingEvent
from launchgrid.exceptions import DevicePortNotFoundError


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def quitting_transport():
    """Transport double whose first message is the quit button."""
    transport = MagicMock()
    transport.try_receive.side_effect = [IncomingEvent(status=0xB0, key=105, velocity=127)]
    transport.send.return_value = True
    return transport


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Game of Life' in result.output
        assert 'life' in result.output
        assert 'media' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert f'launchgrid, version {__version__}' in result.output

    @pytest.mark.parametrize("command", [
        ['life', '--help'],
        ['media', '--help'],
        ['midi', '--help'],
        ['midi', 'list', '--help'],
        ['midi', 'monitor', '--help'],
    ])
    def test_subcommand_help(self, runner, command):
        result = runner.invoke(cli, command)
        assert result.exit_code == 0
        assert '--help' in result.output

    def test_profile_choices(self, runner):
        result = runner.invoke(cli, ['life', '--help'])
        assert 'mk2-side' in result.output
        assert '--lock-while-running' in result.output

    def test_invalid_profile(self, runner):
        result = runner.invoke(cli, ['life', '--profile', 'nope'])
        assert result.exit_code == 2


@pytest.mark.integration
class TestCLIDevice:
    """Test commands against a patched MIDI layer."""

    def test_life_device_missing(self, runner):
        """Test a missing device exits with status 1 and one error line."""
        error = DevicePortNotFoundError("Launchpad MK2:Launchpad MK2 MIDI 1 20:0", "input")
        with patch('launchgrid.cli.commands.run.MidiTransport.connect', side_effect=error):
            result = runner.invoke(cli, ['life'])

        assert result.exit_code == 1
        assert 'ERROR:' in result.output
        assert 'Launchpad MK2' in result.output
        assert "Suggestion: Run 'launchgrid midi list'" in result.output

    def test_life_quit(self, runner, quitting_transport):
        with patch(
            'launchgrid.cli.commands.run.MidiTransport.connect',
            return_value=quitting_transport,
        ) as connect:
            result = runner.invoke(cli, ['life'])

        assert result.exit_code == 0
        assert 'Thanks for playing!' in result.output
        assert connect.call_args.args[1] == "Launchpad MK2:Launchpad MK2 MIDI 1 20:0"
        quitting_transport.__exit__.assert_called_once()

    def test_loop_error_exits(self, runner):
        """Test an unexpected loop failure is reported without a traceback."""
        transport = MagicMock()
        transport.try_receive.side_effect = RuntimeError("device exploded")
        with patch('launchgrid.cli.commands.run.MidiTransport.connect', return_value=transport):
            result = runner.invoke(cli, ['life'])

        assert result.exit_code == 1
        assert 'ERROR: Unexpected error: device exploded' in result.output
        assert 'Run with --debug for details.' in result.output
        transport.__exit__.assert_called_once()

    def test_device_override(self, runner, quitting_transport):
        with patch(
            'launchgrid.cli.commands.run.MidiTransport.connect',
            return_value=quitting_transport,
        ) as connect:
            runner.invoke(cli, ['life', '--device', 'Custom Port'])

        assert connect.call_args.args[1] == "Custom Port"

    def test_media_device_missing(self, runner):
        error = DevicePortNotFoundError("Launchpad MK2:Launchpad MK2 MIDI 1 20:0", "output")
        with patch('launchgrid.cli.commands.run.MidiTransport.connect', side_effect=error):
            result = runner.invoke(cli, ['media', '-p', 'mk2-side'])

        assert result.exit_code == 1
        assert 'ERROR:' in result.output

    def test_midi_list(self, runner):
        with patch('launchgrid.midi.transport.mido') as mock_mido:
            mock_mido.get_input_names.return_value = ['Launchpad MK2 In']
            mock_mido.get_output_names.return_value = []
            result = runner.invoke(cli, ['midi', 'list'])

        assert result.exit_code == 0
        assert '[0] Launchpad MK2 In' in result.output
        assert 'No MIDI output ports found.' in result.output

    def test_midi_list_backend_error(self, runner):
        with patch('launchgrid.midi.transport.mido') as mock_mido:
            mock_mido.get_input_names.side_effect = ImportError("No module named 'rtmidi'")
            result = runner.invoke(cli, ['midi', 'list'])

        assert result.exit_code == 1
        assert 'ERROR:' in result.output
