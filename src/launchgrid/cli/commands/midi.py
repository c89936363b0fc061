"""MIDI command implementations."""

import logging
import time
from datetime import datetime

import click

from launchgrid.exceptions import LaunchGridError
from launchgrid.core import DEFAULT_SETTINGS
from launchgrid.midi import MidiTransport, classify
from launchgrid.models import Section

from .options import device_option, fail, profile_option, resolve_profile

logger = logging.getLogger(__name__)


@click.group(name="midi")
def midi_group():
    """MIDI device commands."""
    pass


@midi_group.command(name="list")
def list_midi():
    """List available MIDI ports."""
    try:
        ports = MidiTransport.list_ports()
    except LaunchGridError as e:
        fail(e)

    click.echo("MIDI Input Ports:\n")
    if not ports["input"]:
        click.echo("  No MIDI input ports found.")
    else:
        for i, port in enumerate(ports["input"]):
            click.echo(f"  [{i}] {port}")

    click.echo("\nMIDI Output Ports:\n")
    if not ports["output"]:
        click.echo("  No MIDI output ports found.")
    else:
        for i, port in enumerate(ports["output"]):
            click.echo(f"  [{i}] {port}")


@midi_group.command(name="monitor")
@profile_option
@device_option
def monitor_midi(profile: str, device: str):
    """
    Print button presses from the device.

    Shows the section, key and decoded grid position of every press.
    Useful for checking which profile matches your device.

    Press Ctrl+C to stop monitoring.
    """
    settings = DEFAULT_SETTINGS
    try:
        device_profile = resolve_profile(profile, device)
        transport = MidiTransport.connect(
            settings.client_name,
            device_profile.device_name,
            settings.in_port_label,
            settings.out_port_label,
        )
    except LaunchGridError as e:
        fail(e)

    layout = device_profile.layout
    click.echo(f"Monitoring {device_profile.device_name}\nPress Ctrl+C to stop\n")

    with transport:
        try:
            while True:
                event = transport.try_receive()
                if event is None:
                    time.sleep(settings.idle_interval)
                    continue

                pressed = classify(event)
                if pressed is None:
                    continue

                timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
                if pressed.section is Section.MAIN:
                    coord = layout.decode(pressed.key)
                    where = f"({coord.x}, {coord.y})" if coord else "outside grid"
                else:
                    where = "control row"
                click.echo(
                    f"[{timestamp}] {pressed.section.value:<7} key={pressed.key:<3} "
                    f"velocity={pressed.velocity:<3} {where}"
                )
        except KeyboardInterrupt:
            click.echo("\n\nStopping monitor...")
