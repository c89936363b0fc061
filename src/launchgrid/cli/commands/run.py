"""Run commands - drive the surface with a behavior."""

import logging
from typing import Callable

import click

from launchgrid.behaviors import AutomatonBehavior, GridBehavior, MediaPanelBehavior
from launchgrid.core import DEFAULT_SETTINGS, SurfaceLoop
from launchgrid.devices import DeviceProfile
from launchgrid.exceptions import DeviceConnectionError, ErrorContext, LaunchGridError
from launchgrid.midi import MidiTransport
from launchgrid.services import AmixerVolumeController, PlayerctlMediaController

from .options import device_option, fail, profile_option, resolve_profile

logger = logging.getLogger(__name__)


def run_surface(profile: DeviceProfile, make_behavior: Callable[[DeviceProfile], GridBehavior]) -> None:
    """
    Connect to the device and run the loop until quit.

    Connection failures and loop errors are reported as an ERROR line
    and exit with status 1.
    """
    settings = DEFAULT_SETTINGS
    try:
        with ErrorContext(f"connect to {profile.device_name}", logger_instance=logger):
            transport = MidiTransport.connect(
                settings.client_name,
                profile.device_name,
                settings.in_port_label,
                settings.out_port_label,
            )
    except DeviceConnectionError as e:
        fail(e)

    with transport:
        loop = SurfaceLoop(transport, make_behavior(profile), profile, settings)
        try:
            loop.run()
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            click.echo("\nShutting down...", err=True)
        except Exception as e:
            logger.exception("Error running surface loop")
            fail(e)


@click.command()
@profile_option
@device_option
@click.option(
    '--lock-while-running',
    is_flag=True,
    help='Ignore pad toggles once the simulation is running'
)
def life(profile: str, device: str, lock_while_running: bool):
    """
    Play Conway's Game of Life on the pads.

    Press pads to toggle cells. The first top-row button starts the
    simulation, the second one quits.
    """
    try:
        device_profile = resolve_profile(profile, device)
    except LaunchGridError as e:
        fail(e)

    def make_behavior(p: DeviceProfile) -> GridBehavior:
        return AutomatonBehavior(
            p.width,
            p.height,
            allow_toggle_while_running=not lock_while_running,
        )

    run_surface(device_profile, make_behavior)
    click.echo("Thanks for playing!")


@click.command()
@profile_option
@device_option
def media(profile: str, device: str):
    """
    Media control panel (playerctl + amixer).

    \b
    Columns 0/1 show left/right volume; press a pad to set it.
    Top row: play/pause, mute, loop mode, previous, next,
             volume down, volume up, quit.
    """
    try:
        device_profile = resolve_profile(profile, device)
    except LaunchGridError as e:
        fail(e)

    def make_behavior(p: DeviceProfile) -> GridBehavior:
        return MediaPanelBehavior(
            p.width,
            p.height,
            volume=AmixerVolumeController(),
            media=PlayerctlMediaController(),
        )

    run_surface(device_profile, make_behavior)
