"""Options and helpers shared by device commands."""

import sys
from typing import Optional

import click

from launchgrid.devices import DEFAULT_PROFILE, PROFILES, DeviceProfile, get_profile
from launchgrid.exceptions import LaunchGridError, format_error_for_display

profile_option = click.option(
    '--profile',
    '-p',
    type=click.Choice(sorted(PROFILES), case_sensitive=False),
    default=DEFAULT_PROFILE,
    show_default=True,
    help='Device profile (grid size, note layout, palette)'
)

device_option = click.option(
    '--device',
    '-d',
    type=str,
    default=None,
    help="Exact MIDI port name (defaults to the profile's port name)"
)


def resolve_profile(name: str, device: Optional[str]) -> DeviceProfile:
    """Look up a profile and optionally bind it to another port name."""
    profile = get_profile(name.lower())
    if device:
        profile = profile.with_device_name(device)
    return profile


def fail(error: Exception) -> None:
    """Print a short error message and exit with status 1."""
    if isinstance(error, LaunchGridError):
        click.echo(f"ERROR: {error.get_full_message()}", err=True)
    else:
        user_message, recovery_hint = format_error_for_display(error)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(recovery_hint, err=True)
    sys.exit(1)
