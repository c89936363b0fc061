"""Device-related exceptions.

This module defines exceptions for MIDI device errors:
- DeviceConnectionError: Base class for startup connection failures
- MidiBackendError: The MIDI subsystem could not be initialized
- DevicePortNotFoundError: No port with the requested name exists
- ProfileNotFoundError: Unknown device profile name
"""

from .base import LaunchGridError


class DeviceConnectionError(LaunchGridError):
    """Connecting to the control surface failed."""

    def __init__(self, user_message: str, device_name: str | None = None, **kwargs):
        """
        Initialize device connection error.

        Args:
            user_message: User-friendly error message
            device_name: The port name that was requested (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.device_name = device_name


class MidiBackendError(DeviceConnectionError):
    """The MIDI backend could not enumerate or open ports."""

    def __init__(self, original_error: str | None = None, device_name: str | None = None):
        """
        Initialize MIDI backend error.

        Args:
            original_error: The original error message from the MIDI library
            device_name: The port name that was being opened
        """
        user_msg = "Failed to initialize MIDI."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            device_name=device_name,
            recovery_hint="Make sure python-rtmidi is installed and the MIDI subsystem is running.",
        )


class DevicePortNotFoundError(DeviceConnectionError):
    """No input or output port matches the requested device name."""

    def __init__(self, device_name: str, direction: str):
        """
        Initialize port-not-found error.

        Args:
            device_name: The exact port name that was searched for
            direction: "input" or "output"
        """
        user_msg = f"MIDI {direction} port '{device_name}' not found."
        recovery = "Run 'launchgrid midi list' to see available ports, then pass --device."

        super().__init__(
            user_message=user_msg,
            device_name=device_name,
            recovery_hint=recovery,
        )
        self.direction = direction


class ProfileNotFoundError(LaunchGridError):
    """Requested device profile does not exist."""

    def __init__(self, name: str, known: list[str]):
        """
        Initialize profile-not-found error.

        Args:
            name: The profile name that was requested
            known: Names of the registered profiles
        """
        super().__init__(
            user_message=f"Unknown device profile '{name}'.",
            recovery_hint=f"Available profiles: {', '.join(known)}",
        )
        self.name = name
