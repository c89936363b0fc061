"""launchgrid: Game of Life and media controls for Launchpad-style MIDI grids."""

__version__ = "0.1.0"

from .behaviors import AutomatonBehavior, MediaPanelBehavior
from .core import SurfaceLoop
from .devices import DeviceProfile, get_profile
from .midi import MidiTransport

__all__ = [
    "AutomatonBehavior",
    "DeviceProfile",
    "MediaPanelBehavior",
    "MidiTransport",
    "SurfaceLoop",
    "get_profile",
]
