"""CLI commands for launchgrid."""

from .midi import midi_group
from .run import life, media

__all__ = ["life", "media", "midi_group"]
