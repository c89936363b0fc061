"""Wire-level device messages."""

from dataclasses import dataclass
from typing import Optional

import mido

from launchgrid.models import Section

# Status byte classes (upper nibble, channel stripped)
NOTE_OFF_STATUS = 0x80
NOTE_ON_STATUS = 0x90
CONTROL_STATUS = 0xB0


@dataclass(frozen=True)
class IncomingEvent:
    """Raw 3-byte message as received from the device."""

    status: int
    key: int
    velocity: int
    timestamp: float = 0.0

    @classmethod
    def from_bytes(cls, data, timestamp: float = 0.0) -> "IncomingEvent":
        """Build an event from a message payload (status, data1, data2)."""
        status, key, velocity = (list(data) + [0, 0, 0])[:3]
        return cls(status=status, key=key, velocity=velocity, timestamp=timestamp)

    @property
    def section(self) -> Optional[Section]:
        """Button zone derived from the status byte, or None for other messages."""
        kind = self.status & 0xF0
        if kind == CONTROL_STATUS:
            return Section.CONTROL
        if kind in (NOTE_ON_STATUS, NOTE_OFF_STATUS):
            return Section.MAIN
        return None

    @property
    def is_release(self) -> bool:
        """Velocity 0 and note-off both mean the button was let go."""
        return self.velocity == 0 or self.status & 0xF0 == NOTE_OFF_STATUS


@dataclass(frozen=True)
class LedCommand:
    """Set one LED to a palette color code (0 = off)."""

    key: int
    section: Section
    color_code: int

    def to_message(self) -> mido.Message:
        """Encode as a MIDI message: note_on for pads, control_change for the top row."""
        if self.section is Section.CONTROL:
            return mido.Message('control_change', control=self.key, value=self.color_code)
        return mido.Message('note_on', note=self.key, velocity=self.color_code)
