"""Classification of raw device messages into button presses."""

from dataclasses import dataclass
from typing import Optional

from launchgrid.devices.protocols import IncomingEvent
from launchgrid.models import Section


@dataclass(frozen=True)
class ClassifiedInput:
    """A button press, tagged with its section."""

    section: Section
    key: int
    velocity: int


def classify(event: IncomingEvent) -> Optional[ClassifiedInput]:
    """
    Separate section, key and velocity of an incoming message.

    Releases are filtered here for every section, so only presses are
    ever dispatched. Bindings are not checked; a press on a key nobody
    handles is still classified.

    Args:
        event: Raw incoming message

    Returns:
        ClassifiedInput for a press, or None for releases and
        messages that are not button input

    Example:
        [0x90, 44, 127] → ClassifiedInput(MAIN, 44, 127)
        [0xB0, 104, 127] → ClassifiedInput(CONTROL, 104, 127)
        [0x90, 44, 0] → None
    """
    section = event.section
    if section is None:
        return None

    if event.is_release:
        return None

    return ClassifiedInput(section=section, key=event.key, velocity=event.velocity)
