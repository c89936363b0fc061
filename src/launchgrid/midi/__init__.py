"""MIDI transport and input classification."""

from .classifier import ClassifiedInput, classify
from .transport import MidiTransport

__all__ = ["ClassifiedInput", "MidiTransport", "classify"]
