"""Application behaviors that run on the pad grid."""

from .automaton import AutomatonBehavior, LifeBoard
from .base import ControlPress, DispatchOutcome, GridBehavior, PadPress, Press
from .media_panel import MediaPanelBehavior

__all__ = [
    "AutomatonBehavior",
    "ControlPress",
    "DispatchOutcome",
    "GridBehavior",
    "LifeBoard",
    "MediaPanelBehavior",
    "PadPress",
    "Press",
]
