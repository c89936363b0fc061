"""Core loop: rendering and dispatch."""

from .loop import RunState, SurfaceLoop
from .renderer import FrameRenderer
from .settings import DEFAULT_SETTINGS, RuntimeSettings

__all__ = ["DEFAULT_SETTINGS", "FrameRenderer", "RunState", "RuntimeSettings", "SurfaceLoop"]
