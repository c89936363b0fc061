"""Color model for LED control."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import Brightness, Hue


class Color(BaseModel):
    """Abstract LED color: a hue plus a brightness tier.

    Device-specific conversion to a velocity byte is handled by the
    palette table of the active device profile. The model is frozen so
    colors can be used as dict keys and shared freely between frames.
    """

    model_config = ConfigDict(frozen=True)

    hue: Hue = Field(description="LED hue")
    brightness: Brightness = Field(default=Brightness.MEDIUM, description="Brightness tier")

    @classmethod
    def off(cls) -> "Color":
        """Create off (unlit) color."""
        return cls(hue=Hue.OFF)

    @property
    def is_off(self) -> bool:
        """True if this color turns the LED off."""
        return self.hue is Hue.OFF
