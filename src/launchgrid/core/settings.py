"""Runtime constants for the surface loop."""

from pydantic import BaseModel, ConfigDict, Field


class RuntimeSettings(BaseModel):
    """Fixed runtime settings. Not loaded from disk."""

    model_config = ConfigDict(frozen=True)

    client_name: str = Field(default="launchgrid", description="MIDI client name")
    in_port_label: str = Field(default="port_in_launchgrid", description="Input binding label")
    out_port_label: str = Field(default="port_out_launchgrid", description="Output binding label")
    idle_interval: float = Field(
        default=0.05, gt=0, description="Sleep after an empty receive (seconds)"
    )
    tick_interval: float = Field(
        default=0.1, gt=0, description="Minimum time between simulation ticks (seconds)"
    )
    clear_on_exit: bool = Field(default=True, description="Turn all LEDs off when the loop ends")


DEFAULT_SETTINGS = RuntimeSettings()
