"""Configuration model for the countdown timer."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from rich.color import Color, ColorParseError


class TimerConfig(BaseModel):
    """User-tunable timer settings, stored as ``config.json``."""

    model_config = {"extra": "forbid"}

    poll_interval_ms: int = Field(
        default=100, ge=1, le=1000, description="Max wait for a key per loop"
    )
    running_color: str = Field(default="green", description="Time colour while counting")
    expired_color: str = Field(default="red", description="Time colour once at zero")
    blink: bool = Field(default=True, description="Blink the time while running")
    mouse_capture: bool = Field(default=True)
    fail_on_error: bool = Field(
        default=False, description="Exit non-zero when the terminal fails"
    )

    @field_validator("running_color", "expired_color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Accept only colours Rich can parse."""
        try:
            Color.parse(v)
        except ColorParseError as e:
            raise ValueError(f"Unknown colour: {v}") from e
        return v

    @property
    def poll_interval(self) -> float:
        """Poll interval in seconds."""
        return self.poll_interval_ms / 1000
