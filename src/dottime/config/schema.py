"""Pydantic v2 preference models for dottime."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dottime.config.defaults import (
    DEFAULT_BIRTH_YEAR,
    DEFAULT_OVERLAY_OPACITY,
    DEFAULT_REMINDER_HOUR,
    DEFAULT_REMINDER_MINUTE,
    MIN_BIRTH_YEAR,
)

DotColorPreset = Literal["default", "silver", "ocean", "mint", "rose", "purple"]
BackgroundPreset = Literal[
    "none", "aurora", "marble", "mesh", "stars", "waves", "gold", "glass", "custom"
]
FontPreset = Literal["system", "inter", "roboto", "outfit", "space"]


class NotificationSettings(BaseModel):
    """Daily reminder settings."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    hour: int = Field(default=DEFAULT_REMINDER_HOUR, ge=0, le=23)
    minute: int = Field(default=DEFAULT_REMINDER_MINUTE, ge=0, le=59)


class Preferences(BaseModel):
    """Everything the user can configure."""

    model_config = ConfigDict(extra="forbid")

    view_mode: Literal["month", "year", "life"] = "month"
    birth_year: int | None = Field(
        default=None,
        description="Year of birth; only used by the life view",
    )
    dot_color: DotColorPreset = "default"
    background: BackgroundPreset = "none"
    custom_background_uri: str | None = Field(
        default=None,
        description="Image URI used when background is 'custom'",
    )
    overlay_opacity: float = Field(default=DEFAULT_OVERLAY_OPACITY, ge=0, le=1)
    font: FontPreset = "system"
    onboarding_complete: bool = False
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)

    @field_validator("birth_year")
    @classmethod
    def _validate_birth_year(cls, value: int | None) -> int | None:
        if value is None:
            return value
        current_year = date.today().year
        if not MIN_BIRTH_YEAR <= value <= current_year:
            raise ValueError(
                f"birth_year must be between {MIN_BIRTH_YEAR} and {current_year}, got {value}"
            )
        return value

    @property
    def effective_birth_year(self) -> int:
        """Stored birth year, or the default when none has been entered."""
        return self.birth_year if self.birth_year is not None else DEFAULT_BIRTH_YEAR
