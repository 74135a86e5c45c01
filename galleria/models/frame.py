"""Frame styles and the per-request frame selection."""

from __future__ import annotations
from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from galleria.core.sanitize import non_negative_int


class FrameStyle(BaseModel):
    """Rendering parameters for a vector-drawn preset frame."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    border_width: int = 0           # Pixels, drawn on every side
    color: str = "#000000"
    has_shadow: bool = False
    double_line: bool = False       # Thin accent stroke inside the border
    accent_color: str = "#555555"   # Stroke color when double_line is set

    @field_validator("border_width", mode="before")
    @classmethod
    def _border_width(cls, value: object) -> int:
        return non_negative_int(value, 0)


class PresetFrame(BaseModel):
    """A frame drawn from a registry style."""
    mode: Literal["preset"] = "preset"
    style: str = "none"

    @field_validator("style", mode="before")
    @classmethod
    def _style(cls, value: object) -> str:
        return str(value or "none").strip().lower() or "none"


class ExternalFrame(BaseModel):
    """A frame supplied as an already-rendered raster (e.g. AI-generated)."""
    mode: Literal["external"] = "external"
    border_width: int = 0

    @field_validator("border_width", mode="before")
    @classmethod
    def _border_width(cls, value: object) -> int:
        return non_negative_int(value, 0)


FrameSpec = Annotated[Union[PresetFrame, ExternalFrame], Field(discriminator="mode")]
