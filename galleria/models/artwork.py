"""Artwork, mat and anchor inputs as supplied by the caller."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator

from galleria.core.sanitize import (
    non_negative_float, percentage, positive_float,
)

MIN_SCALE = 0.1


class Unit(str, Enum):
    """Unit the caller measured in. Carried along; it does not change the scale."""
    INCH = "in"
    CENTIMETER = "cm"

    @classmethod
    def parse(cls, value: object) -> Unit:
        """Unknown or missing units are treated as inches."""
        if isinstance(value, Unit):
            return value
        text = str(value or "").strip().lower()
        if text in ("cm", "centimeter", "centimeters", "centimetre", "centimetres"):
            return cls.CENTIMETER
        return cls.INCH


class ArtworkSpec(BaseModel):
    """Physical size of the artwork plus the user's scale multiplier."""
    model_config = ConfigDict(frozen=True)

    width: float = 1.0
    height: float = 1.0
    unit: Unit = Unit.INCH
    scale: float = 1.0

    @field_validator("width", "height", mode="before")
    @classmethod
    def _dimension(cls, value: object) -> float:
        return positive_float(value, 1.0)

    @field_validator("unit", mode="before")
    @classmethod
    def _unit(cls, value: object) -> Unit:
        return Unit.parse(value)

    @field_validator("scale", mode="before")
    @classmethod
    def _scale(cls, value: object) -> float:
        return max(MIN_SCALE, positive_float(value, 1.0))


class MatSpec(BaseModel):
    """Mat board option and its physical width (same unit as the artwork)."""
    model_config = ConfigDict(frozen=True)

    option: str = "none"
    width: float = 0.0

    @field_validator("option", mode="before")
    @classmethod
    def _option(cls, value: object) -> str:
        return str(value or "none").strip().lower() or "none"

    @field_validator("width", mode="before")
    @classmethod
    def _width(cls, value: object) -> float:
        return non_negative_float(value, 0.0)

    @property
    def enabled(self) -> bool:
        return self.option != "none"


class Anchor(BaseModel):
    """Target point for the framed artwork's center, in percent of the background."""
    model_config = ConfigDict(frozen=True)

    x: float = 50.0
    y: float = 45.0

    @field_validator("x", mode="before")
    @classmethod
    def _x(cls, value: object) -> float:
        return percentage(value, 50.0)

    @field_validator("y", mode="before")
    @classmethod
    def _y(cls, value: object) -> float:
        return percentage(value, 45.0)
